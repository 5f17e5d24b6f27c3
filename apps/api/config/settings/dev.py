from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

# 🔴 base 설정 유지 + 개발 중에는 브라우저에서 API 직접 확인
REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] = [
    "rest_framework.renderers.JSONRenderer",
    "rest_framework.renderers.BrowsableAPIRenderer",
]

LOGGING["root"]["level"] = "DEBUG"
