# apps/api/common/middleware.py
# 뷰에서 미처리 예외 발생 시 500 JSON 반환.
# process_exception 응답은 CorsMiddleware를 거치지 않으므로 여기서 CORS 헤더 추가.
from __future__ import annotations

import logging

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def _add_cors_headers_to_response(request, response):
    origin = (request.META.get("HTTP_ORIGIN") or "").strip()
    if not origin:
        return response
    allowed = getattr(settings, "CORS_ALLOWED_ORIGINS", []) or []
    if getattr(settings, "CORS_ALLOW_ALL_ORIGINS", False) or origin in allowed:
        response["Access-Control-Allow-Origin"] = origin
    if getattr(settings, "CORS_ALLOW_CREDENTIALS", False):
        response["Access-Control-Allow-Credentials"] = "true"
    return response


class UnhandledExceptionMiddleware:
    """미처리 예외를 500 JSON으로 변환. 상세 내용은 로그에만 남긴다."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.path)
        resp = JsonResponse({"detail": "Internal server error."}, status=500)
        return _add_cors_headers_to_response(request, resp)
