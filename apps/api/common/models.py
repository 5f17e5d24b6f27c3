# PATH: apps/api/common/models.py
from django.db import models


class TimestampModel(models.Model):
    """
    생성 / 수정 시간 자동 기록 추상 모델

    - created_at: 제출 순서(마스터 없는 스코어보드 정렬 기준)
    - updated_at: 마스터 시트처럼 제자리 갱신되는 행만 의미 있음
    """
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
