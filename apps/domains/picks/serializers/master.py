# PATH: apps/domains/picks/serializers/master.py
from rest_framework import serializers


class MasterUpdateSerializer(serializers.Serializer):
    """
    POST /picks/admin/master/ 입력 계약

    ✅ 부분 갱신:
    - answers: 바꿀 문항만 (없으면 기존 값 유지)
    - tiebreaker: null / "" / 생략 = 기존 값 유지
    - 둘 다 비어 있으면 도메인에서 NoUpdatesProvided
    """
    answers = serializers.DictField(
        child=serializers.JSONField(allow_null=True),
        required=False,
        allow_null=True,
    )
    tiebreaker = serializers.JSONField(required=False, allow_null=True)
