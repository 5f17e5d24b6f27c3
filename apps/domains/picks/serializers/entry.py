# PATH: apps/domains/picks/serializers/entry.py
from rest_framework import serializers


class EntrySubmitSerializer(serializers.Serializer):
    """
    POST /picks/entries/ 입력 계약 (형태만 검사)

    - answers는 객체여야 함 (배열/문자열 거부)
    - 값의 0/1 여부, 필수 여부는 도메인 검증(pickpool.domain.picks.validation)이 판단
    """
    name = serializers.JSONField(required=False, allow_null=True)
    answers = serializers.DictField(
        child=serializers.JSONField(allow_null=True),
        required=False,
        allow_null=True,
    )
    tiebreaker = serializers.JSONField(required=False, allow_null=True)


class EntryCreatedSerializer(serializers.Serializer):
    entry_id = serializers.CharField()
