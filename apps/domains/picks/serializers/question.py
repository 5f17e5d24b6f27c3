# PATH: apps/domains/picks/serializers/question.py
from rest_framework import serializers


class QuestionSerializer(serializers.Serializer):
    """문항 카탈로그 응답 (pickpool.domain.picks.catalog.Question)"""
    key = serializers.CharField()
    text = serializers.CharField()
    options = serializers.ListField(child=serializers.CharField())
