# PATH: apps/domains/picks/views/question_view.py
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.picks.serializers.question import QuestionSerializer
from pickpool.domain.picks.catalog import QUESTIONS, TIEBREAKER_LABEL


class QuestionCatalogView(APIView):
    """GET /api/v1/picks/questions/ — 폼 렌더링용 고정 카탈로그"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({
            "questions": QuestionSerializer(QUESTIONS, many=True).data,
            "tiebreaker_label": TIEBREAKER_LABEL,
        })
