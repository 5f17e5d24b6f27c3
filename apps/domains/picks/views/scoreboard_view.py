# PATH: apps/domains/picks/views/scoreboard_view.py
from __future__ import annotations

from django.conf import settings
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.domains.picks.views.base import PicksAPIView
from pickpool.application.use_cases.picks.read_entries import get_scoreboard


class ScoreboardView(PicksAPIView):
    """
    GET /api/v1/picks/scoreboard/

    - master 없음: leaderboard는 제출 순서, score/rank = null
    - master 있음: 점수 desc → 이름 asc
    ⚠️ tiebreaker는 순위에 반영하지 않음 (표시용)
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        limit = getattr(settings, "PICKS_LEADERBOARD_LIMIT", None)
        board = get_scoreboard(self.get_uow(), limit=limit)

        return Response({
            "entries": [e.to_dict() for e in board.entries],
            "master": board.master.to_dict() if board.master else None,
            "leaderboard": [row.to_dict() for row in board.leaderboard],
        })
