# PATH: apps/domains/picks/views/master_view.py
from __future__ import annotations

from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.domains.picks.permissions import IsPoolAdmin
from apps.domains.picks.serializers.master import MasterUpdateSerializer
from apps.domains.picks.utils.responses import domain_error_response
from apps.domains.picks.views.base import PicksAPIView
from pickpool.application.use_cases.picks.read_entries import get_master
from pickpool.application.use_cases.picks.save_master import save_master
from pickpool.domain.picks.errors import PicksDomainError


class MasterSheetView(PicksAPIView):
    """
    GET  /api/v1/picks/admin/master/  → {"master": {...} | null}
    POST /api/v1/picks/admin/master/  → 부분 갱신 병합

    body:
    {
      "answers": {"question_1": 1},   # 선택
      "tiebreaker": 100               # 선택
    }
    """

    permission_classes = [IsAuthenticated, IsPoolAdmin]

    def get(self, request):
        master = get_master(self.get_uow())
        return Response({"master": master.to_dict() if master else None})

    def post(self, request):
        serializer = MasterUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            master = save_master(
                self.get_uow(),
                answers=data.get("answers"),
                tiebreaker=data.get("tiebreaker"),
            )
        except PicksDomainError as e:
            return domain_error_response(e)

        return Response({"ok": True, "master": master.to_dict()})
