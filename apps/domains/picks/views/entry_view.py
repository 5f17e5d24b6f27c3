# PATH: apps/domains/picks/views/entry_view.py
from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.domains.picks.serializers.entry import EntryCreatedSerializer, EntrySubmitSerializer
from apps.domains.picks.utils.responses import domain_error_response
from apps.domains.picks.views.base import PicksAPIView
from pickpool.application.use_cases.picks.read_entries import get_entry, get_score
from pickpool.application.use_cases.picks.submit_entry import submit_entry
from pickpool.domain.picks.errors import PicksDomainError


class EntrySubmitView(PicksAPIView):
    """
    POST /api/v1/picks/entries/

    body:
    {
      "name": "Amy",
      "answers": {"question_1": 0, ..., "question_19": 1},
      "tiebreaker": 112.5
    }

    ✅ 전부 검증 후 insert 1회 (부분 저장 없음)
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = EntrySubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            entry = submit_entry(
                self.get_uow(),
                name=data.get("name"),
                answers=data.get("answers"),
                tiebreaker=data.get("tiebreaker"),
            )
        except PicksDomainError as e:
            return domain_error_response(e)

        return Response(
            EntryCreatedSerializer({"entry_id": entry.entry_id}).data,
            status=status.HTTP_201_CREATED,
        )


class EntryDetailView(PicksAPIView):
    """
    GET /api/v1/picks/entries/<entry_id>/
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, entry_id: str):
        try:
            entry = get_entry(self.get_uow(), entry_id)
        except PicksDomainError as e:
            return domain_error_response(e)
        return Response({"entry": entry.to_dict()})


class EntryScoreView(PicksAPIView):
    """
    GET /api/v1/picks/entries/<entry_id>/score/

    응답:
    - entry / master: 원본 행 (master 없으면 null)
    - result: 서버 채점 결과 (score, 문항별 correct/wrong/pending, tiebreaker 상태)

    프론트는 5초 주기로 폴링한다.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, entry_id: str):
        try:
            view = get_score(self.get_uow(), entry_id)
        except PicksDomainError as e:
            return domain_error_response(e)

        return Response({
            "entry": view.entry.to_dict(),
            "master": view.master.to_dict() if view.master else None,
            "result": view.result,
        })
