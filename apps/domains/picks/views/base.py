# PATH: apps/domains/picks/views/base.py
from __future__ import annotations

from rest_framework.parsers import JSONParser
from rest_framework.views import APIView

from pickpool.adapters.db.django.uow import DjangoUnitOfWork


class PicksAPIView(APIView):
    """
    picks 뷰 공통
    - JSON body만 받는다 (form 입력 미지원)
    - 요청마다 새 UnitOfWork를 만들어 use case에 명시적으로 넘긴다 (전역 핸들 없음)
    """

    parser_classes = [JSONParser]
    uow_class = DjangoUnitOfWork

    def get_uow(self):
        return self.uow_class()
