# PATH: apps/domains/picks/utils/responses.py
from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response

from pickpool.domain.picks.errors import (
    NotFound,
    PersistenceFailure,
    PicksDomainError,
    ValidationFailed,
)


def domain_error_response(exc: PicksDomainError) -> Response:
    """
    도메인 오류 → HTTP 응답 (단일 매핑)
    - 검증 오류: 400
    - 엔트리 없음: 404
    - 저장 실패: 500 (부분 상태 없음)
    """
    if isinstance(exc, ValidationFailed):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFound):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, PersistenceFailure):
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    else:
        code = status.HTTP_400_BAD_REQUEST

    body = {"detail": exc.message}
    if exc.field:
        body["field"] = exc.field
    return Response(body, status=code)
