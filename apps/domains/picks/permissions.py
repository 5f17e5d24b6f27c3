# PATH: apps/domains/picks/permissions.py
from __future__ import annotations

from rest_framework.permissions import BasePermission


def is_pool_admin(u) -> bool:
    return bool(getattr(u, "is_superuser", False) or getattr(u, "is_staff", False))


class IsPoolAdmin(BasePermission):
    """
    마스터 시트 조회/저장 권한.
    Session 또는 JWT로 인증된 staff / superuser만.
    """

    def has_permission(self, request, view):
        u = getattr(request, "user", None)
        return bool(u and u.is_authenticated and is_pool_admin(u))
