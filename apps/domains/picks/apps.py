import locale
import logging

from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


def apply_collation_locale(name: str) -> None:
    """
    리더보드 이름 정렬(locale.strxfrm)이 따를 LC_COLLATE 설정.
    빈 값이면 아무 것도 하지 않는다 (C 로케일 = 코드포인트 순).
    """
    if not name:
        return
    try:
        locale.setlocale(locale.LC_COLLATE, name)
    except locale.Error as e:
        raise ImproperlyConfigured(
            f"PICKS_COLLATION_LOCALE={name!r} is not available on this host"
        ) from e
    logger.info("leaderboard collation locale | %s", name)


class PicksConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"

    # 🔥 Django 내부 경로
    name = "apps.domains.picks"

    # 🔥 migration / 참조용 앱 라벨 (절대 변경 금지)
    label = "picks"
    verbose_name = "Prediction Pool"

    def ready(self):
        apply_collation_locale(getattr(settings, "PICKS_COLLATION_LOCALE", ""))
