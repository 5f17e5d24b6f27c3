from django.db import models
from django.db.models import Q

from apps.api.common.models import TimestampModel


class PickEntry(TimestampModel):
    """
    entries 테이블 — 제출자 1명당 1행 + 마스터 시트 1행

    - 일반 행: 제출 시 생성, 이후 수정 없음
    - 마스터 행: entry_id="MASTER_SHEET", 관리자 저장 때마다 병합 갱신
    """

    entry_id = models.CharField(max_length=64, unique=True)
    name = models.CharField(max_length=100)
    is_master = models.BooleanField(default=False, db_index=True)

    # 예: { "question_1": 0, "question_2": 1, ... }  (마스터는 미정 문항 null)
    answers = models.JSONField(default=dict)

    tiebreaker = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = "entries"
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["is_master"],
                condition=Q(is_master=True),
                name="entries_single_master",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.entry_id})"
