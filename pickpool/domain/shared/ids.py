"""
도메인 공통: ID 생성 (외부 라이브러리 없음)
"""
from __future__ import annotations

import uuid

# 마스터 시트 전용 고정 ID. generate_entry_id()가 만드는 UUID 형식과 절대 겹치지 않음.
MASTER_ENTRY_ID = "MASTER_SHEET"
MASTER_ENTRY_NAME = "Master Sheet"


def generate_entry_id() -> str:
    """제출자 엔트리 ID (UUID4 문자열)."""
    return str(uuid.uuid4())
