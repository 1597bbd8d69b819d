"""
분개 서비스

LedgerStore 분개 조회/생성
"""

from datetime import date
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.errors import InvalidRequestError
from core.ledger.models import JournalEntry
from core.ledger.store import LedgerStore
from web.services.base import store_errors


class JournalService:
    """분개 서비스

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.ledger_store = LedgerStore(db)

    async def get_entries(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        status: str | None = None,
    ) -> list[dict[str, Any]]:
        """분개 목록 조회

        Args:
            start_date: 시작일 (포함)
            end_date: 종료일 (포함)
            status: 상태 필터

        Returns:
            분개 목록 (항목 포함), 최신 거래일 순
        """
        if start_date and end_date and start_date > end_date:
            raise InvalidRequestError("start_date must not be after end_date")

        with store_errors("get_entries", "Failed to retrieve journal entries"):
            return await self.ledger_store.list_entries(start_date, end_date, status)

    async def get_entry(self, entry_id: int) -> dict[str, Any]:
        """분개 단건 조회"""
        with store_errors("get_entry", "Failed to retrieve journal entry"):
            return await self.ledger_store.get_entry(entry_id)

    async def create_entry(self, entry: JournalEntry) -> int:
        """분개 생성

        Returns:
            생성된 분개 id
        """
        with store_errors("create_entry", "Failed to create journal entry"):
            return await self.ledger_store.create_entry(entry)
