"""
재무제표 서비스

기준일 대차대조표
"""

from datetime import date
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.store import LedgerStore
from web.services.base import store_errors


class ReportService:
    """재무제표 서비스

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.ledger_store = LedgerStore(db)

    async def get_balance_sheet(self, as_of_date: date) -> dict[str, Any]:
        """대차대조표 조회

        Args:
            as_of_date: 기준일 (포함)

        Returns:
            유형별 계정 목록과 합계
        """
        with store_errors("get_balance_sheet", "Failed to generate balance sheet"):
            sheet = await self.ledger_store.generate_balance_sheet(as_of_date)
        return sheet.to_dict()
