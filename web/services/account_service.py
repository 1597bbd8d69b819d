"""
계정과목표 서비스

ChartOfAccounts 조회/생성/수정
"""

from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.chart import ChartOfAccounts
from core.ledger.models import AccountPatch, NewAccount
from web.services.base import store_errors


class AccountService:
    """계정과목표 서비스

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.chart = ChartOfAccounts(db)

    async def get_accounts(self) -> list[dict[str, Any]]:
        """전체 계정 조회 (계정 코드 순)"""
        with store_errors("get_accounts", "Failed to retrieve chart of accounts"):
            return await self.chart.list_accounts()

    async def get_account(self, account_id: int) -> dict[str, Any]:
        """계정 단건 조회"""
        with store_errors("get_account", "Failed to retrieve account"):
            return await self.chart.get_account(account_id)

    async def create_account(self, account: NewAccount) -> int:
        """계정 생성

        Returns:
            생성된 계정 id
        """
        with store_errors("create_account", "Failed to create account"):
            return await self.chart.create_account(account)

    async def update_account(self, account_id: int, patch: AccountPatch) -> None:
        """계정 부분 수정"""
        with store_errors("update_account", "Failed to update account"):
            await self.chart.update_account(account_id, patch)
