"""대차대조표 생성 통합 테스트"""

from datetime import date
from decimal import Decimal

import pytest

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.chart import ChartOfAccounts
from core.ledger.models import JournalDetail, JournalEntry, NewAccount
from core.ledger.store import LedgerStore

pytestmark = pytest.mark.integration


def _pair(entry_date: date, debit_id: int, credit_id: int, amount: str, status: str = "posted") -> JournalEntry:
    return JournalEntry(
        entry_date=entry_date,
        status=status,
        details=[
            JournalDetail(account_id=debit_id, debit=Decimal(amount)),
            JournalDetail(account_id=credit_id, credit=Decimal(amount)),
        ],
    )


class TestGenerateBalanceSheet:
    """generate_balance_sheet 테스트"""

    @pytest.mark.asyncio
    async def test_owner_investment(self, db: SQLiteAdapter) -> None:
        """현금 100 / 자본 100 출자"""
        chart = ChartOfAccounts(db)
        store = LedgerStore(db)
        cash = await chart.create_account(NewAccount("1000", "Cash", "asset"))
        equity = await chart.create_account(NewAccount("3000", "Equity", "equity"))

        await store.create_entry(_pair(date(2024, 1, 1), cash, equity, "100"))

        sheet = await store.generate_balance_sheet(date(2024, 1, 31))

        assert sheet.as_of_date == date(2024, 1, 31)
        assert [line.account_code for line in sheet.assets] == ["1000"]
        assert sheet.assets[0].balance == Decimal("100")
        assert sheet.total_assets == Decimal("100")
        assert sheet.total_liabilities == Decimal("0")
        # 자본은 대변 잔액 계정이므로 대변 - 차변
        assert sheet.equity[0].balance == Decimal("100")
        assert sheet.total_equity == Decimal("100")

    @pytest.mark.asyncio
    async def test_empty_chart(self, db: SQLiteAdapter) -> None:
        sheet = await LedgerStore(db).generate_balance_sheet(date(2024, 1, 31))

        assert sheet.assets == []
        assert sheet.liabilities == []
        assert sheet.equity == []
        assert sheet.total_assets == Decimal("0")

    @pytest.mark.asyncio
    async def test_revenue_and_expense_excluded(self, db: SQLiteAdapter) -> None:
        chart = ChartOfAccounts(db)
        store = LedgerStore(db)
        cash = await chart.create_account(NewAccount("1000", "Cash", "asset"))
        revenue = await chart.create_account(NewAccount("4000", "Sales", "revenue"))
        expense = await chart.create_account(NewAccount("5000", "Rent", "expense"))

        await store.create_entry(_pair(date(2024, 1, 5), cash, revenue, "300"))
        await store.create_entry(_pair(date(2024, 1, 6), expense, cash, "50"))

        sheet = await store.generate_balance_sheet(date(2024, 1, 31))
        codes = [line.account_code for line in sheet.assets + sheet.liabilities + sheet.equity]

        assert codes == ["1000"]
        assert sheet.total_assets == Decimal("250")

    @pytest.mark.asyncio
    async def test_accounts_without_activity_listed_with_zero(self, db: SQLiteAdapter) -> None:
        chart = ChartOfAccounts(db)
        await chart.create_account(NewAccount("2000", "Payables", "liability"))

        sheet = await LedgerStore(db).generate_balance_sheet(date(2024, 1, 31))

        assert len(sheet.liabilities) == 1
        assert sheet.liabilities[0].balance == Decimal("0")

    @pytest.mark.asyncio
    async def test_hierarchy_levels_and_order(self, db: SQLiteAdapter) -> None:
        """계정 코드 순, 루트 level 0. 상위 계정 잔액은 하위를 합산하지 않음"""
        chart = ChartOfAccounts(db)
        store = LedgerStore(db)
        assets = await chart.create_account(NewAccount("1000", "Assets", "asset"))
        cash = await chart.create_account(NewAccount("1100", "Cash", "asset", parent_id=assets))
        bank = await chart.create_account(NewAccount("1110", "Bank", "asset", parent_id=cash))
        equity = await chart.create_account(NewAccount("3000", "Equity", "equity"))

        await store.create_entry(_pair(date(2024, 1, 1), bank, equity, "80"))

        sheet = await store.generate_balance_sheet(date(2024, 1, 31))

        assert [(line.account_code, line.level) for line in sheet.assets] == [
            ("1000", 0),
            ("1100", 1),
            ("1110", 2),
        ]
        assert [line.balance for line in sheet.assets] == [Decimal("0"), Decimal("0"), Decimal("80")]
        assert sheet.assets[2].parent_id == cash
        assert sheet.total_assets == Decimal("80")

    @pytest.mark.asyncio
    async def test_as_of_date_boundary(self, db: SQLiteAdapter) -> None:
        """기준일 당일 분개는 포함, 다음날 분개는 제외"""
        chart = ChartOfAccounts(db)
        store = LedgerStore(db)
        cash = await chart.create_account(NewAccount("1000", "Cash", "asset"))
        loan = await chart.create_account(NewAccount("2000", "Loan", "liability"))

        await store.create_entry(_pair(date(2024, 1, 31), cash, loan, "10"))
        await store.create_entry(_pair(date(2024, 2, 1), cash, loan, "5"))
        await store.create_entry(_pair(date(2024, 1, 15), cash, loan, "7", status="draft"))

        sheet = await store.generate_balance_sheet(date(2024, 1, 31))

        assert sheet.total_assets == Decimal("10")
        assert sheet.total_liabilities == Decimal("10")
