"""LedgerStore 통합 테스트"""

from datetime import date
from decimal import Decimal

import aiosqlite
import pytest
import pytest_asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.constants import LedgerLimits
from core.errors import InvalidRequestError, NotFoundError, UnbalancedEntryError
from core.ledger.chart import ChartOfAccounts
from core.ledger.models import JournalDetail, JournalEntry, NewAccount
from core.ledger.store import LedgerStore

pytestmark = pytest.mark.integration


@pytest_asyncio.fixture
async def store(db: SQLiteAdapter) -> LedgerStore:
    return LedgerStore(db)


@pytest_asyncio.fixture
async def accounts(db: SQLiteAdapter) -> dict[str, int]:
    """테스트용 계정 (코드 → id)"""
    chart = ChartOfAccounts(db)
    ids: dict[str, int] = {}
    for code, name, account_type in [
        ("1000", "Cash", "asset"),
        ("1200", "Receivables", "asset"),
        ("2000", "Payables", "liability"),
        ("3000", "Equity", "equity"),
        ("4000", "Revenue", "revenue"),
        ("5000", "Expenses", "expense"),
    ]:
        ids[code] = await chart.create_account(NewAccount(code, name, account_type))
    return ids


def _entry(
    entry_date: date,
    debit_id: int,
    credit_id: int,
    amount: str,
    status: str = "posted",
    reference_no: str | None = None,
) -> JournalEntry:
    return JournalEntry(
        entry_date=entry_date,
        reference_no=reference_no,
        status=status,
        details=[
            JournalDetail(account_id=debit_id, debit=Decimal(amount)),
            JournalDetail(account_id=credit_id, credit=Decimal(amount)),
        ],
    )


async def _count(db: SQLiteAdapter, table: str) -> int:
    row = await db.fetchone(f"SELECT COUNT(*) AS cnt FROM {table}")
    return row["cnt"]


class TestCreateEntry:
    """분개 저장 테스트"""

    @pytest.mark.asyncio
    async def test_create_and_get(self, store: LedgerStore, accounts: dict[str, int]) -> None:
        entry = JournalEntry(
            entry_date=date(2024, 1, 1),
            reference_no="JV-0001",
            description="Owner investment",
            created_by="web:admin",
            details=[
                JournalDetail(account_id=accounts["1000"], debit=Decimal("100.50"), description="cash in"),
                JournalDetail(account_id=accounts["3000"], credit=Decimal("100.50")),
            ],
        )

        entry_id = await store.create_entry(entry)
        saved = await store.get_entry(entry_id)

        assert saved["id"] == entry_id
        assert saved["entry_date"] == "2024-01-01"
        assert saved["reference_no"] == "JV-0001"
        assert saved["description"] == "Owner investment"
        assert saved["created_by"] == "web:admin"
        assert saved["status"] == "posted"
        assert len(saved["details"]) == 2

        first, second = saved["details"]
        assert first["account_code"] == "1000"
        assert first["account_name"] == "Cash"
        assert first["debit"] == Decimal("100.50")
        assert first["credit"] == Decimal("0")
        assert first["description"] == "cash in"
        assert second["account_code"] == "3000"
        assert second["credit"] == Decimal("100.50")

    @pytest.mark.asyncio
    async def test_unbalanced_rejected(
        self, store: LedgerStore, db: SQLiteAdapter, accounts: dict[str, int]
    ) -> None:
        """불균형 분개는 거부되고 아무것도 저장되지 않음"""
        entry = JournalEntry(
            entry_date=date(2024, 1, 1),
            details=[
                JournalDetail(account_id=accounts["1000"], debit=Decimal("100")),
                JournalDetail(account_id=accounts["3000"], credit=Decimal("90")),
            ],
        )

        with pytest.raises(UnbalancedEntryError, match="Debits and credits must be equal"):
            await store.create_entry(entry)

        assert await _count(db, "journal_entries") == 0
        assert await _count(db, "journal_details") == 0

    @pytest.mark.asyncio
    async def test_within_tolerance_accepted(self, store: LedgerStore, accounts: dict[str, int]) -> None:
        """0.01 차이는 허용"""
        entry = JournalEntry(
            entry_date=date(2024, 1, 1),
            details=[
                JournalDetail(account_id=accounts["1000"], debit=Decimal("100.00")),
                JournalDetail(account_id=accounts["3000"], credit=Decimal("100.01")),
            ],
        )

        entry_id = await store.create_entry(entry)

        assert entry_id > 0

    @pytest.mark.asyncio
    async def test_empty_details(self, store: LedgerStore) -> None:
        with pytest.raises(InvalidRequestError, match="at least one detail"):
            await store.create_entry(JournalEntry(entry_date=date(2024, 1, 1), details=[]))

    @pytest.mark.asyncio
    async def test_negative_amount(self, store: LedgerStore, accounts: dict[str, int]) -> None:
        entry = JournalEntry(
            entry_date=date(2024, 1, 1),
            details=[
                JournalDetail(account_id=accounts["1000"], debit=Decimal("-100")),
                JournalDetail(account_id=accounts["3000"], credit=Decimal("-100")),
            ],
        )

        with pytest.raises(InvalidRequestError, match="non-negative"):
            await store.create_entry(entry)

    @pytest.mark.asyncio
    async def test_amount_beyond_precision_rejected(
        self, store: LedgerStore, db: SQLiteAdapter, accounts: dict[str, int]
    ) -> None:
        """28자리를 넘는 금액은 합산 시 반올림되어 불균형이 가려지므로 거부"""
        entry = JournalEntry(
            entry_date=date(2024, 1, 1),
            details=[
                JournalDetail(
                    account_id=accounts["1000"],
                    debit=Decimal("1234567890123456789012345678.4"),
                ),
                JournalDetail(
                    account_id=accounts["3000"],
                    credit=Decimal("1234567890123456789012345678.0"),
                ),
            ],
        )

        with pytest.raises(InvalidRequestError, match="Amounts are limited to 20 digits"):
            await store.create_entry(entry)

        assert await _count(db, "journal_entries") == 0
        assert await _count(db, "journal_details") == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["1e1000000", "0.000000001"])
    async def test_amount_out_of_range_rejected(
        self, store: LedgerStore, db: SQLiteAdapter, accounts: dict[str, int], amount: str
    ) -> None:
        with pytest.raises(InvalidRequestError, match="Amounts are limited"):
            await store.create_entry(_entry(date(2024, 1, 1), accounts["1000"], accounts["3000"], amount))

        assert await _count(db, "journal_entries") == 0

    @pytest.mark.asyncio
    async def test_largest_amount_accepted(self, store: LedgerStore, accounts: dict[str, int]) -> None:
        """20자리 (소수점 이하 8자리) 금액은 그대로 저장"""
        amount = "999999999999.99999999"
        entry_id = await store.create_entry(
            _entry(date(2024, 1, 1), accounts["1000"], accounts["3000"], amount)
        )

        entry = await store.get_entry(entry_id)
        assert entry["details"][0]["debit"] == Decimal(amount)
        assert entry["details"][1]["credit"] == Decimal(amount)

    @pytest.mark.asyncio
    async def test_inexact_totals_rejected(
        self,
        store: LedgerStore,
        db: SQLiteAdapter,
        accounts: dict[str, int],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """합계를 정확히 계산할 수 없으면 불균형 판정 대신 InvalidRequestError"""
        monkeypatch.setattr(LedgerLimits, "AMOUNT_MAX_DIGITS", 40)
        entry = JournalEntry(
            entry_date=date(2024, 1, 1),
            details=[
                JournalDetail(account_id=accounts["1000"], debit=Decimal("1234567890123456789012345678.4")),
                JournalDetail(account_id=accounts["3000"], credit=Decimal("1234567890123456789012345678.0")),
            ],
        )

        with pytest.raises(InvalidRequestError, match="cannot be computed exactly"):
            await store.create_entry(entry)

        assert await _count(db, "journal_entries") == 0

    @pytest.mark.asyncio
    async def test_invalid_status(self, store: LedgerStore, accounts: dict[str, int]) -> None:
        with pytest.raises(InvalidRequestError, match="Invalid journal status"):
            await store.create_entry(
                _entry(date(2024, 1, 1), accounts["1000"], accounts["3000"], "10", status="approved")
            )

    @pytest.mark.asyncio
    async def test_unknown_account(
        self, store: LedgerStore, db: SQLiteAdapter, accounts: dict[str, int]
    ) -> None:
        with pytest.raises(NotFoundError, match="Account not found: 999"):
            await store.create_entry(_entry(date(2024, 1, 1), accounts["1000"], 999, "10"))

        assert await _count(db, "journal_entries") == 0

    @pytest.mark.asyncio
    async def test_failure_mid_write_rolls_back(
        self,
        store: LedgerStore,
        db: SQLiteAdapter,
        accounts: dict[str, int],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """두 번째 항목 저장 중 실패하면 헤더/첫 항목도 남지 않음"""
        original_execute = db.execute
        detail_inserts = 0

        async def failing_execute(sql, parameters=None):
            nonlocal detail_inserts
            if "INSERT INTO journal_details" in sql:
                detail_inserts += 1
                if detail_inserts == 2:
                    raise aiosqlite.OperationalError("disk I/O error")
            return await original_execute(sql, parameters)

        monkeypatch.setattr(db, "execute", failing_execute)

        with pytest.raises(aiosqlite.OperationalError):
            await store.create_entry(_entry(date(2024, 1, 1), accounts["1000"], accounts["3000"], "100"))

        monkeypatch.undo()

        assert db.in_transaction is False
        assert await _count(db, "journal_entries") == 0
        assert await _count(db, "journal_details") == 0


class TestListEntries:
    """분개 목록 테스트"""

    @pytest_asyncio.fixture
    async def seeded(self, store: LedgerStore, accounts: dict[str, int]) -> dict[str, int]:
        cash, equity, revenue = accounts["1000"], accounts["3000"], accounts["4000"]
        return {
            "jan1": await store.create_entry(_entry(date(2024, 1, 1), cash, equity, "100")),
            "jan15_a": await store.create_entry(_entry(date(2024, 1, 15), cash, revenue, "20")),
            "jan15_b": await store.create_entry(
                _entry(date(2024, 1, 15), cash, revenue, "30", status="draft")
            ),
            "feb1": await store.create_entry(_entry(date(2024, 2, 1), cash, revenue, "40")),
        }

    @pytest.mark.asyncio
    async def test_order(self, store: LedgerStore, seeded: dict[str, int]) -> None:
        """거래일 내림차순, 같은 날은 id 내림차순"""
        entries = await store.list_entries()

        assert [e["id"] for e in entries] == [
            seeded["feb1"],
            seeded["jan15_b"],
            seeded["jan15_a"],
            seeded["jan1"],
        ]

    @pytest.mark.asyncio
    async def test_details_attached(self, store: LedgerStore, seeded: dict[str, int]) -> None:
        entries = await store.list_entries()

        for entry in entries:
            assert len(entry["details"]) == 2
            assert all(d["journal_id"] == entry["id"] for d in entry["details"])

    @pytest.mark.asyncio
    async def test_date_range_inclusive(self, store: LedgerStore, seeded: dict[str, int]) -> None:
        entries = await store.list_entries(start_date=date(2024, 1, 15), end_date=date(2024, 2, 1))

        assert {e["id"] for e in entries} == {seeded["jan15_a"], seeded["jan15_b"], seeded["feb1"]}

    @pytest.mark.asyncio
    async def test_start_only(self, store: LedgerStore, seeded: dict[str, int]) -> None:
        entries = await store.list_entries(start_date=date(2024, 1, 16))

        assert [e["id"] for e in entries] == [seeded["feb1"]]

    @pytest.mark.asyncio
    async def test_status_filter(self, store: LedgerStore, seeded: dict[str, int]) -> None:
        entries = await store.list_entries(status="draft")

        assert [e["id"] for e in entries] == [seeded["jan15_b"]]

    @pytest.mark.asyncio
    async def test_combined_filters(self, store: LedgerStore, seeded: dict[str, int]) -> None:
        entries = await store.list_entries(
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
            status="posted",
        )

        assert [e["id"] for e in entries] == [seeded["jan15_a"], seeded["jan1"]]

    @pytest.mark.asyncio
    async def test_no_match(self, store: LedgerStore, seeded: dict[str, int]) -> None:
        assert await store.list_entries(start_date=date(2025, 1, 1)) == []

    @pytest.mark.asyncio
    async def test_get_missing(self, store: LedgerStore) -> None:
        with pytest.raises(NotFoundError, match="Journal entry not found"):
            await store.get_entry(404)


class TestBalances:
    """기준일 잔액 테스트"""

    @pytest.mark.asyncio
    async def test_balance_as_of_date(self, store: LedgerStore, accounts: dict[str, int]) -> None:
        """기준일 이후 분개와 POSTED가 아닌 분개는 제외"""
        cash, equity, payables = accounts["1000"], accounts["3000"], accounts["2000"]
        await store.create_entry(_entry(date(2024, 1, 1), cash, equity, "100"))
        await store.create_entry(_entry(date(2024, 1, 31), cash, payables, "25.25"))
        await store.create_entry(_entry(date(2024, 2, 1), cash, equity, "1000"))
        await store.create_entry(_entry(date(2024, 1, 10), cash, equity, "500", status="draft"))
        await store.create_entry(_entry(date(2024, 1, 10), cash, equity, "700", status="void"))

        balances = await store.get_account_balances(date(2024, 1, 31))

        assert balances[cash] == Decimal("125.25")
        assert balances[equity] == Decimal("-100")
        assert balances[payables] == Decimal("-25.25")

    @pytest.mark.asyncio
    async def test_no_entries_empty(self, store: LedgerStore, accounts: dict[str, int]) -> None:
        assert await store.get_account_balances(date(2024, 1, 31)) == {}

    @pytest.mark.asyncio
    async def test_decimal_precision(self, store: LedgerStore, accounts: dict[str, int]) -> None:
        """부동소수점 오차 없이 합산"""
        cash, revenue = accounts["1000"], accounts["4000"]
        for _ in range(10):
            await store.create_entry(_entry(date(2024, 1, 1), cash, revenue, "0.1"))

        balances = await store.get_account_balances(date(2024, 1, 1))

        assert balances[cash] == Decimal("1.0")
