"""
Ledger 저장소

복식부기 분개 저장 및 조회, 기준일 잔액 계산과 대차대조표 생성
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal, DecimalException
from typing import TYPE_CHECKING, Any

from core.constants import LedgerLimits
from core.errors import InvalidRequestError, NotFoundError, UnbalancedEntryError
from core.ledger.chart import ChartOfAccounts
from core.ledger.models import BalanceSheet, BalanceSheetLine, JournalEntry, amount_within_limits
from core.ledger.types import JournalStatus, normal_balance

if TYPE_CHECKING:
    import aiosqlite

    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


def _chunks(ids: list[int], size: int) -> list[list[int]]:
    return [ids[i:i + size] for i in range(0, len(ids), size)]


def _entry_from_row(row: aiosqlite.Row) -> dict[str, Any]:
    return {
        "id": row["id"],
        "entry_date": row["entry_date"],
        "reference_no": row["reference_no"],
        "description": row["description"],
        "created_by": row["created_by"],
        "status": row["status"],
        "created_at": row["created_at"],
        "details": [],
    }


def _detail_from_row(row: aiosqlite.Row) -> dict[str, Any]:
    return {
        "id": row["id"],
        "journal_id": row["journal_id"],
        "account_id": row["account_id"],
        "account_code": row["account_code"],
        "account_name": row["account_name"],
        "debit": _to_decimal(row["debit"]),
        "credit": _to_decimal(row["credit"]),
        "description": row["description"],
    }


class LedgerStore:
    """Ledger 저장소

    분개 생성 시 균형 검증, 헤더 + 항목을 하나의 트랜잭션으로 저장.
    잔액은 저장하지 않고 POSTED 분개에서 매번 계산.

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.chart = ChartOfAccounts(db)

    # -------------------------------------------------------------------------
    # 분개 저장
    # -------------------------------------------------------------------------

    async def create_entry(self, entry: JournalEntry) -> int:
        """분개 저장

        트랜잭션 내에서 journal_entries + journal_details 저장.
        중간에 실패하면 전체 롤백 (부분 저장 없음).

        Args:
            entry: 저장할 분개

        Returns:
            저장된 분개 id

        Raises:
            InvalidRequestError: 항목 없음, 음수 금액, 금액 자릿수 초과, 잘못된 상태
            UnbalancedEntryError: |차변 합계 - 대변 합계| > 0.01
            NotFoundError: 참조 계정이 없는 경우
        """
        self._validate_entry(entry)

        async with self.db.transaction():
            await self._require_accounts({d.account_id for d in entry.details})

            cursor = await self.db.execute(
                """
                INSERT INTO journal_entries (
                    entry_date, reference_no, description, created_by, status
                ) VALUES (?, ?, ?, ?, ?)
                """,
                (
                    entry.entry_date.isoformat(),
                    entry.reference_no,
                    entry.description,
                    entry.created_by,
                    entry.status,
                ),
            )
            journal_id = cursor.lastrowid

            for i, detail in enumerate(entry.details):
                await self.db.execute(
                    """
                    INSERT INTO journal_details (
                        journal_id, account_id, debit, credit, description, line_order
                    ) VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        journal_id,
                        detail.account_id,
                        str(detail.debit),
                        str(detail.credit),
                        detail.description,
                        i,
                    ),
                )

        logger.info(
            f"Journal entry created: {journal_id}",
            extra={
                "entry_date": entry.entry_date.isoformat(),
                "line_count": len(entry.details),
                "total": str(entry.total_debit),
            },
        )
        return journal_id

    def _validate_entry(self, entry: JournalEntry) -> None:
        if not entry.details:
            raise InvalidRequestError("Journal entry must have at least one detail line")

        for detail in entry.details:
            if not detail.debit.is_finite() or not detail.credit.is_finite():
                raise InvalidRequestError("Debit and credit amounts must be finite numbers")
            if detail.debit < 0 or detail.credit < 0:
                raise InvalidRequestError("Debit and credit amounts must be non-negative")
            if not amount_within_limits(detail.debit) or not amount_within_limits(detail.credit):
                raise InvalidRequestError(
                    f"Amounts are limited to {LedgerLimits.AMOUNT_MAX_DIGITS} digits "
                    f"with {LedgerLimits.AMOUNT_DECIMAL_PLACES} decimal places"
                )

        if entry.status not in {s.value for s in JournalStatus}:
            raise InvalidRequestError(f"Invalid journal status: {entry.status}")

        try:
            balanced = entry.is_balanced()
        except DecimalException:
            raise InvalidRequestError("Journal entry totals cannot be computed exactly") from None

        if not balanced:
            logger.warning(
                "Unbalanced journal entry rejected",
                extra={
                    "total_debit": str(entry.total_debit),
                    "total_credit": str(entry.total_credit),
                },
            )
            raise UnbalancedEntryError(entry.total_debit, entry.total_credit)

    async def _require_accounts(self, account_ids: set[int]) -> None:
        """참조 계정 존재 확인"""
        found: set[int] = set()
        for chunk in _chunks(sorted(account_ids), LedgerLimits.ID_CHUNK_SIZE):
            placeholders = ", ".join("?" for _ in chunk)
            rows = await self.db.fetchall(
                f"SELECT id FROM chart_of_accounts WHERE id IN ({placeholders})",
                tuple(chunk),
            )
            found.update(row["id"] for row in rows)

        missing = sorted(account_ids - found)
        if missing:
            raise NotFoundError(f"Account not found: {', '.join(str(i) for i in missing)}")

    # -------------------------------------------------------------------------
    # 분개 조회
    # -------------------------------------------------------------------------

    async def list_entries(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        status: str | None = None,
    ) -> list[dict[str, Any]]:
        """분개 목록 조회

        필터는 모두 AND 조건 (기간은 양끝 포함).
        정렬: entry_date DESC, id DESC.
        각 분개에 항목(계정 코드/이름 포함)을 붙여서 반환.

        Args:
            start_date: 시작일 (포함)
            end_date: 종료일 (포함)
            status: 상태 일치

        Returns:
            분개 목록
        """
        sql = """
            SELECT id, entry_date, reference_no, description, created_by, status, created_at
            FROM journal_entries
            WHERE 1=1
        """
        params: list[Any] = []

        if start_date is not None:
            sql += " AND entry_date >= ?"
            params.append(start_date.isoformat())
        if end_date is not None:
            sql += " AND entry_date <= ?"
            params.append(end_date.isoformat())
        if status:
            sql += " AND status = ?"
            params.append(status)

        sql += " ORDER BY entry_date DESC, id DESC"

        rows = await self.db.fetchall(sql, tuple(params))
        entries = [_entry_from_row(row) for row in rows]

        details = await self._fetch_details([e["id"] for e in entries])
        for entry in entries:
            entry["details"] = details.get(entry["id"], [])

        return entries

    async def get_entry(self, entry_id: int) -> dict[str, Any]:
        """분개 단건 조회

        Raises:
            NotFoundError: 분개가 없는 경우
        """
        row = await self.db.fetchone(
            """
            SELECT id, entry_date, reference_no, description, created_by, status, created_at
            FROM journal_entries
            WHERE id = ?
            """,
            (entry_id,),
        )
        if row is None:
            raise NotFoundError("Journal entry not found")

        entry = _entry_from_row(row)
        details = await self._fetch_details([entry_id])
        entry["details"] = details.get(entry_id, [])
        return entry

    async def _fetch_details(self, entry_ids: list[int]) -> dict[int, list[dict[str, Any]]]:
        """여러 분개의 항목을 한 번에 조회하여 분개 id별로 묶음"""
        grouped: dict[int, list[dict[str, Any]]] = defaultdict(list)

        for chunk in _chunks(entry_ids, LedgerLimits.ID_CHUNK_SIZE):
            placeholders = ", ".join("?" for _ in chunk)
            rows = await self.db.fetchall(
                f"""
                SELECT
                    d.id,
                    d.journal_id,
                    d.account_id,
                    d.debit,
                    d.credit,
                    d.description,
                    a.account_code,
                    a.account_name
                FROM journal_details d
                JOIN chart_of_accounts a ON d.account_id = a.id
                WHERE d.journal_id IN ({placeholders})
                ORDER BY d.journal_id, d.line_order, d.id
                """,
                tuple(chunk),
            )
            for row in rows:
                grouped[row["journal_id"]].append(_detail_from_row(row))

        return grouped

    # -------------------------------------------------------------------------
    # 잔액 / 대차대조표
    # -------------------------------------------------------------------------

    async def get_account_balances(self, as_of_date: date) -> dict[int, Decimal]:
        """기준일 계정별 잔액

        잔액 = 차변 합계 - 대변 합계.
        POSTED 상태이고 entry_date <= 기준일인 분개만 포함.
        금액은 문자열로 저장되므로 Decimal로 합산.

        Returns:
            {account_id: 잔액} (분개가 없는 계정은 포함되지 않음)
        """
        rows = await self.db.fetchall(
            """
            SELECT jd.account_id, jd.debit, jd.credit
            FROM journal_details jd
            JOIN journal_entries je ON jd.journal_id = je.id
            WHERE je.status = ?
              AND je.entry_date <= ?
            """,
            (JournalStatus.POSTED.value, as_of_date.isoformat()),
        )

        balances: dict[int, Decimal] = defaultdict(lambda: Decimal("0"))
        for row in rows:
            balances[row["account_id"]] += _to_decimal(row["debit"]) - _to_decimal(row["credit"])

        return dict(balances)

    async def generate_balance_sheet(self, as_of_date: date) -> BalanceSheet:
        """대차대조표 생성

        1. 계정 계층 펼치기 (루트 level 0)
        2. 계정별 기준일 잔액 (없으면 0), 정상 잔액 방향으로 표시
        3. ASSET / LIABILITY / EQUITY만 유형별로 분류
        4. 유형별 합계

        예: 현금 차변 100 / 자본 대변 100 → 자산 합계 100, 자본 합계 100

        Args:
            as_of_date: 기준일 (포함)
        """
        hierarchy = await self.chart.get_hierarchy()
        balances = await self.get_account_balances(as_of_date)

        lines = [
            BalanceSheetLine(
                id=account["id"],
                account_code=account["account_code"],
                account_name=account["account_name"],
                account_type=account["account_type"],
                parent_id=account["parent_id"],
                level=account["level"],
                balance=normal_balance(
                    account["account_type"],
                    balances.get(account["id"], Decimal("0")),
                ),
            )
            for account in hierarchy
        ]

        sheet = BalanceSheet.from_lines(as_of_date, lines)
        logger.debug(
            f"Balance sheet generated: {as_of_date.isoformat()}",
            extra={
                "total_assets": str(sheet.total_assets),
                "total_liabilities": str(sheet.total_liabilities),
                "total_equity": str(sheet.total_equity),
            },
        )
        return sheet
