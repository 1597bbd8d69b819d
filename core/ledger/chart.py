"""
계정과목표 관리

계정 조회/생성/수정 및 계층 구조 탐색.
계정 코드 유일성, 상위 계정 참조 무결성 보장.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import aiosqlite

from core.constants import LedgerLimits
from core.errors import (
    DuplicateCodeError,
    InvalidParentError,
    InvalidRequestError,
    NotFoundError,
)
from core.ledger.models import AccountPatch, NewAccount
from core.ledger.types import AccountType

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


_ACCOUNT_SELECT = """
    SELECT
        a.id,
        a.account_code,
        a.account_name,
        a.account_type,
        a.description,
        a.parent_id,
        a.created_at,
        a.updated_at,
        p.account_name AS parent_account_name,
        (SELECT COUNT(*) FROM chart_of_accounts c WHERE c.parent_id = a.id) AS child_count
    FROM chart_of_accounts a
    LEFT JOIN chart_of_accounts p ON a.parent_id = p.id
"""

# 수정 시 비울 수 없는 필드 (NOT NULL)
_REQUIRED_FIELDS = ("account_name", "account_type")


def _account_from_row(row: aiosqlite.Row) -> dict[str, Any]:
    return {
        "id": row["id"],
        "account_code": row["account_code"],
        "account_name": row["account_name"],
        "account_type": row["account_type"],
        "description": row["description"],
        "parent_id": row["parent_id"],
        "parent_account_name": row["parent_account_name"],
        "has_children": row["child_count"] > 0,
        "child_count": row["child_count"],
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
    }


def _validate_account_type(account_type: str) -> None:
    if account_type not in AccountType.values():
        raise InvalidRequestError(
            f"Invalid account type: {account_type}. "
            f"Valid types: {AccountType.values()}"
        )


class ChartOfAccounts:
    """계정과목표 관리자

    상태를 갖지 않음. 다단계 쓰기는 하나의 트랜잭션 안에서 수행.

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    async def list_accounts(self) -> list[dict[str, Any]]:
        """전체 계정 조회 (계정 코드 오름차순)

        상위 계정명과 하위 계정 존재 여부 포함.
        """
        rows = await self.db.fetchall(_ACCOUNT_SELECT + " ORDER BY a.account_code")
        return [_account_from_row(row) for row in rows]

    async def get_account(self, account_id: int) -> dict[str, Any]:
        """계정 단건 조회

        Raises:
            NotFoundError: 계정이 없는 경우
        """
        row = await self.db.fetchone(_ACCOUNT_SELECT + " WHERE a.id = ?", (account_id,))
        if row is None:
            raise NotFoundError("Account not found")
        return _account_from_row(row)

    async def account_exists(self, account_id: int) -> bool:
        row = await self.db.fetchone(
            "SELECT id FROM chart_of_accounts WHERE id = ?",
            (account_id,),
        )
        return row is not None

    async def get_hierarchy(self) -> list[dict[str, Any]]:
        """계정 계층 펼치기

        루트(parent_id IS NULL)부터 하위로 재귀 탐색하며 level 부여 (루트 = 0).
        방문 경로를 추적하여 같은 계정을 두 번 지나지 않고,
        최대 깊이를 넘으면 탐색 중단.

        Returns:
            (계정, level) 목록, 계정 코드 순
        """
        rows = await self.db.fetchall(
            """
            WITH RECURSIVE account_hierarchy AS (
                SELECT
                    id,
                    account_code,
                    account_name,
                    account_type,
                    parent_id,
                    0 AS level,
                    '/' || id || '/' AS visited
                FROM chart_of_accounts
                WHERE parent_id IS NULL

                UNION ALL

                SELECT
                    c.id,
                    c.account_code,
                    c.account_name,
                    c.account_type,
                    c.parent_id,
                    ah.level + 1,
                    ah.visited || c.id || '/'
                FROM chart_of_accounts c
                INNER JOIN account_hierarchy ah ON c.parent_id = ah.id
                WHERE ah.level < ?
                  AND instr(ah.visited, '/' || c.id || '/') = 0
            )
            SELECT id, account_code, account_name, account_type, parent_id, level
            FROM account_hierarchy
            ORDER BY account_code
            """,
            (LedgerLimits.MAX_HIERARCHY_DEPTH,),
        )

        return [
            {
                "id": row["id"],
                "account_code": row["account_code"],
                "account_name": row["account_name"],
                "account_type": row["account_type"],
                "parent_id": row["parent_id"],
                "level": row["level"],
            }
            for row in rows
        ]

    async def get_descendant_ids(self, account_id: int) -> set[int]:
        """하위 계정 id 전체 (자기 자신 제외)"""
        rows = await self.db.fetchall(
            """
            WITH RECURSIVE descendants(id, depth) AS (
                SELECT id, 1 FROM chart_of_accounts WHERE parent_id = ?
                UNION
                SELECT c.id, d.depth + 1
                FROM chart_of_accounts c
                INNER JOIN descendants d ON c.parent_id = d.id
                WHERE d.depth < ?
            )
            SELECT DISTINCT id FROM descendants
            """,
            (account_id, LedgerLimits.MAX_HIERARCHY_DEPTH),
        )
        return {row["id"] for row in rows}

    # -------------------------------------------------------------------------
    # 생성 / 수정
    # -------------------------------------------------------------------------

    async def create_account(self, account: NewAccount) -> int:
        """계정 생성

        중복 코드 사전 확인 + 삽입을 하나의 트랜잭션에서 수행.
        동시 삽입으로 사전 확인을 통과하더라도 UNIQUE 제약 위반을
        DuplicateCodeError로 변환.

        Args:
            account: 생성할 계정

        Returns:
            생성된 계정 id

        Raises:
            DuplicateCodeError: 계정 코드 중복
            NotFoundError: 상위 계정이 없는 경우
            InvalidRequestError: 입력값 오류
        """
        if not account.account_code or not account.account_code.strip():
            raise InvalidRequestError("Account code is required")
        if not account.account_name or not account.account_name.strip():
            raise InvalidRequestError("Account name is required")
        _validate_account_type(account.account_type)

        async with self.db.transaction():
            existing = await self.db.fetchone(
                "SELECT id FROM chart_of_accounts WHERE account_code = ?",
                (account.account_code,),
            )
            if existing is not None:
                raise DuplicateCodeError(account.account_code)

            if account.parent_id is not None and not await self.account_exists(account.parent_id):
                raise NotFoundError("Parent account not found")

            try:
                cursor = await self.db.execute(
                    """
                    INSERT INTO chart_of_accounts (
                        account_code, account_name, account_type, description, parent_id
                    ) VALUES (?, ?, ?, ?, ?)
                    """,
                    (
                        account.account_code,
                        account.account_name,
                        account.account_type,
                        account.description,
                        account.parent_id,
                    ),
                )
            except aiosqlite.IntegrityError as e:
                if "chart_of_accounts.account_code" in str(e):
                    raise DuplicateCodeError(account.account_code) from e
                raise

            account_id = cursor.lastrowid

        logger.info(
            f"Account created: {account.account_code}",
            extra={"account_id": account_id, "account_type": account.account_type},
        )
        return account_id

    async def update_account(self, account_id: int, patch: AccountPatch) -> None:
        """계정 부분 수정

        patch에 지정된 필드만 변경. None 지정 시 값을 비움.
        상위 계정 변경 시 자기 자신/하위 계정 지정 금지 (순환 방지).

        Raises:
            NotFoundError: 계정 또는 상위 계정이 없는 경우
            InvalidRequestError: 필수 필드를 비우려는 경우, 유형 오류
            InvalidParentError: 순환 구조가 되는 상위 계정
        """
        changes = patch.changes()

        for name in _REQUIRED_FIELDS:
            if name in changes and changes[name] is None:
                raise InvalidRequestError(f"{name} cannot be cleared")
        if "account_name" in changes and not str(changes["account_name"]).strip():
            raise InvalidRequestError("Account name is required")
        if "account_type" in changes:
            _validate_account_type(changes["account_type"])

        async with self.db.transaction():
            if not await self.account_exists(account_id):
                raise NotFoundError("Account not found")

            parent_id = changes.get("parent_id")
            if parent_id is not None:
                await self._check_parent(account_id, parent_id)

            if not changes:
                return

            set_clause = ", ".join(f"{column} = ?" for column in changes)
            await self.db.execute(
                f"""
                UPDATE chart_of_accounts
                SET {set_clause}, updated_at = datetime('now')
                WHERE id = ?
                """,
                (*changes.values(), account_id),
            )

        logger.info(
            f"Account updated: {account_id}",
            extra={"fields": sorted(changes)},
        )

    async def _check_parent(self, account_id: int, parent_id: int) -> None:
        """상위 계정 변경 검증"""
        if parent_id == account_id:
            raise InvalidParentError("Account cannot be its own parent")

        if not await self.account_exists(parent_id):
            raise NotFoundError("Parent account not found")

        if parent_id in await self.get_descendant_ids(account_id):
            raise InvalidParentError("Parent account cannot be a descendant of the account")
