"""
복식부기 스키마 초기화

Web 시작 시 / 스크립트에서 Ledger 테이블 생성.
CREATE IF NOT EXISTS 패턴으로 안전하게 동작.
"""

import logging
from typing import TYPE_CHECKING

from core.ledger.types import DEFAULT_ACCOUNTS

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


async def init_ledger_schema(db: "SQLiteAdapter") -> None:
    """Ledger 스키마 초기화

    이미 존재하는 경우 안전하게 건너뜀 (IF NOT EXISTS).

    Args:
        db: SQLiteAdapter 인스턴스
    """
    await _create_ledger_tables(db)
    logger.info("Ledger 스키마 초기화 완료")


async def _create_ledger_tables(db: "SQLiteAdapter") -> None:
    """Ledger 테이블 생성"""

    # 계정과목표 (자기 참조 계층)
    await db.execute("""
        CREATE TABLE IF NOT EXISTS chart_of_accounts (
            id               INTEGER PRIMARY KEY AUTOINCREMENT,
            account_code     TEXT NOT NULL UNIQUE,
            account_name     TEXT NOT NULL,
            account_type     TEXT NOT NULL,
            description      TEXT,
            parent_id        INTEGER,
            created_at       TEXT NOT NULL DEFAULT (datetime('now')),
            updated_at       TEXT NOT NULL DEFAULT (datetime('now')),
            FOREIGN KEY (parent_id) REFERENCES chart_of_accounts(id)
        )
    """)

    # 분개 헤더
    await db.execute("""
        CREATE TABLE IF NOT EXISTS journal_entries (
            id               INTEGER PRIMARY KEY AUTOINCREMENT,
            entry_date       TEXT NOT NULL,
            reference_no     TEXT,
            description      TEXT,
            created_by       TEXT,
            status           TEXT NOT NULL DEFAULT 'posted',
            created_at       TEXT NOT NULL DEFAULT (datetime('now'))
        )
    """)

    # 분개 항목 (금액은 Decimal 문자열)
    await db.execute("""
        CREATE TABLE IF NOT EXISTS journal_details (
            id               INTEGER PRIMARY KEY AUTOINCREMENT,
            journal_id       INTEGER NOT NULL,
            account_id       INTEGER NOT NULL,
            debit            TEXT NOT NULL DEFAULT '0',
            credit           TEXT NOT NULL DEFAULT '0',
            description      TEXT,
            line_order       INTEGER NOT NULL DEFAULT 0,
            FOREIGN KEY (journal_id) REFERENCES journal_entries(id),
            FOREIGN KEY (account_id) REFERENCES chart_of_accounts(id)
        )
    """)

    # 인덱스 생성
    await db.execute("CREATE INDEX IF NOT EXISTS idx_coa_parent ON chart_of_accounts(parent_id)")
    await db.execute("CREATE INDEX IF NOT EXISTS idx_coa_type ON chart_of_accounts(account_type)")
    await db.execute("CREATE INDEX IF NOT EXISTS idx_journal_entries_date ON journal_entries(entry_date)")
    await db.execute("CREATE INDEX IF NOT EXISTS idx_journal_entries_status ON journal_entries(status)")
    await db.execute("CREATE INDEX IF NOT EXISTS idx_journal_details_journal ON journal_details(journal_id)")
    await db.execute("CREATE INDEX IF NOT EXISTS idx_journal_details_account ON journal_details(account_id)")

    await db.commit()
    logger.debug("Ledger 테이블 생성 완료")


async def seed_default_accounts(db: "SQLiteAdapter") -> int:
    """기본 계정과목표 입력

    이미 존재하는 코드는 건너뜀 (INSERT OR IGNORE).
    상위 계정이 먼저 오도록 정렬된 DEFAULT_ACCOUNTS 순서대로 입력.

    Returns:
        새로 생성된 계정 수
    """
    created = 0

    async with db.transaction():
        for account_code, account_name, account_type, parent_code in DEFAULT_ACCOUNTS:
            parent_id = None
            if parent_code is not None:
                row = await db.fetchone(
                    "SELECT id FROM chart_of_accounts WHERE account_code = ?",
                    (parent_code,),
                )
                parent_id = row["id"] if row else None

            cursor = await db.execute(
                """
                INSERT OR IGNORE INTO chart_of_accounts (
                    account_code, account_name, account_type, parent_id
                ) VALUES (?, ?, ?, ?)
                """,
                (account_code, account_name, account_type, parent_id),
            )
            created += cursor.rowcount

    logger.info(f"기본 계정과목표 입력 완료: {created}개 생성")
    return created
