"""
복식부기 (Double-Entry Bookkeeping) 원장

계정과목표와 분개를 관리하고, 기준일 대차대조표를 생성.

사용 예시:
```python
from core.ledger import ChartOfAccounts, LedgerStore, JournalEntry, JournalDetail

chart = ChartOfAccounts(db)
cash_id = await chart.create_account(NewAccount("1000", "Cash", "asset"))

store = LedgerStore(db)
entry_id = await store.create_entry(
    JournalEntry(
        entry_date=date(2024, 1, 1),
        details=[
            JournalDetail(account_id=cash_id, debit=Decimal("100")),
            JournalDetail(account_id=equity_id, credit=Decimal("100")),
        ],
    )
)

sheet = await store.generate_balance_sheet(date(2024, 1, 31))
```
"""

from core.ledger.chart import ChartOfAccounts
from core.ledger.models import (
    AccountPatch,
    BalanceSheet,
    BalanceSheetLine,
    JournalDetail,
    JournalEntry,
    NewAccount,
)
from core.ledger.schema import init_ledger_schema, seed_default_accounts
from core.ledger.store import LedgerStore
from core.ledger.types import (
    BALANCE_SHEET_TYPES,
    CREDIT_NORMAL_TYPES,
    DEFAULT_ACCOUNTS,
    AccountType,
    JournalStatus,
    normal_balance,
)

__all__ = [
    # 핵심 클래스
    "ChartOfAccounts",
    "LedgerStore",
    # 모델
    "NewAccount",
    "AccountPatch",
    "JournalEntry",
    "JournalDetail",
    "BalanceSheet",
    "BalanceSheetLine",
    # 스키마
    "init_ledger_schema",
    "seed_default_accounts",
    # 잔액 방향
    "normal_balance",
    # Enum
    "AccountType",
    "JournalStatus",
    # 상수
    "BALANCE_SHEET_TYPES",
    "CREDIT_NORMAL_TYPES",
    "DEFAULT_ACCOUNTS",
]
