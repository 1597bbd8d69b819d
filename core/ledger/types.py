"""
복식부기 타입 정의

AccountType 등 Ledger 시스템에서 사용하는 Enum과 기본 계정과목표
"""

from decimal import Decimal
from enum import Enum


class AccountType(str, Enum):
    """계정 유형

    복식부기의 5대 계정 유형.
    str을 상속하여 JSON 직렬화 가능.
    """

    ASSET = "asset"  # 자산
    LIABILITY = "liability"  # 부채
    EQUITY = "equity"  # 자본
    REVENUE = "revenue"  # 수익
    EXPENSE = "expense"  # 비용

    @classmethod
    def values(cls) -> list[str]:
        return [t.value for t in cls]


class JournalStatus(str, Enum):
    """분개 상태

    POSTED만 잔액 계산에 포함됨.
    상태 전이(전기/취소) API는 없음.
    """

    DRAFT = "draft"
    POSTED = "posted"
    VOID = "void"


# 대차대조표 구성 계정 유형 (출력 순서)
BALANCE_SHEET_TYPES: tuple[AccountType, ...] = (
    AccountType.ASSET,
    AccountType.LIABILITY,
    AccountType.EQUITY,
)

# 대변 잔액 계정 유형 (대차대조표에는 대변 - 차변으로 표시)
CREDIT_NORMAL_TYPES: frozenset[str] = frozenset({
    AccountType.LIABILITY.value,
    AccountType.EQUITY.value,
    AccountType.REVENUE.value,
})


def normal_balance(account_type: str, net_debit: Decimal) -> Decimal:
    """차변 - 대변 잔액을 계정 유형의 정상 잔액 방향으로 변환

    자산/비용: 차변 - 대변 그대로
    부채/자본/수익: 대변 - 차변
    """
    if account_type in CREDIT_NORMAL_TYPES:
        return Decimal("0") - net_debit
    return net_debit


# 기본 계정과목표 (scripts/init_db.py --seed 에서 사용)
DEFAULT_ACCOUNTS: list[tuple[str, str, str, str | None]] = [
    # (account_code, account_name, account_type, parent_code)

    # ASSET
    ("1000", "Assets", "asset", None),
    ("1100", "Cash", "asset", "1000"),
    ("1200", "Accounts Receivable", "asset", "1000"),
    ("1300", "Inventory", "asset", "1000"),
    ("1500", "Fixed Assets", "asset", "1000"),

    # LIABILITY
    ("2000", "Liabilities", "liability", None),
    ("2100", "Accounts Payable", "liability", "2000"),
    ("2200", "Accrued Expenses", "liability", "2000"),
    ("2500", "Long-term Debt", "liability", "2000"),

    # EQUITY
    ("3000", "Equity", "equity", None),
    ("3100", "Owner's Capital", "equity", "3000"),
    ("3200", "Retained Earnings", "equity", "3000"),

    # REVENUE
    ("4000", "Revenue", "revenue", None),
    ("4100", "Sales", "revenue", "4000"),

    # EXPENSE
    ("5000", "Expenses", "expense", None),
    ("5100", "Cost of Goods Sold", "expense", "5000"),
    ("5200", "Operating Expenses", "expense", "5000"),
]
