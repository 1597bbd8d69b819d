"""
원장 도메인 모델

계정 생성/수정 입력, 분개, 대차대조표 데이터 구조
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date
from decimal import Decimal, Inexact, localcontext
from typing import Any, Iterable

from core.constants import LedgerLimits
from core.ledger.types import BALANCE_SHEET_TYPES, JournalStatus
from core.types import UNSET


def amount_within_limits(amount: Decimal) -> bool:
    """금액 자릿수 검사

    유효 자릿수 AMOUNT_MAX_DIGITS, 소수점 이하 AMOUNT_DECIMAL_PLACES 이내.
    유한한 값에만 사용 (NaN / Infinity는 호출 전에 거름).
    """
    _, digits, exponent = amount.as_tuple()
    # 소수점 이하 끝자리 0은 세지 않음 (100.00 → 100)
    while exponent < 0 and digits and digits[-1] == 0:
        digits, exponent = digits[:-1], exponent + 1
    if exponent >= 0:
        total_digits, decimal_places = len(digits) + exponent, 0
    else:
        decimal_places = -exponent
        total_digits = max(len(digits), decimal_places)
    return (
        total_digits <= LedgerLimits.AMOUNT_MAX_DIGITS
        and decimal_places <= LedgerLimits.AMOUNT_DECIMAL_PLACES
    )


def _exact_sum(amounts: Iterable[Decimal]) -> Decimal:
    """반올림 없이 합산 (정밀도를 넘으면 decimal.Inexact)"""
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        return sum(amounts, Decimal("0"))


@dataclass
class NewAccount:
    """계정 생성 입력"""

    account_code: str
    account_name: str
    account_type: str
    description: str | None = None
    parent_id: int | None = None


@dataclass
class AccountPatch:
    """계정 부분 수정 입력

    각 필드는 세 가지 상태를 가짐:
    - UNSET: 변경하지 않음
    - None: 값을 비움 (description, parent_id만 허용)
    - 값: 해당 값으로 변경
    """

    account_name: Any = UNSET
    account_type: Any = UNSET
    description: Any = UNSET
    parent_id: Any = UNSET

    def changes(self) -> dict[str, Any]:
        """지정된 필드만 {컬럼: 값} 으로 반환"""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }


@dataclass
class JournalDetail:
    """분개 항목

    한 줄에 차변/대변 중 하나만 쓰는 것이 관례지만
    둘 다 값이 있어도 거부하지 않음.
    """

    account_id: int
    debit: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")
    description: str | None = None


@dataclass
class JournalEntry:
    """분개

    하나의 거래에 대한 복식부기 기록.
    차변 합계 = 대변 합계 (균형)
    """

    entry_date: date
    details: list[JournalDetail]
    reference_no: str | None = None
    description: str | None = None
    created_by: str | None = None
    status: str = JournalStatus.POSTED.value

    @property
    def total_debit(self) -> Decimal:
        return _exact_sum(d.debit for d in self.details)

    @property
    def total_credit(self) -> Decimal:
        return _exact_sum(d.credit for d in self.details)

    def is_balanced(self) -> bool:
        """차변/대변 합계 균형 검증

        반올림 오차 허용 (0.01 이내, 경계값 포함)
        합계와 차이는 반올림 없이 계산. 정밀도를 넘으면 decimal.Inexact,
        범위를 넘으면 decimal.Overflow 발생.

        Returns:
            True if |sum(debit) - sum(credit)| <= 0.01
        """
        difference = _exact_sum([self.total_debit, self.total_credit.copy_negate()])
        return abs(difference) <= LedgerLimits.BALANCE_TOLERANCE


@dataclass
class BalanceSheetLine:
    """대차대조표 계정 한 줄"""

    id: int
    account_code: str
    account_name: str
    account_type: str
    parent_id: int | None
    level: int
    balance: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "account_code": self.account_code,
            "account_name": self.account_name,
            "account_type": self.account_type,
            "parent_id": self.parent_id,
            "level": self.level,
            "balance": self.balance,
        }


@dataclass
class BalanceSheet:
    """대차대조표

    각 줄의 잔액은 계정 유형의 정상 잔액 방향 (자산: 차변 - 대변, 부채/자본: 대변 - 차변).
    자산 = 부채 + 자본 검증은 하지 않음.
    """

    as_of_date: date
    assets: list[BalanceSheetLine] = field(default_factory=list)
    liabilities: list[BalanceSheetLine] = field(default_factory=list)
    equity: list[BalanceSheetLine] = field(default_factory=list)

    @property
    def total_assets(self) -> Decimal:
        return sum((line.balance for line in self.assets), Decimal("0"))

    @property
    def total_liabilities(self) -> Decimal:
        return sum((line.balance for line in self.liabilities), Decimal("0"))

    @property
    def total_equity(self) -> Decimal:
        return sum((line.balance for line in self.equity), Decimal("0"))

    @classmethod
    def from_lines(cls, as_of_date: date, lines: list[BalanceSheetLine]) -> BalanceSheet:
        """계정 유형별로 분류

        ASSET / LIABILITY / EQUITY 이외의 유형은 제외.
        입력 순서(계정 코드 순)를 그대로 유지.
        """
        asset, liability, equity = (t.value for t in BALANCE_SHEET_TYPES)
        return cls(
            as_of_date=as_of_date,
            assets=[line for line in lines if line.account_type == asset],
            liabilities=[line for line in lines if line.account_type == liability],
            equity=[line for line in lines if line.account_type == equity],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "as_of_date": self.as_of_date,
            "assets": [line.to_dict() for line in self.assets],
            "liabilities": [line.to_dict() for line in self.liabilities],
            "equity": [line.to_dict() for line in self.equity],
            "total_assets": self.total_assets,
            "total_liabilities": self.total_liabilities,
            "total_equity": self.total_equity,
        }
