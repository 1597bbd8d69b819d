"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from core.constants import LedgerLimits
from core.ledger.models import AccountPatch, JournalDetail, JournalEntry, NewAccount
from core.ledger.types import AccountType, JournalStatus


class AccountCreateRequest(BaseModel):
    """계정 생성 요청"""

    account_code: str = Field(..., min_length=1, max_length=32, description="계정 코드 (유일)")
    account_name: str = Field(..., min_length=1, max_length=200, description="계정명")
    account_type: AccountType = Field(..., description="계정 유형")
    description: str | None = Field(default=None, description="설명")
    parent_id: int | None = Field(default=None, description="상위 계정 id")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "account_code": "1100",
                    "account_name": "Cash",
                    "account_type": "asset",
                    "description": "Cash on hand",
                    "parent_id": 1,
                }
            ]
        }
    }

    def to_new_account(self) -> NewAccount:
        return NewAccount(
            account_code=self.account_code,
            account_name=self.account_name,
            account_type=self.account_type.value,
            description=self.description,
            parent_id=self.parent_id,
        )


class AccountUpdateRequest(BaseModel):
    """계정 부분 수정 요청

    전달되지 않은 필드는 변경하지 않음.
    description / parent_id 에 null을 전달하면 값을 비움.
    """

    account_name: str | None = Field(default=None, min_length=1, max_length=200, description="계정명")
    account_type: AccountType | None = Field(default=None, description="계정 유형")
    description: str | None = Field(default=None, description="설명")
    parent_id: int | None = Field(default=None, description="상위 계정 id")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"description": "Petty cash"},
                {"parent_id": None},
            ]
        }
    }

    def to_patch(self) -> AccountPatch:
        """요청에 실제로 포함된 필드만 patch로 변환"""
        values = {}
        for name in self.model_fields_set:
            value = getattr(self, name)
            if isinstance(value, AccountType):
                value = value.value
            values[name] = value
        return AccountPatch(**values)


class JournalDetailRequest(BaseModel):
    """분개 항목 요청"""

    account_id: int = Field(..., description="계정 id")
    debit: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        max_digits=LedgerLimits.AMOUNT_MAX_DIGITS,
        decimal_places=LedgerLimits.AMOUNT_DECIMAL_PLACES,
        description="차변 금액",
    )
    credit: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        max_digits=LedgerLimits.AMOUNT_MAX_DIGITS,
        decimal_places=LedgerLimits.AMOUNT_DECIMAL_PLACES,
        description="대변 금액",
    )
    description: str | None = Field(default=None, description="항목 설명")


class JournalEntryCreateRequest(BaseModel):
    """분개 생성 요청

    차변 합계와 대변 합계가 같아야 함 (0.01 오차 허용).
    """

    entry_date: date = Field(..., description="거래일")
    reference_no: str | None = Field(default=None, max_length=64, description="참조 번호")
    description: str | None = Field(default=None, description="적요")
    status: JournalStatus = Field(default=JournalStatus.POSTED, description="분개 상태")
    details: list[JournalDetailRequest] = Field(..., min_length=1, description="분개 항목")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "entry_date": "2024-01-01",
                    "reference_no": "JV-0001",
                    "description": "Owner investment",
                    "details": [
                        {"account_id": 2, "debit": "100.00", "credit": "0"},
                        {"account_id": 11, "debit": "0", "credit": "100.00"},
                    ],
                }
            ]
        }
    }

    def to_entry(self, created_by: str) -> JournalEntry:
        return JournalEntry(
            entry_date=self.entry_date,
            reference_no=self.reference_no,
            description=self.description,
            created_by=created_by,
            status=self.status.value,
            details=[
                JournalDetail(
                    account_id=d.account_id,
                    debit=d.debit,
                    credit=d.credit,
                    description=d.description,
                )
                for d in self.details
            ],
        )
