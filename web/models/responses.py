"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
모든 응답은 {success, data, message} 형태로 감쌈.
"""

from datetime import date
from decimal import Decimal
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """공통 응답 envelope"""

    success: bool = Field(default=True, description="성공 여부")
    data: T | None = Field(default=None, description="응답 데이터")
    message: str | None = Field(default=None, description="응답 메시지")


class CreatedResponse(BaseModel):
    """생성 결과"""

    id: int = Field(..., description="생성된 id")


class AccountResponse(BaseModel):
    """계정 응답"""

    id: int = Field(..., description="계정 id")
    account_code: str = Field(..., description="계정 코드")
    account_name: str = Field(..., description="계정명")
    account_type: str = Field(..., description="계정 유형")
    description: str | None = Field(default=None, description="설명")
    parent_id: int | None = Field(default=None, description="상위 계정 id")
    parent_account_name: str | None = Field(default=None, description="상위 계정명")
    has_children: bool = Field(default=False, description="하위 계정 존재 여부")
    created_at: str | None = Field(default=None, description="생성 시간")
    updated_at: str | None = Field(default=None, description="마지막 수정 시간")


class JournalDetailResponse(BaseModel):
    """분개 항목 응답"""

    id: int = Field(..., description="항목 id")
    journal_id: int = Field(..., description="분개 id")
    account_id: int = Field(..., description="계정 id")
    account_code: str = Field(..., description="계정 코드")
    account_name: str = Field(..., description="계정명")
    debit: Decimal = Field(..., description="차변 금액")
    credit: Decimal = Field(..., description="대변 금액")
    description: str | None = Field(default=None, description="항목 설명")


class JournalEntryResponse(BaseModel):
    """분개 응답"""

    id: int = Field(..., description="분개 id")
    entry_date: date = Field(..., description="거래일")
    reference_no: str | None = Field(default=None, description="참조 번호")
    description: str | None = Field(default=None, description="적요")
    created_by: str | None = Field(default=None, description="작성자")
    status: str = Field(..., description="분개 상태")
    created_at: str | None = Field(default=None, description="생성 시간")
    details: list[JournalDetailResponse] = Field(default_factory=list, description="분개 항목")


class BalanceSheetLineResponse(BaseModel):
    """대차대조표 계정 응답"""

    id: int = Field(..., description="계정 id")
    account_code: str = Field(..., description="계정 코드")
    account_name: str = Field(..., description="계정명")
    account_type: str = Field(..., description="계정 유형")
    parent_id: int | None = Field(default=None, description="상위 계정 id")
    level: int = Field(..., description="계층 깊이 (루트 = 0)")
    balance: Decimal = Field(..., description="잔액 (정상 잔액 방향)")


class BalanceSheetResponse(BaseModel):
    """대차대조표 응답"""

    as_of_date: date = Field(..., description="기준일")
    assets: list[BalanceSheetLineResponse] = Field(default_factory=list, description="자산")
    liabilities: list[BalanceSheetLineResponse] = Field(default_factory=list, description="부채")
    equity: list[BalanceSheetLineResponse] = Field(default_factory=list, description="자본")
    total_assets: Decimal = Field(..., description="자산 합계")
    total_liabilities: Decimal = Field(..., description="부채 합계")
    total_equity: Decimal = Field(..., description="자본 합계")


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    version: str = Field(..., description="API 버전")
