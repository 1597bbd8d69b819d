"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    AccountCreateRequest,
    AccountUpdateRequest,
    JournalDetailRequest,
    JournalEntryCreateRequest,
)
from web.models.responses import (
    AccountResponse,
    ApiResponse,
    BalanceSheetLineResponse,
    BalanceSheetResponse,
    CreatedResponse,
    HealthResponse,
    JournalDetailResponse,
    JournalEntryResponse,
)

__all__ = [
    # Requests
    "AccountCreateRequest",
    "AccountUpdateRequest",
    "JournalDetailRequest",
    "JournalEntryCreateRequest",
    # Responses
    "ApiResponse",
    "CreatedResponse",
    "AccountResponse",
    "JournalDetailResponse",
    "JournalEntryResponse",
    "BalanceSheetLineResponse",
    "BalanceSheetResponse",
    "HealthResponse",
]
