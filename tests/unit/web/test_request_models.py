"""
요청 스키마 테스트

AccountUpdateRequest.to_patch 의 생략/null 구분, 분개 요청 변환
"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from core.types import UNSET
from web.models.requests import (
    AccountCreateRequest,
    AccountUpdateRequest,
    JournalEntryCreateRequest,
)


class TestAccountCreateRequest:
    def test_to_new_account(self) -> None:
        request = AccountCreateRequest(account_code="1000", account_name="Cash", account_type="asset")

        account = request.to_new_account()

        assert account.account_code == "1000"
        assert account.account_type == "asset"
        assert account.parent_id is None

    def test_invalid_type(self) -> None:
        with pytest.raises(ValidationError):
            AccountCreateRequest(account_code="1000", account_name="Cash", account_type="income")

    def test_empty_code(self) -> None:
        with pytest.raises(ValidationError):
            AccountCreateRequest(account_code="", account_name="Cash", account_type="asset")


class TestAccountUpdateRequest:
    """생략 / null / 값 구분"""

    def test_omitted_fields_unset(self) -> None:
        patch = AccountUpdateRequest.model_validate({"description": "memo"}).to_patch()

        assert patch.description == "memo"
        assert patch.account_name is UNSET
        assert patch.parent_id is UNSET
        assert patch.changes() == {"description": "memo"}

    def test_explicit_null(self) -> None:
        patch = AccountUpdateRequest.model_validate({"parent_id": None}).to_patch()

        assert patch.changes() == {"parent_id": None}

    def test_enum_to_value(self) -> None:
        patch = AccountUpdateRequest.model_validate({"account_type": "liability"}).to_patch()

        assert patch.changes() == {"account_type": "liability"}

    def test_empty_body(self) -> None:
        assert AccountUpdateRequest.model_validate({}).to_patch().changes() == {}


class TestJournalEntryCreateRequest:
    def test_to_entry(self) -> None:
        request = JournalEntryCreateRequest.model_validate(
            {
                "entry_date": "2024-01-01",
                "details": [
                    {"account_id": 1, "debit": "100.50"},
                    {"account_id": 2, "credit": 100.5},
                ],
            }
        )

        entry = request.to_entry(created_by="web:admin")

        assert entry.entry_date == date(2024, 1, 1)
        assert entry.status == "posted"
        assert entry.created_by == "web:admin"
        assert entry.details[0].debit == Decimal("100.50")
        assert entry.details[0].credit == Decimal("0")
        assert entry.is_balanced() is True

    def test_details_required(self) -> None:
        with pytest.raises(ValidationError):
            JournalEntryCreateRequest.model_validate({"entry_date": "2024-01-01", "details": []})

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JournalEntryCreateRequest.model_validate(
                {"entry_date": "2024-01-01", "details": [{"account_id": 1, "debit": "-1"}]}
            )

    def test_invalid_status(self) -> None:
        with pytest.raises(ValidationError):
            JournalEntryCreateRequest.model_validate(
                {
                    "entry_date": "2024-01-01",
                    "status": "approved",
                    "details": [{"account_id": 1, "debit": "1"}],
                }
            )

    @pytest.mark.parametrize(
        "amount",
        ["1234567890123456789012345678.4", "123456789012345678901", "0.000000001"],
    )
    def test_amount_digits_bounded(self, amount: str) -> None:
        with pytest.raises(ValidationError):
            JournalEntryCreateRequest.model_validate(
                {"entry_date": "2024-01-01", "details": [{"account_id": 1, "credit": amount}]}
            )

    def test_largest_amount_accepted(self) -> None:
        request = JournalEntryCreateRequest.model_validate(
            {"entry_date": "2024-01-01", "details": [{"account_id": 1, "debit": "999999999999.99999999"}]}
        )

        assert request.details[0].debit == Decimal("999999999999.99999999")
