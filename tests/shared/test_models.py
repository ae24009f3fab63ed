"""Tests for shared/models.py."""

import pytest
from pydantic import ValidationError

from shared.models import AccountType, AuthenticatedAccount, CamelModel, RequestModel


class Sample(CamelModel):
    trade_name: str


class SampleRequest(RequestModel):
    offer_id: int


class TestCamelModel:
    def test_serializes_camel_case(self):
        """Fields should serialize with camelCase aliases."""
        assert Sample(trade_name="x").model_dump(by_alias=True) == {"tradeName": "x"}

    def test_accepts_both_spellings(self):
        """Both camelCase and snake_case should be accepted on input."""
        assert Sample.model_validate({"tradeName": "x"}).trade_name == "x"
        assert Sample.model_validate({"trade_name": "x"}).trade_name == "x"


class TestRequestModel:
    def test_rejects_unknown_fields(self):
        """Request bodies should reject unknown fields."""
        with pytest.raises(ValidationError):
            SampleRequest.model_validate({"offerId": 1, "points": 999})


class TestAuthenticatedAccount:
    def test_user_flags(self):
        """User accounts should report is_user."""
        account = AuthenticatedAccount(id=1, type=AccountType.USER)
        assert account.is_user
        assert not account.is_market
        assert account.verified is False

    def test_market_flags(self):
        """Market accounts should report is_market."""
        account = AuthenticatedAccount(id=2, type="market", verified=True)
        assert account.is_market
        assert account.verified

    def test_is_frozen(self):
        """Accounts are immutable once built from a token."""
        account = AuthenticatedAccount(id=1, type=AccountType.USER)
        with pytest.raises(ValidationError):
            account.id = 2
