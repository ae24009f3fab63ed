"""
Async HTTP client for the RecycleMe API.

One method per endpoint. Request bodies are built from the same pydantic
models the server validates with, and responses are parsed back into
them.

Usage:
    session = ClientSession()
    async with RecycleMeClient("http://localhost:3000", session) as api:
        await api.login_user("ana@example.com", "secret")
        receipt = await api.redeem(offer_id=7)
        print(receipt.coupon.coupon_code)
"""

import logging
from datetime import datetime
from typing import Any, Optional

import httpx
from pydantic import BaseModel

from shared.models import AccountType
from modules.accounts.models import (
    CreateMarketRequest,
    CreateUserRequest,
    Market,
    User,
    UserProfile,
)
from modules.auth.models import (
    MarketLoginRequest,
    MarketLoginResponse,
    UserLoginRequest,
    UserLoginResponse,
)
from modules.marketplace.models import (
    CreateOfferRequest,
    Offer,
    OfferWithMarket,
    RedeemRequest,
    RedemptionReceipt,
)
from modules.collections.models import (
    CollectionDetails,
    ConfirmCollectionRequest,
    ConfirmCollectionResponse,
    CreateCollectionRequest,
    CreateCollectionResponse,
    MarketStats,
)

from .session import ClientSession

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str, payload: Any = None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.payload = payload


def _error_message(response: httpx.Response) -> tuple[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase, None

    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str):
            return detail, payload
        if "error" in payload:
            return str(payload["error"]), payload
    return response.reason_phrase, payload


def _body(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


class RecycleMeClient:
    """Client for the RecycleMe REST API."""

    def __init__(
        self,
        base_url: str,
        session: Optional[ClientSession] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self.session = session or ClientSession()
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "RecycleMeClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> Any:
        response = await self._http.request(
            method,
            path,
            json=json,
            headers=self.session.auth_headers(),
        )
        if response.is_error:
            message, payload = _error_message(response)
            logger.debug(f"{method} {path} failed with {response.status_code}: {message}")
            raise ApiError(response.status_code, message, payload)
        return response.json()

    # -------------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------------

    async def register_user(self, name: str, email: str, password: str) -> User:
        request = CreateUserRequest(name=name, email=email, password=password)
        return User.model_validate(await self._request("POST", "/users", _body(request)))

    async def register_market(self, request: CreateMarketRequest) -> Market:
        return Market.model_validate(await self._request("POST", "/markets", _body(request)))

    async def list_markets(self) -> list[Market]:
        return [Market.model_validate(item) for item in await self._request("GET", "/markets")]

    async def get_profile(self) -> UserProfile:
        return UserProfile.model_validate(await self._request("GET", "/profile/me"))

    # -------------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------------

    async def login_user(self, email: str, password: str) -> UserLoginResponse:
        """Log in as a user and keep the token in the session."""
        request = UserLoginRequest(email=email, password=password)
        result = UserLoginResponse.model_validate(
            await self._request("POST", "/auth/user", _body(request))
        )
        self.session.login(result.token, AccountType.USER)
        return result

    async def login_market(self, cnpj: str, password: str) -> MarketLoginResponse:
        """Log in as a market and keep the token in the session."""
        request = MarketLoginRequest(cnpj=cnpj, password=password)
        result = MarketLoginResponse.model_validate(
            await self._request("POST", "/auth/market", _body(request))
        )
        self.session.login(result.token, AccountType.MARKET)
        return result

    def logout(self) -> None:
        self.session.logout()

    # -------------------------------------------------------------------------
    # Marketplace
    # -------------------------------------------------------------------------

    async def create_offer(
        self,
        title: str,
        cost: int,
        description: str = "",
        image: Optional[str] = None,
        valid_from: Optional[datetime] = None,
        valid_until: Optional[datetime] = None,
    ) -> Offer:
        fields: dict[str, Any] = {
            "title": title,
            "cost": cost,
            "description": description,
            "valid_from": valid_from,
            "valid_until": valid_until,
        }
        if image is not None:
            fields["image"] = image
        request = CreateOfferRequest(**fields)
        return Offer.model_validate(await self._request("POST", "/market/offers", _body(request)))

    async def list_offers(self) -> list[OfferWithMarket]:
        return [OfferWithMarket.model_validate(item) for item in await self._request("GET", "/market/offers")]

    async def list_my_offers(self) -> list[Offer]:
        return [Offer.model_validate(item) for item in await self._request("GET", "/market/my-offers")]

    async def redeem(self, offer_id: int) -> RedemptionReceipt:
        request = RedeemRequest(offer_id=offer_id)
        return RedemptionReceipt.model_validate(
            await self._request("POST", "/market/redeem", _body(request))
        )

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    async def create_collection(self, material_type: str, weight_in_kg: float) -> CreateCollectionResponse:
        request = CreateCollectionRequest(material_type=material_type, weight_in_kg=weight_in_kg)
        return CreateCollectionResponse.model_validate(
            await self._request("POST", "/transactions/create", _body(request))
        )

    async def get_market_stats(self) -> MarketStats:
        return MarketStats.model_validate(await self._request("GET", "/transactions/market/stats"))

    async def get_collection(self, collection_id: int) -> CollectionDetails:
        return CollectionDetails.model_validate(
            await self._request("GET", f"/transactions/{collection_id}")
        )

    async def confirm_collection(self, collection_id: int, final_weight: float) -> ConfirmCollectionResponse:
        request = ConfirmCollectionRequest(final_weight=final_weight)
        return ConfirmCollectionResponse.model_validate(
            await self._request("PATCH", f"/transactions/{collection_id}/confirm", _body(request))
        )

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------

    async def health(self) -> dict[str, Any]:
        return await self._request("GET", "/health")
