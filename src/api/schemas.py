"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr

from src.domain.enums import ServiceClass, TradeAction, TransportMode


# ── Requests ──────────────────────────────────────────────────────────


class QuoteRequest(BaseModel):
    transport: Union[StrictInt, StrictStr] = Field(
        ...,
        description="Menu number (1 Plane, 2 Train, 3 Bus) or mode name.",
    )
    distance_km: float
    passengers: int = 1
    service_class: str = Field(
        "economy",
        description='Case-insensitive; anything other than "business" is economy.',
    )
    has_discount: bool = False
    has_baggage: bool = False


class ObserverCreateRequest(BaseModel):
    kind: Literal["trader", "robot", "mobile"]
    name: Optional[str] = Field(None, max_length=120)
    buy_threshold: Optional[float] = None


class SubscriptionRequest(BaseModel):
    observer_id: int


class PriceUpdateRequest(BaseModel):
    price: float


# ── Responses ─────────────────────────────────────────────────────────


class QuoteResponse(BaseModel):
    transport: TransportMode
    service_class: ServiceClass
    passengers: int
    total_cost: float


class ObserverResponse(BaseModel):
    id: int
    kind: str
    label: str
    buy_threshold: Optional[float] = None


class NotificationResponse(BaseModel):
    observer: str
    symbol: str
    price: float
    action: TradeAction
    message: str

    model_config = {"from_attributes": True}


class SubscriptionResponse(BaseModel):
    symbol: str
    observer_id: int
    subscriptions: int


class PriceUpdateResponse(BaseModel):
    symbol: str
    price: float
    delivered: int


class StockResponse(BaseModel):
    symbol: str
    last_price: Optional[float] = None
    subscribers: list[str] = []


class MarketSymbolResponse(BaseModel):
    symbol: str
    last_price: Optional[float] = None
    subscriber_count: int


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
