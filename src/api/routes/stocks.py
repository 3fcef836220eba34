"""
Stock alert endpoints
=====================

POST   /api/v1/observers                                  -- register a trader, robot or mobile app
GET    /api/v1/observers/{observer_id}/notifications      -- reports produced by an observer
POST   /api/v1/stocks/{symbol}/subscriptions              -- subscribe an observer to a symbol
DELETE /api/v1/stocks/{symbol}/subscriptions/{observer_id} -- unsubscribe (no-op if absent)
PUT    /api/v1/stocks/{symbol}/price                      -- publish a price and fan it out
GET    /api/v1/stocks/{symbol}                            -- last price and subscribers
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from src.api.dependencies import get_exchange, get_observer_repo
from src.api.middleware import limiter
from src.api.schemas import (
    NotificationResponse,
    ObserverCreateRequest,
    ObserverResponse,
    PriceUpdateRequest,
    PriceUpdateResponse,
    StockResponse,
    SubscriptionRequest,
    SubscriptionResponse,
)
from src.config import settings
from src.domain.market import MobileApp, Observer, PriceSubject, Trader, TradingRobot
from src.infrastructure.repositories import ObserverRepository

router = APIRouter(tags=["stocks"])


def _describe(observer_id: int, observer: Observer) -> ObserverResponse:
    if isinstance(observer, TradingRobot):
        kind, threshold = "robot", observer.buy_threshold
    elif isinstance(observer, Trader):
        kind, threshold = "trader", None
    else:
        kind, threshold = "mobile", None
    return ObserverResponse(
        id=observer_id, kind=kind, label=observer.label, buy_threshold=threshold
    )


def _lookup(repo: ObserverRepository, observer_id: int) -> Observer:
    observer = repo.get_by_id(observer_id)
    if observer is None:
        raise HTTPException(status_code=404, detail="Observer not found")
    return observer


# ── Observers ─────────────────────────────────────────────────────────


@router.post(
    "/observers",
    status_code=201,
    response_model=ObserverResponse,
    summary="Register an observer",
)
@limiter.limit(settings.rate_limit)
async def create_observer(
    request: Request,
    body: ObserverCreateRequest,
    repo: ObserverRepository = Depends(get_observer_repo),
):
    if body.kind == "trader":
        if not body.name:
            raise HTTPException(status_code=422, detail="A trader needs a name")
        observer: Observer = Trader(body.name)
    elif body.kind == "robot":
        threshold = (
            body.buy_threshold
            if body.buy_threshold is not None
            else settings.default_buy_threshold
        )
        observer = TradingRobot(threshold)
    else:
        observer = MobileApp()

    return _describe(repo.add(observer), observer)


@router.get(
    "/observers/{observer_id}/notifications",
    response_model=list[NotificationResponse],
    summary="List the reports an observer produced",
)
@limiter.limit(settings.rate_limit)
async def list_notifications(
    request: Request,
    observer_id: int,
    repo: ObserverRepository = Depends(get_observer_repo),
):
    return list(_lookup(repo, observer_id).notifications)


# ── Subscriptions ─────────────────────────────────────────────────────


@router.post(
    "/stocks/{symbol}/subscriptions",
    status_code=201,
    response_model=SubscriptionResponse,
    summary="Subscribe an observer to a symbol",
    description="Subscribing the same observer twice delivers every update twice.",
)
@limiter.limit(settings.rate_limit)
async def subscribe(
    request: Request,
    symbol: str,
    body: SubscriptionRequest,
    exchange: PriceSubject = Depends(get_exchange),
    repo: ObserverRepository = Depends(get_observer_repo),
):
    observer = _lookup(repo, body.observer_id)
    exchange.subscribe(symbol, observer)
    return SubscriptionResponse(
        symbol=symbol,
        observer_id=body.observer_id,
        subscriptions=sum(1 for o in exchange.subscribers(symbol) if o is observer),
    )


@router.delete(
    "/stocks/{symbol}/subscriptions/{observer_id}",
    status_code=204,
    summary="Unsubscribe an observer from a symbol",
)
@limiter.limit(settings.rate_limit)
async def unsubscribe(
    request: Request,
    symbol: str,
    observer_id: int,
    exchange: PriceSubject = Depends(get_exchange),
    repo: ObserverRepository = Depends(get_observer_repo),
):
    exchange.unsubscribe(symbol, _lookup(repo, observer_id))
    return Response(status_code=204)


# ── Prices ────────────────────────────────────────────────────────────


@router.put(
    "/stocks/{symbol}/price",
    response_model=PriceUpdateResponse,
    summary="Publish a new price and notify subscribers",
)
@limiter.limit(settings.rate_limit)
async def set_price(
    request: Request,
    symbol: str,
    body: PriceUpdateRequest,
    exchange: PriceSubject = Depends(get_exchange),
):
    delivered = exchange.set_price(symbol, body.price)
    return PriceUpdateResponse(symbol=symbol, price=body.price, delivered=delivered)


@router.get(
    "/stocks/{symbol}",
    response_model=StockResponse,
    summary="Last price and current subscribers of a symbol",
)
@limiter.limit(settings.rate_limit)
async def get_stock(
    request: Request,
    symbol: str,
    exchange: PriceSubject = Depends(get_exchange),
):
    return StockResponse(
        symbol=symbol,
        last_price=exchange.last_price(symbol),
        subscribers=[o.label for o in exchange.subscribers(symbol)],
    )
