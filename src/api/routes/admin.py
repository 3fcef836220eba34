"""
Admin / observability endpoints
===============================

GET /api/v1/admin/market -- every known symbol with subscriber count and last price
GET /api/v1/admin/health -- simple health check
"""

from fastapi import APIRouter, Depends, Request

from src.api.dependencies import get_exchange
from src.api.middleware import limiter
from src.api.schemas import HealthResponse, MarketSymbolResponse
from src.config import settings
from src.domain.market import PriceSubject

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/market",
    response_model=list[MarketSymbolResponse],
    summary="List every known symbol",
)
@limiter.limit(settings.rate_limit)
async def get_market(
    request: Request,
    exchange: PriceSubject = Depends(get_exchange),
):
    return [
        MarketSymbolResponse(
            symbol=symbol,
            last_price=exchange.last_price(symbol),
            subscriber_count=len(exchange.subscribers(symbol)),
        )
        for symbol in exchange.symbols()
    ]


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()
