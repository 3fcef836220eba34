"""
Quote endpoints
===============

POST /api/v1/quotes -- price a trip with the selected transport policy
"""

from fastapi import APIRouter, HTTPException, Request

from src.api.middleware import limiter
from src.api.schemas import QuoteRequest, QuoteResponse
from src.config import settings
from src.domain.entities import InvalidTransportChoice, TripRequest
from src.domain.pricing import BookingContext, policy_for

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.post(
    "",
    response_model=QuoteResponse,
    summary="Calculate the total cost of a trip",
    responses={400: {"description": "Unknown transport choice."}},
)
@limiter.limit(settings.rate_limit)
async def create_quote(request: Request, body: QuoteRequest):
    try:
        policy = policy_for(body.transport)
    except InvalidTransportChoice as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    trip = TripRequest.build(
        distance_km=body.distance_km,
        passengers=body.passengers,
        service_class=body.service_class,
        has_discount=body.has_discount,
        has_baggage=body.has_baggage,
    )
    total = BookingContext(policy).calculate(trip)
    return QuoteResponse(
        transport=policy.mode,
        service_class=trip.service_class,
        passengers=trip.passengers,
        total_cost=total,
    )
