"""
Demonstration script -- replays the fixed travel-quote and stock-alert
walkthrough without any interactive input.

Run:
    python -m src.demo

Steps:
  1. Select a transport (1 Plane, 2 Train, 3 Bus) and price a sample trip.
  2. Subscribe Trader "Ali" and a robot (threshold 100) to AAPL, and a
     mobile app to GOOG.
  3. Publish AAPL 90, GOOG 150, AAPL 120.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Optional, Union

from src.config import settings
from src.domain.entities import InvalidTransportChoice, TripRequest
from src.domain.enums import TransportMode
from src.domain.market import MobileApp, Observer, PriceSubject, Trader, TradingRobot
from src.domain.pricing import BookingContext, policy_for

logger = logging.getLogger(__name__)

SAMPLE_TRIP = TripRequest.build(
    distance_km=100.0,
    passengers=2,
    service_class="business",
    has_discount=True,
    has_baggage=True,
)

DEMO_BUY_THRESHOLD = 100.0

PRICE_FEED: list[tuple[str, float]] = [
    ("AAPL", 90.0),
    ("GOOG", 150.0),
    ("AAPL", 120.0),
]


@dataclass
class DemoResult:
    total_cost: Optional[float]
    exchange: PriceSubject
    observers: list[Observer] = field(default_factory=list)


def quote_trip(choice: Union[int, str, TransportMode], trip: TripRequest) -> Optional[float]:
    """Price *trip* for *choice*; ``None`` when the choice is invalid."""
    context = BookingContext()
    try:
        context.set_policy(policy_for(choice))
    except InvalidTransportChoice:
        logger.warning("Invalid choice: %r", choice)
        return None

    cost = context.calculate(trip)
    logger.info("Total cost: %s", cost)
    return cost


def run_stock_demo(exchange: Optional[PriceSubject] = None) -> DemoResult:
    exchange = exchange or PriceSubject(isolate_failures=settings.isolate_observer_failures)

    trader = Trader("Ali")
    robot = TradingRobot(DEMO_BUY_THRESHOLD)
    mobile = MobileApp()

    exchange.subscribe("AAPL", trader)
    exchange.subscribe("AAPL", robot)
    exchange.subscribe("GOOG", mobile)

    for symbol, price in PRICE_FEED:
        exchange.set_price(symbol, price)

    return DemoResult(total_cost=None, exchange=exchange, observers=[trader, robot, mobile])


def run_demo(
    choice: Union[int, str, TransportMode] = 1,
    trip: TripRequest = SAMPLE_TRIP,
) -> Optional[DemoResult]:
    """Run both walkthroughs; stops before the stock part on an invalid choice."""
    cost = quote_trip(choice, trip)
    if cost is None:
        return None

    result = run_stock_demo()
    result.total_cost = cost
    return result


def main() -> None:
    logging.basicConfig(level=settings.log_level, format="%(message)s")
    choice = sys.argv[1] if len(sys.argv) > 1 else 1
    if run_demo(choice) is None:
        sys.exit(1)


if __name__ == "__main__":
    main()
