"""
FastAPI application factory.

* Registers routes for quotes, stock alerts and admin.
* Each app owns its own price subject and observer repository.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, quotes, stocks
from src.config import settings
from src.domain.market import PriceSubject
from src.infrastructure.repositories import ObserverRepository

logging.basicConfig(level=settings.log_level)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Travel Quote & Stock Alert API",
        description=(
            "Prices trips by plane, train or bus with pluggable cost "
            "policies, and fans stock price updates out to subscribed "
            "traders, trading robots and mobile apps."
        ),
        version="1.0.0",
    )

    # Process-local state; handlers are async so it stays single-threaded
    app.state.exchange = PriceSubject(
        isolate_failures=settings.isolate_observer_failures
    )
    app.state.observers = ObserverRepository()

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(quotes.router, prefix="/api/v1")
    app.include_router(stocks.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
