"""FastAPI dependency injection helpers."""

from fastapi import Request

from src.domain.market import PriceSubject
from src.infrastructure.repositories import ObserverRepository


def get_exchange(request: Request) -> PriceSubject:
    """The application-wide price subject created in ``create_app``."""
    return request.app.state.exchange


def get_observer_repo(request: Request) -> ObserverRepository:
    return request.app.state.observers
