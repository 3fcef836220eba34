"""
Domain value objects and exceptions.

Both records are immutable: a ``TripRequest`` lives for one quote and a
``Notification`` is the audit trail of one observer reaction.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import ServiceClass, TradeAction


class InvalidTransportChoice(ValueError):
    """Raised when a transport selection maps to no cost policy."""


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class TripRequest:
    distance_km: float
    passengers: int = 1
    service_class: ServiceClass = ServiceClass.ECONOMY
    has_discount: bool = False
    has_baggage: bool = False

    @classmethod
    def build(
        cls,
        distance_km: float,
        passengers: int = 1,
        service_class: "str | ServiceClass | None" = None,
        has_discount: bool = False,
        has_baggage: bool = False,
    ) -> "TripRequest":
        """Create a request from raw input, normalising the service class."""
        return cls(
            distance_km=distance_km,
            passengers=passengers,
            service_class=ServiceClass.parse(service_class),
            has_discount=has_discount,
            has_baggage=has_baggage,
        )


@dataclass(frozen=True)
class Notification:
    observer: str
    symbol: str
    price: float
    action: TradeAction
    message: str
