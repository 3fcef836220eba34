"""
Travel Cost Engine  (Strategy Pattern)
======================================

Formula
-------
Cost = ((Distance x Rate x Class_Multiplier) + Baggage_Surcharge) x Discount_Factor x Passengers

* **Class_Multiplier** applies to business class only.
* **Baggage_Surcharge** is flat per passenger and added *after* the class
  multiplier, *before* the discount.
* **Discount_Factor** applies last, before scaling by passengers.

No input is rejected: zero or negative distances and passenger counts
produce zero or negative totals.

Complexity: O(1) per cost calculation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from .entities import InvalidTransportChoice, TripRequest
from .enums import TRANSPORT_CHOICES, ServiceClass, TransportMode

logger = logging.getLogger(__name__)


def _tariff(
    distance_km: float,
    service_class: ServiceClass,
    passengers: int,
    has_discount: bool,
    has_baggage: bool,
    *,
    rate_per_km: float,
    business_multiplier: float,
    baggage_surcharge: float,
    discount_factor: float,
) -> float:
    base = distance_km * rate_per_km
    if ServiceClass.parse(service_class) is ServiceClass.BUSINESS:
        base *= business_multiplier
    if has_baggage:
        base += baggage_surcharge
    if has_discount:
        base *= discount_factor
    return base * passengers


# ── Strategy hierarchy ────────────────────────────────────────────────


class CostPolicy(ABC):
    mode: TransportMode

    @abstractmethod
    def calculate_cost(
        self,
        distance_km: float,
        service_class: Union[str, ServiceClass],
        passengers: int,
        has_discount: bool,
        has_baggage: bool,
    ) -> float: ...


class PlanePolicy(CostPolicy):
    mode = TransportMode.PLANE

    def calculate_cost(
        self,
        distance_km: float,
        service_class: Union[str, ServiceClass],
        passengers: int,
        has_discount: bool,
        has_baggage: bool,
    ) -> float:
        return _tariff(
            distance_km, service_class, passengers, has_discount, has_baggage,
            rate_per_km=0.5,
            business_multiplier=2.0,
            baggage_surcharge=50.0,
            discount_factor=0.8,
        )


class TrainPolicy(CostPolicy):
    mode = TransportMode.TRAIN

    def calculate_cost(
        self,
        distance_km: float,
        service_class: Union[str, ServiceClass],
        passengers: int,
        has_discount: bool,
        has_baggage: bool,
    ) -> float:
        return _tariff(
            distance_km, service_class, passengers, has_discount, has_baggage,
            rate_per_km=0.3,
            business_multiplier=1.5,
            baggage_surcharge=20.0,
            discount_factor=0.85,
        )


class BusPolicy(CostPolicy):
    mode = TransportMode.BUS

    def calculate_cost(
        self,
        distance_km: float,
        service_class: Union[str, ServiceClass],
        passengers: int,
        has_discount: bool,
        has_baggage: bool,
    ) -> float:
        return _tariff(
            distance_km, service_class, passengers, has_discount, has_baggage,
            rate_per_km=0.2,
            business_multiplier=1.2,
            baggage_surcharge=10.0,
            discount_factor=0.9,
        )


POLICIES: dict[TransportMode, type[CostPolicy]] = {
    TransportMode.PLANE: PlanePolicy,
    TransportMode.TRAIN: TrainPolicy,
    TransportMode.BUS: BusPolicy,
}


def resolve_mode(choice: Union[int, str, TransportMode]) -> TransportMode:
    """Map a menu number (1/2/3) or a mode name to a ``TransportMode``."""
    if isinstance(choice, TransportMode):
        return choice
    if isinstance(choice, bool):
        raise InvalidTransportChoice(f"Invalid transport choice: {choice!r}")
    if isinstance(choice, int):
        mode = TRANSPORT_CHOICES.get(choice)
    else:
        key = str(choice).strip()
        if key.isdecimal():
            mode = TRANSPORT_CHOICES.get(int(key))
        else:
            mode = TransportMode.__members__.get(key.upper())
    if mode is None:
        raise InvalidTransportChoice(f"Invalid transport choice: {choice!r}")
    return mode


def policy_for(choice: Union[int, str, TransportMode]) -> CostPolicy:
    """Return a fresh policy for *choice*, or raise ``InvalidTransportChoice``."""
    return POLICIES[resolve_mode(choice)]()


# ── Context ───────────────────────────────────────────────────────────


class BookingContext:
    """Holds the selected cost policy and delegates quotes to it."""

    def __init__(self, policy: Optional[CostPolicy] = None):
        self._policy = policy

    @property
    def policy(self) -> Optional[CostPolicy]:
        return self._policy

    @property
    def has_policy(self) -> bool:
        return self._policy is not None

    def set_policy(self, policy: Optional[CostPolicy]) -> None:
        self._policy = policy

    def calculate(self, trip: TripRequest) -> float:
        """Price *trip* with the current policy; 0.0 if none is selected."""
        if self._policy is None:
            logger.warning("Cost policy not selected; returning zero cost")
            return 0.0
        return self._policy.calculate_cost(
            trip.distance_km,
            trip.service_class,
            trip.passengers,
            trip.has_discount,
            trip.has_baggage,
        )
