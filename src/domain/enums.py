"""Domain enumerations and input-resolution rules."""

from __future__ import annotations

import enum


class ServiceClass(str, enum.Enum):
    ECONOMY = "ECONOMY"
    BUSINESS = "BUSINESS"

    @classmethod
    def parse(cls, value: "str | ServiceClass | None") -> "ServiceClass":
        """Case-insensitive; anything that is not "business" is economy."""
        if isinstance(value, ServiceClass):
            return value
        if value is not None and value.strip().upper() == cls.BUSINESS.value:
            return cls.BUSINESS
        return cls.ECONOMY


class TransportMode(str, enum.Enum):
    PLANE = "PLANE"
    TRAIN = "TRAIN"
    BUS = "BUS"


# Menu numbering offered to travellers: 1 Plane, 2 Train, 3 Bus
TRANSPORT_CHOICES: dict[int, TransportMode] = {
    1: TransportMode.PLANE,
    2: TransportMode.TRAIN,
    3: TransportMode.BUS,
}


class TradeAction(str, enum.Enum):
    REPORT = "REPORT"
    BUY = "BUY"
    MONITOR = "MONITOR"
