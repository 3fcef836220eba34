"""
Stock Price Alerts  (Observer Pattern)
======================================

``PriceSubject`` keeps a registry ``symbol -> [observer, ...]``.  Lists
are created lazily on first subscribe, keep insertion order, allow the
same observer more than once, and are never pruned automatically.

Delivery is synchronous: ``set_price`` records the price and fans the
update out to every current subscriber before returning.

Complexity: O(k) per notification, k = subscribers of the symbol.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import defaultdict, deque
from typing import Optional

from .entities import Notification
from .enums import TradeAction

logger = logging.getLogger(__name__)


# ── Observers ─────────────────────────────────────────────────────────


class Observer(ABC):
    """Reacts to a price update for a symbol it subscribed to."""

    # oldest reports are dropped once the history is full
    MAX_NOTIFICATIONS = 500

    def __init__(self) -> None:
        self.notifications: deque[Notification] = deque(maxlen=self.MAX_NOTIFICATIONS)

    @property
    @abstractmethod
    def label(self) -> str: ...

    @abstractmethod
    def update(self, symbol: str, price: float) -> None: ...

    def _report(
        self, symbol: str, price: float, action: TradeAction, message: str
    ) -> Notification:
        note = Notification(
            observer=self.label,
            symbol=symbol,
            price=price,
            action=action,
            message=message,
        )
        self.notifications.append(note)
        logger.info(message)
        return note


class Trader(Observer):
    def __init__(self, name: str):
        super().__init__()
        self.name = name

    @property
    def label(self) -> str:
        return f"trader:{self.name}"

    def update(self, symbol: str, price: float) -> None:
        self._report(
            symbol,
            price,
            TradeAction.REPORT,
            f"Trader {self.name} received update: {symbol} = {price}",
        )


class TradingRobot(Observer):
    """Buys strictly below ``buy_threshold``, otherwise keeps monitoring."""

    def __init__(self, buy_threshold: float):
        super().__init__()
        self._buy_threshold = buy_threshold

    @property
    def buy_threshold(self) -> float:
        return self._buy_threshold

    @property
    def label(self) -> str:
        return f"robot:{self._buy_threshold:g}"

    def decide(self, price: float) -> TradeAction:
        return TradeAction.BUY if price < self._buy_threshold else TradeAction.MONITOR

    def update(self, symbol: str, price: float) -> None:
        action = self.decide(price)
        verb = "buying" if action is TradeAction.BUY else "monitoring"
        self._report(symbol, price, action, f"Robot {verb} {symbol} at {price}")


class MobileApp(Observer):
    @property
    def label(self) -> str:
        return "mobile"

    def update(self, symbol: str, price: float) -> None:
        self._report(
            symbol,
            price,
            TradeAction.REPORT,
            f"Mobile notification: {symbol} = {price}",
        )


# ── Subject ───────────────────────────────────────────────────────────


class PriceSubject:
    """Subscription registry and synchronous notification dispatcher.

    With ``isolate_failures`` an exception raised by one observer is
    logged and the remaining observers are still notified; without it the
    exception propagates to the caller of ``notify`` / ``set_price``.
    """

    def __init__(self, isolate_failures: bool = False):
        self.isolate_failures = isolate_failures
        self._observers: dict[str, list[Observer]] = defaultdict(list)
        self._last_prices: dict[str, float] = {}

    def subscribe(self, symbol: str, observer: Observer) -> None:
        self._observers[symbol].append(observer)
        logger.info("Observer %s subscribed to %s", observer.label, symbol)

    def unsubscribe(self, symbol: str, observer: Observer) -> None:
        """Remove the first matching subscription; silently ignore misses."""
        subscribers = self._observers.get(symbol)
        if subscribers and observer in subscribers:
            subscribers.remove(observer)
            logger.info("Observer %s unsubscribed from %s", observer.label, symbol)

    def notify(self, symbol: str, price: float) -> int:
        """Deliver ``update(symbol, price)`` in subscription order.

        Returns the number of observers that handled the update.
        """
        # snapshot: observers may (un)subscribe while being notified
        subscribers = list(self._observers.get(symbol, ()))
        delivered = 0
        for observer in subscribers:
            if not self.isolate_failures:
                observer.update(symbol, price)
                delivered += 1
                continue
            try:
                observer.update(symbol, price)
            except Exception:
                logger.exception(
                    "Observer %s failed on %s update", observer.label, symbol
                )
            else:
                delivered += 1
        return delivered

    def set_price(self, symbol: str, price: float) -> int:
        self._last_prices[symbol] = price
        logger.info("Stock updated: %s price = %s", symbol, price)
        return self.notify(symbol, price)

    # ── Queries ───────────────────────────────────────────────────

    def subscribers(self, symbol: str) -> list[Observer]:
        return list(self._observers.get(symbol, ()))

    def last_price(self, symbol: str) -> Optional[float]:
        return self._last_prices.get(symbol)

    def symbols(self) -> list[str]:
        """Every symbol with a subscription list or a recorded price."""
        known = dict.fromkeys(self._observers)
        known.update(dict.fromkeys(self._last_prices))
        return list(known)
