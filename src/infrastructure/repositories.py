"""
Repository Pattern -- keeps the API's observer handles out of the domain.

Observers are process-local and never persisted; the repository only
hands out integer ids so HTTP clients can refer to them.  Entries live
as long as the app: there is no observer deletion, so the map grows with
every registration.  Each observer caps its own report history
(``Observer.MAX_NOTIFICATIONS``).
"""

from __future__ import annotations

import itertools
from typing import Optional

from src.domain.market import Observer


class ObserverRepository:
    def __init__(self) -> None:
        self._observers: dict[int, Observer] = {}
        self._ids = itertools.count(1)

    def add(self, observer: Observer) -> int:
        observer_id = next(self._ids)
        self._observers[observer_id] = observer
        return observer_id

    def get_by_id(self, observer_id: int) -> Optional[Observer]:
        return self._observers.get(observer_id)
