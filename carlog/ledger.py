"""FuelLedger - owns FuelEntry records and the odometer invariant."""

import logging
import math
import threading
from datetime import datetime
from typing import Callable, Dict, List

from .errors import ValidationError
from .fuel_entry import FuelEntry
from .registry import CarRegistry
from .store import EntityStore

_logger = logging.getLogger(__name__)


class FuelLedger:
    """
    Records refuels for registered cars.

    For a given car, odometer readings must strictly increase. The read,
    check and insert for one car run under that car's lock, so two
    concurrent refuels cannot both pass the check against the same
    previous reading.
    """

    def __init__(
        self,
        store: EntityStore[FuelEntry],
        registry: CarRegistry,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._store = store
        self._registry = registry
        self._clock = clock
        self._car_locks: Dict[int, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def add_entry(
        self, car_id: int, liters: float, price: float, odometer: int
    ) -> FuelEntry:
        """
        Add a fuel entry to a car.

        Raises NotFoundError for an unknown car and ValidationError for
        non-positive values or an odometer not above the last reading.
        Nothing is stored when validation fails.
        """
        self._registry.get_by_id(car_id)
        _check_types(liters, price, odometer)

        with self._lock_for(car_id):
            existing = self.entries_for_car(car_id)
            if existing and odometer <= existing[-1].odometer:
                last = existing[-1].odometer
                _logger.warning(
                    "Invalid odometer reading for car %s: %s (last reading: %s)",
                    car_id,
                    odometer,
                    last,
                )
                raise ValidationError(
                    f"Invalid odometer reading: {odometer}. "
                    f"Must be greater than the last reading: {last}",
                    "odometer",
                )

            _check_positive(liters, "liters")
            _check_positive(price, "price")
            _check_positive(odometer, "odometer")

            entry = self._store.put(
                FuelEntry(
                    car_id=car_id,
                    liters=float(liters),
                    price=float(price),
                    odometer=odometer,
                    timestamp=self._clock(),
                )
            )
            self._registry.attach_fuel_entry(car_id, entry)

        _logger.info(
            "Added fuel entry %s for car %s: %sL for %s (odometer: %s)",
            entry.id,
            car_id,
            entry.liters,
            entry.price,
            entry.odometer,
        )
        return entry

    def entries_for_car(self, car_id: int) -> List[FuelEntry]:
        """A car's entries sorted by odometer, ties in insertion order."""
        entries = [e for e in self._store.list() if e.car_id == car_id]
        return sorted(entries, key=lambda e: e.odometer)

    def all_entries(self) -> List[FuelEntry]:
        """Every entry sorted by timestamp, ties in insertion order."""
        return sorted(self._store.list(), key=lambda e: e.timestamp)

    def count(self) -> int:
        return self._store.count()

    def _lock_for(self, car_id: int) -> threading.Lock:
        with self._locks_guard:
            lock = self._car_locks.get(car_id)
            if lock is None:
                lock = self._car_locks[car_id] = threading.Lock()
            return lock


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_types(liters, price, odometer) -> None:
    if not _is_number(liters):
        raise ValidationError(f"liters must be a number, got: {liters!r}", "liters")
    if not _is_number(price):
        raise ValidationError(f"price must be a number, got: {price!r}", "price")
    if isinstance(odometer, bool) or not isinstance(odometer, int):
        raise ValidationError(
            f"odometer must be an integer, got: {odometer!r}", "odometer"
        )


def _check_positive(value, field: str) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"{field} must be a positive value, got: {value}", field)
