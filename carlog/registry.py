"""CarRegistry - owns Car records and their uniqueness rules."""

import logging
import threading
from datetime import date
from typing import Callable, List

from .car import Car
from .errors import NotFoundError, ValidationError
from .fuel_entry import FuelEntry
from .store import EntityStore

_logger = logging.getLogger(__name__)

MIN_YEAR = 1900
MAX_YEAR = 2100


class CarRegistry:
    """Registers cars and resolves them by ID."""

    def __init__(
        self,
        store: EntityStore[Car],
        today: Callable[[], date] = date.today,
    ):
        self._store = store
        self._today = today
        self._lock = threading.Lock()

    def create(self, brand: str, model: str, year: int) -> Car:
        """
        Register a new car.

        Brand and model are trimmed. Raises ValidationError for empty
        names, a year outside [1900, current year + 1] (capped at 2100),
        or an existing car with the same brand, model and year.
        """
        brand = _clean_name(brand, "brand")
        model = _clean_name(model, "model")
        self._check_year(year)

        with self._lock:
            if self._exists(brand, model, year):
                _logger.warning("Car already exists: %s %s (%d)", brand, model, year)
                raise ValidationError(
                    f"Car already exists: {brand} {model} ({year})"
                )
            car = self._store.put(Car(brand=brand, model=model, year=year))

        _logger.info("Created car with ID: %s - %s", car.id, car.name)
        return car

    def get_by_id(self, car_id: int) -> Car:
        """Return the car or raise NotFoundError."""
        car = self._store.get(car_id)
        if car is None:
            raise NotFoundError("Car", car_id)
        return car

    def list_all(self) -> List[Car]:
        return self._store.list()

    def count(self) -> int:
        return self._store.count()

    def attach_fuel_entry(self, car_id: int, entry: FuelEntry) -> None:
        """Record a stored fuel entry's ID on its car."""
        car = self.get_by_id(car_id)
        car.fuel_entry_ids.append(entry.id)

    def _exists(self, brand: str, model: str, year: int) -> bool:
        return any(
            c.brand == brand and c.model == model and c.year == year
            for c in self._store.list()
        )

    def _check_year(self, year: int) -> None:
        if isinstance(year, bool) or not isinstance(year, int):
            raise ValidationError(f"Year must be an integer, got: {year!r}", "year")
        if year < MIN_YEAR:
            raise ValidationError(f"Year must be at least {MIN_YEAR}", "year")
        if year > MAX_YEAR:
            raise ValidationError(f"Year cannot exceed {MAX_YEAR}", "year")
        if year > self._today().year + 1:
            raise ValidationError(
                f"Year cannot be more than one year in the future: {year}", "year"
            )


def _clean_name(value: str, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field.capitalize()} cannot be empty", field)
    return value.strip()
