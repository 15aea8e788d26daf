"""Garage - wires the stores and services into one process-wide core."""

from datetime import date, datetime
from typing import Callable, List

from .car import Car
from .fuel_entry import FuelEntry
from .fuel_stats import FuelStats
from .ledger import FuelLedger
from .registry import CarRegistry
from .statistics import StatisticsEngine
from .store import EntityStore


class Garage:
    """
    The in-memory car and fuel data layer.

    Create one at process start and share it between request threads.
    State lives as long as the process.
    """

    def __init__(
        self,
        today: Callable[[], date] = date.today,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.cars: EntityStore[Car] = EntityStore("car")
        self.fuel_entries_store: EntityStore[FuelEntry] = EntityStore("fuel entry")
        self.registry = CarRegistry(self.cars, today=today)
        self.ledger = FuelLedger(self.fuel_entries_store, self.registry, clock=clock)
        self.statistics = StatisticsEngine(self.registry, self.ledger)

    def create_car(self, brand: str, model: str, year: int) -> Car:
        return self.registry.create(brand, model, year)

    def list_cars(self) -> List[Car]:
        return self.registry.list_all()

    def get_car(self, car_id: int) -> Car:
        return self.registry.get_by_id(car_id)

    def add_fuel_entry(
        self, car_id: int, liters: float, price: float, odometer: int
    ) -> FuelEntry:
        return self.ledger.add_entry(car_id, liters, price, odometer)

    def fuel_entries(self, car_id: int) -> List[FuelEntry]:
        """A car's entries in odometer order; raises NotFoundError."""
        self.registry.get_by_id(car_id)
        return self.ledger.entries_for_car(car_id)

    def all_fuel_entries(self) -> List[FuelEntry]:
        return self.ledger.all_entries()

    def fuel_stats(self, car_id: int) -> FuelStats:
        return self.statistics.calculate(car_id)
