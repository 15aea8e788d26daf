"""StatisticsEngine - derives FuelStats from a car's ledger."""

import logging

from .calculations import calc_average_consumption, calc_distance, calc_total
from .fuel_stats import FuelStats
from .ledger import FuelLedger
from .registry import CarRegistry

_logger = logging.getLogger(__name__)


class StatisticsEngine:
    """Computes total fuel, total cost and average consumption per car."""

    def __init__(self, registry: CarRegistry, ledger: FuelLedger):
        self._registry = registry
        self._ledger = ledger

    def calculate(self, car_id: int) -> FuelStats:
        """
        Calculate fuel statistics for a car.

        Sums run in ascending odometer order. The average needs at least
        two entries and a positive odometer span between the first and
        last of them; otherwise it is None.
        """
        self._registry.get_by_id(car_id)
        entries = self._ledger.entries_for_car(car_id)

        if not entries:
            _logger.info("No fuel entries found for car ID: %s", car_id)
            return FuelStats(total_fuel=0.0, total_cost=0.0)

        total_fuel = calc_total(e.liters for e in entries)
        total_cost = calc_total(e.price for e in entries)
        average = calc_average_consumption(total_fuel, calc_distance(entries))

        _logger.info(
            "Statistics for car %s - fuel: %sL, cost: %s, average: %s",
            car_id,
            total_fuel,
            total_cost,
            f"{average:.2f} L/100km" if average is not None else "N/A",
        )
        return FuelStats(
            total_fuel=total_fuel,
            total_cost=total_cost,
            average_consumption=average,
        )
