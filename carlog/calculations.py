"""Helper functions for fuel statistics calculations."""

from typing import Iterable, List, Optional

from .fuel_entry import FuelEntry


def calc_total(values: Iterable[float]) -> float:
    """Sum values in the given order, starting from 0.0."""
    total = 0.0
    for value in values:
        total += value
    return total


def calc_distance(entries: List[FuelEntry]) -> Optional[int]:
    """
    Distance between the first and last entry of an odometer-sorted list.

    - Fewer than 2 entries: None
    - Otherwise: last odometer - first odometer (may be 0 or negative
      only if the list breaks the monotonic invariant)
    """
    if len(entries) < 2:
        return None
    return entries[-1].odometer - entries[0].odometer


def calc_average_consumption(
    total_fuel: float, distance: Optional[int]
) -> Optional[float]:
    """Liters per 100 distance units, or None without a positive distance."""
    if distance is None or distance <= 0:
        return None
    return (total_fuel / distance) * 100
