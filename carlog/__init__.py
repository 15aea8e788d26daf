"""
Car fuel tracking core.

This package provides the in-memory data layer for tracking cars and
their refuels:
- EntityStore: thread-safe keyed storage with monotonic IDs
- Car / FuelEntry: stored records
- FuelStats: derived fuel statistics
- CarRegistry / FuelLedger / StatisticsEngine: the services
- Garage: one object wiring all of the above
"""

from .errors import (
    CarlogError,
    ValidationError,
    NotFoundError,
    ConfigError,
    ApiError,
)
from .store import EntityStore
from .car import Car
from .fuel_entry import FuelEntry
from .fuel_stats import FuelStats
from .calculations import calc_total, calc_distance, calc_average_consumption
from .registry import CarRegistry
from .ledger import FuelLedger
from .statistics import StatisticsEngine
from .garage import Garage
from .config import Config, load_config, setup_logging

__all__ = [
    "CarlogError",
    "ValidationError",
    "NotFoundError",
    "ConfigError",
    "ApiError",
    "EntityStore",
    "Car",
    "FuelEntry",
    "FuelStats",
    "calc_total",
    "calc_distance",
    "calc_average_consumption",
    "CarRegistry",
    "FuelLedger",
    "StatisticsEngine",
    "Garage",
    "Config",
    "load_config",
    "setup_logging",
]
