"""FuelStats dataclass for derived fuel statistics."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FuelStats:
    """Aggregated fuel data for one car. Not stored."""

    total_fuel: float
    total_cost: float
    average_consumption: Optional[float] = None  # L/100 distance units

    @property
    def has_average(self) -> bool:
        return self.average_consumption is not None

    def to_dict(self) -> Dict[str, Any]:
        # Absent average stays null, never 0
        return {
            "totalFuel": self.total_fuel,
            "totalCost": self.total_cost,
            "averageConsumption": self.average_consumption,
        }

    @classmethod
    def from_dict(cls, dct: Dict[str, Any]) -> "FuelStats":
        return cls(
            total_fuel=dct["totalFuel"],
            total_cost=dct["totalCost"],
            average_consumption=dct.get("averageConsumption"),
        )
