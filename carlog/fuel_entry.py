"""FuelEntry record for a single refueling."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from dateutil.parser import isoparse


@dataclass(frozen=True)
class FuelEntry:
    """
    One refueling event for a car.

    Holds only the owning car's ID; a car's entries are found by filtering
    the ledger.
    """

    car_id: int
    liters: float
    price: float
    odometer: int
    timestamp: datetime
    id: Optional[int] = None

    @property
    def price_per_liter(self) -> float:
        return self.price / self.liters

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "carId": self.car_id,
            "liters": self.liters,
            "price": self.price,
            "odometer": self.odometer,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, dct: Dict[str, Any]) -> "FuelEntry":
        return cls(
            car_id=dct["carId"],
            liters=dct["liters"],
            price=dct["price"],
            odometer=dct["odometer"],
            timestamp=isoparse(dct["timestamp"]),
            id=dct.get("id"),
        )
