"""Car record for vehicle identification."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Car:
    """A registered vehicle and the IDs of its fuel entries."""

    brand: str
    model: str
    year: int
    id: Optional[int] = None
    fuel_entry_ids: List[int] = field(default_factory=list, hash=False)

    def __post_init__(self):
        # Each instance owns its association list, copies included.
        object.__setattr__(self, "fuel_entry_ids", list(self.fuel_entry_ids))

    @property
    def name(self) -> str:
        """Human-readable vehicle name."""
        return f"{self.year} {self.brand} {self.model}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "brand": self.brand,
            "model": self.model,
            "year": self.year,
            "fuelEntryIds": list(self.fuel_entry_ids),
        }

    @classmethod
    def from_dict(cls, dct: Dict[str, Any]) -> "Car":
        return cls(
            brand=dct["brand"],
            model=dct["model"],
            year=dct["year"],
            id=dct.get("id"),
            fuel_entry_ids=list(dct.get("fuelEntryIds") or []),
        )
