"""
Bike
-------------------------

Represents a bike in the ledger. A bike has an hourly rate, a location
and an availability flag which the :class:`~bikeledger.service.registry.Registry`
flips as rentals are opened and closed.
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any

from bikeledger.models.location import Location


@dataclass
class Bike:
    rate: float
    """The hourly rate of the bike."""

    location: Location
    available: bool = True
    description: str = ""
    id: Optional[str] = None
    """Assigned by the registry when the bike is registered."""

    def __post_init__(self):
        if self.rate < 0:
            raise ValueError(f"Rate must not be negative, got {self.rate}.")

    def serialize(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "rate": self.rate,
            "available": self.available,
            "description": self.description,
            "location": self.location.serialize()
        }

    def __str__(self):
        return f"[{self.id}] {self.description or 'bike'} @ {self.location}"
