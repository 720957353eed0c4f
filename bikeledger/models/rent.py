"""
Rent
---------------------------

A rent ties a user to a bike for a period of time.
It is open until its end time is set.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any

from shapely.geometry import LineString

from bikeledger.models.bike import Bike
from bikeledger.models.location import Location
from bikeledger.models.user import User


@dataclass(eq=False)
class Rent:
    bike: Bike
    user: User
    start: datetime
    end: Optional[datetime] = None

    price: Optional[float] = None
    """The fee charged when the rent was closed."""

    route: List[Location] = field(default_factory=list)
    """The locations the bike was moved to while rented, starting where it was picked up."""

    @property
    def is_open(self) -> bool:
        return self.end is None

    @property
    def distance(self) -> float:
        """The length of the route, in coordinate units."""
        if len(self.route) > 1:
            return LineString([location.point.coords[0] for location in self.route]).length
        return 0

    def serialize(self) -> Dict[str, Any]:
        data = {
            "bike_id": self.bike.id,
            "user_id": self.user.id,
            "start_time": self.start,
            "is_open": self.is_open,
            "distance": self.distance
        }

        if not self.is_open:
            data["end_time"] = self.end
            data["price"] = self.price

        return data
