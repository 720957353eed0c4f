from dataclasses import dataclass

from shapely.geometry import Point


@dataclass
class Location:
    """
    A latitude / longitude pair.

    .. note:: Locations have value semantics. A bike owns its location,
        and moving a bike copies the coordinates into it rather than
        sharing the caller's instance.
    """

    latitude: float
    longitude: float

    @property
    def point(self) -> Point:
        """The location as a point, with the longitude on the x axis."""
        return Point(self.longitude, self.latitude)

    def copy(self) -> 'Location':
        return Location(self.latitude, self.longitude)

    def serialize(self):
        return {
            "latitude": self.latitude,
            "longitude": self.longitude
        }

    def __str__(self):
        return f"{self.latitude},{self.longitude}"
