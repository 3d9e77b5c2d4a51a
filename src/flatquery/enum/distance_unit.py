from enum import Enum


class DistanceUnit(Enum):
    """
    Unit of a geospatial distance passed to the near/within clauses.
    """

    MILES = "mi"
    KILOMETERS = "km"

    @property
    def earth_radius(self) -> float:
        """Mean Earth radius expressed in this unit."""
        return _EARTH_RADIUS[self]

    def to_radians(self, distance: float) -> float:
        """Converts `distance`, expressed in this unit, to an angle in radians."""
        return distance / self.earth_radius

    def from_radians(self, radians: float) -> float:
        """Converts an angle in radians to a distance in this unit."""
        return radians * self.earth_radius


_EARTH_RADIUS = {
    DistanceUnit.MILES: 3956.6,
    DistanceUnit.KILOMETERS: 6367.5,
}
