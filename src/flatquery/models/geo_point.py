"""
Geospatial point model.

Defines the lon/lat point used by the near/within clauses of
[`Query`][flatquery.models.query.builders.Query], together with the
distance <-> radians conversions the backend expects for radius operands.
"""

from typing import List

import pydantic
from pydantic import ConfigDict

from ..enum import DistanceUnit
from ..helpers import format_number


class GeoPoint(pydantic.BaseModel):
    """
    An immutable longitude/latitude pair.

    Coordinates are not range-checked: validating geographic legality is left
    to the backend.

    Example:
        ```python
        from flatquery import GeoPoint, Query

        query = Query("place").field_is_near_within_km("location", GeoPoint(lon=12.5, lat=41.9), 10)
        ```
    """

    model_config = ConfigDict(frozen=True)

    lon: float
    """Longitude, in degrees."""

    lat: float
    """Latitude, in degrees."""

    def as_list(self) -> List[str]:
        """
        Returns the coordinates as wire strings, longitude first.

        Example:
            `GeoPoint(lon=10, lat=20.5).as_list()` -> `["10", "20.5"]`
        """
        return [format_number(self.lon), format_number(self.lat)]

    @staticmethod
    def mi_to_radians(mi: float) -> float:
        return DistanceUnit.MILES.to_radians(mi)

    @staticmethod
    def km_to_radians(km: float) -> float:
        return DistanceUnit.KILOMETERS.to_radians(km)

    @staticmethod
    def radians_to_mi(radians: float) -> float:
        return DistanceUnit.MILES.from_radians(radians)

    @staticmethod
    def radians_to_km(radians: float) -> float:
        return DistanceUnit.KILOMETERS.from_radians(radians)
