from typing import Any, Iterable, Optional

from ...enum import DistanceUnit, Ordering
from ..geo_point import GeoPoint
from .builders import Query


class QueryField:
    """
    Builds constraints on a single field, for use with
    [`Query.field()`][flatquery.models.query.builders.Query.field].

    Every method forwards to the matching `field_is_*` method of an internal
    [`Query`][flatquery.models.query.builders.Query], with the field name pinned.
    Merging it back into a query is a plain union: it is not a logical group.

    Example:
        ```python
        from flatquery import Query, QueryField

        query = Query("user").field(
            QueryField("age").is_greater_than(20).is_less_than_or_equal_to(40)
        )
        ```
    """

    def __init__(self, field: str):
        self._field = field
        self._query = Query()

    @property
    def name(self) -> str:
        """The name of the field being constrained."""
        return self._field

    @property
    def query(self) -> Query:
        """The query holding the constraints built so far."""
        return self._query

    def is_equal_to(self, val: Any) -> "QueryField":
        self._query.field_is_equal_to(self._field, val)
        return self

    def is_not_equal_to(self, val: Any) -> "QueryField":
        self._query.field_is_not_equal(self._field, val)
        return self

    def is_null(self) -> "QueryField":
        self._query.field_is_null(self._field)
        return self

    def is_not_null(self) -> "QueryField":
        self._query.field_is_not_null(self._field)
        return self

    def is_less_than(self, val: Any) -> "QueryField":
        self._query.field_is_less_than(self._field, val)
        return self

    def is_less_than_or_equal_to(self, val: Any) -> "QueryField":
        self._query.field_is_less_than_or_equal_to(self._field, val)
        return self

    def is_greater_than(self, val: Any) -> "QueryField":
        self._query.field_is_greater_than(self._field, val)
        return self

    def is_greater_than_or_equal_to(self, val: Any) -> "QueryField":
        self._query.field_is_greater_than_or_equal_to(self._field, val)
        return self

    def is_in(self, values: Iterable[Any]) -> "QueryField":
        self._query.field_is_in(self._field, values)
        return self

    def is_near(
        self,
        point: GeoPoint,
        max_distance: Optional[float] = None,
        unit: DistanceUnit = DistanceUnit.MILES,
    ) -> "QueryField":
        self._query.field_is_near(self._field, point, max_distance, unit)
        return self

    def is_near_within_mi(self, point: GeoPoint, max_distance_mi: float) -> "QueryField":
        self._query.field_is_near_within_mi(self._field, point, max_distance_mi)
        return self

    def is_near_within_km(self, point: GeoPoint, max_distance_km: float) -> "QueryField":
        self._query.field_is_near_within_km(self._field, point, max_distance_km)
        return self

    def is_within_radius_in_mi(self, point: GeoPoint, radius_in_mi: float) -> "QueryField":
        self._query.field_is_within_radius_in_mi(self._field, point, radius_in_mi)
        return self

    def is_within_radius_in_km(self, point: GeoPoint, radius_in_km: float) -> "QueryField":
        self._query.field_is_within_radius_in_km(self._field, point, radius_in_km)
        return self

    def is_within_box(self, lower_left: GeoPoint, upper_right: GeoPoint) -> "QueryField":
        self._query.field_is_within_box(self._field, lower_left, upper_right)
        return self

    def is_ordered_by(self, ordering: Ordering) -> "QueryField":
        self._query.field_is_ordered_by(self._field, ordering)
        return self
