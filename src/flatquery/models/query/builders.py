"""
This module provides the "Fluent" API for building filter queries for a REST backend
that only understands flat, prefix-namespaced query arguments.

A [`Query`][flatquery.models.query.builders.Query] accumulates per-field constraints
(equality, ranges, set membership, null checks, geospatial proximity and containment),
ordering and pagination directives, and nested AND/OR groups. It is then flattened into:

* **arguments**: an ordered list of `(key, value)` pairs sent as URL query parameters,
  e.g. `[("age[gt]", "20"), ("[or1].name", "bob")]`;
* **headers**: the ordering and range directives, sent as request headers.

Note: Thread safety
    A `Query` is a plain mutable builder with no internal locking. Synchronize
    access if the same instance is shared between threads.
"""

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

from ...enum import DistanceUnit, JoinMode, Operator, Ordering
from ...helpers import format_number, format_value, join_values
from ...logging_config import get_logger
from ..geo_point import GeoPoint
from .config import DEFAULT_QUERY_CONFIG, QueryConfig
from .expressions import _QueryCombinator, _QueryExpression, _QueryGroup, _QueryNode

if TYPE_CHECKING:
    from .field import QueryField

# Set the hierarchical logger
logger = get_logger(__name__)


class InvalidJoinStateError(ValueError):
    """Raised when AND and OR are mixed at the same level of a query."""

    pass


class Query:
    """
    A filter, ordering and pagination query on a single object type (schema).

    Constraints are joined by AND by default. Use [`and_()`][flatquery.models.query.builders.Query.and_]
    and [`or_()`][flatquery.models.query.builders.Query.or_] to declare the join
    explicitly or to fold parenthesized sub-queries in.

    Example:
        ```python
        from flatquery import Query, QueryField, Ordering

        # (age > 20) AND (age <= 40) AND (friend IN [joe, bob, alice])
        query = (
            Query("user")
            .field_is_greater_than("age", 20)
            .field_is_less_than_or_equal_to("age", 40)
            .field_is_in("friend", ["joe", "bob", "alice"])
            .field_is_ordered_by("age", Ordering.DESCENDING)
            .is_in_range(0, 9)
        )

        # Same constraints, scoped per field
        query = (
            Query("user")
            .field(QueryField("age").is_greater_than(20).is_less_than_or_equal_to(40))
            .field(QueryField("friend").is_in(["joe", "bob", "alice"]))
        )

        query.get_arguments()
        # [("age[gt]", "20"), ("age[lte]", "40"), ("friend[in]", "joe,bob,alice")]
        ```
    """

    def __init__(
        self,
        object_name: Optional[str] = None,
        config: Optional[QueryConfig] = None,
    ):
        """
        Creates an empty query.

        Args:
            object_name: The schema being queried. Can be set later through the
                `object_name` property.
            config: Wire directive names. Defaults to [`QueryConfig()`][flatquery.models.query.config.QueryConfig].
        """
        self._object_name = object_name
        self._config = config or DEFAULT_QUERY_CONFIG
        self._expressions: List[_QueryNode] = []
        self._headers: Dict[str, str] = {}
        self._join_mode = JoinMode.UNSET
        self._or_count = 1
        self._and_count = 1

    @classmethod
    def objects(cls, object_name: str) -> "Query":
        """Creates a query on the `object_name` schema."""
        return cls(object_name)

    @property
    def object_name(self) -> Optional[str]:
        """The schema being queried against."""
        return self._object_name

    @object_name.setter
    def object_name(self, object_name: str):
        self._object_name = object_name

    @property
    def join_mode(self) -> JoinMode:
        """The join declared for the top level of this query."""
        return self._join_mode

    @property
    def config(self) -> QueryConfig:
        return self._config

    # --- Flattening --

    def get_headers(self) -> Dict[str, str]:
        """
        Returns the ordering and range directives, keyed by header name.

        Example Output:
            `{"X-StackMob-OrderBy": "age:desc,name:asc", "Range": "objects=0-9"}`
        """
        return dict(self._headers)

    def get_arguments(self) -> List[Tuple[str, str]]:
        """
        Returns the constraints as ordered `(key, value)` query arguments.

        If the top level was declared as OR, every argument gets one more
        `[or{N}].` prefix, since the backend joins unprefixed arguments by AND.

        Example Output:
            `[("age[gt]", "20"), ("[or1].name", "bob"), ("[or1].name[null]", "true")]`
        """
        nodes: List[_QueryNode] = list(self._expressions)
        if self._join_mode is JoinMode.OR and nodes:
            nodes = [_QueryGroup(JoinMode.OR, self._or_count, nodes)]
        items = _QueryCombinator(nodes).to_items()
        logger.debug(f"Flattened query on '{self._object_name}' into {len(items)} arguments")
        return items

    def to_dict(self) -> Dict[str, Any]:
        """
        Returns a snapshot of the flattened query.

        Example Output:
            ```json
            {
                "object_name": "user",
                "arguments": [["age[gt]", "20"]],
                "headers": {"Range": "objects=0-9"}
            }
            ```
        """
        return {
            "object_name": self._object_name,
            "arguments": [list(item) for item in self.get_arguments()],
            "headers": self.get_headers(),
        }

    # --- Logical Combinators --

    def add(self, other: "Query") -> "Query":
        """
        Copies the headers and the top-level constraints of `other` into this query.

        This is a plain union: no prefix is added and the join mode is not
        checked. Headers already present are overwritten by those of `other`.

        Args:
            other: The query whose constraints are copied. It is not modified.

        Returns:
            The `Query` instance for method chaining.
        """
        self._headers.update(other._headers)
        self._expressions.extend(other._expressions)
        return self

    def field(self, field: "QueryField") -> "Query":
        """
        Merges the constraints built on a [`QueryField`][flatquery.models.query.field.QueryField].

        Example:
            ```python
            Query("user").field(QueryField("age").is_greater_than(20).is_less_than(40))
            ```
        """
        return self.add(field.query)

    def _declare(self, mode: JoinMode):
        if self._join_mode not in (JoinMode.UNSET, mode):
            logger.error(
                f"Cannot declare {mode.name} on query '{self._object_name}': "
                f"its top level is already joined by {self._join_mode.name}"
            )
            raise InvalidJoinStateError(
                "Mixing OR and AND on the same level is not allowed"
            )
        self._join_mode = mode

    def _fold(self, mode: JoinMode, ordinal: int, clauses: "Query"):
        group = _QueryGroup(mode, ordinal, clauses._expressions)
        logger.debug(
            f"Folding {len(group.expressions)} clauses into query '{self._object_name}' under '{group.prefix}'"
        )
        self._expressions.append(group)

    def and_(self, clauses: Optional["Query"] = None) -> "Query":
        """
        Joins constraints at this level with AND.

        Without arguments, simply declares the AND join: constraints are joined
        like this by default, so this only makes queries read naturally.

        With a sub-query, adds it as a parenthesized block whose own clauses are
        joined by OR, giving `A AND (B OR C OR ...)`. Each block gets its own
        `[or{N}].` key prefix, so several blocks can be added to the same query.
        Only the sub-query's own constraints are taken: its declared join is ignored.

        AND and OR cannot be mixed at the same level; start a sub-query instead.

        Args:
            clauses: An optional sub-query whose constraints are OR'ed together.
                It is not modified.

        Returns:
            The `Query` instance for method chaining.

        Raises:
            InvalidJoinStateError: If this level was already declared as OR.
        """
        self._declare(JoinMode.AND)
        if clauses is not None:
            self._fold(JoinMode.OR, self._or_count, clauses)
            self._or_count += 1
        return self

    def or_(self, clauses: Optional["Query"] = None) -> "Query":
        """
        Joins constraints at this level with OR.

        Without arguments, declares the OR join for the top level of this query.

        With a sub-query, adds it as a parenthesized block whose own clauses are
        joined by AND, giving `A OR (B AND C AND ...)`. Each block gets its own
        `[and{N}].` key prefix.

        Args:
            clauses: An optional sub-query whose constraints are AND'ed together.
                It is not modified.

        Returns:
            The `Query` instance for method chaining.

        Raises:
            InvalidJoinStateError: If this level was already declared as AND.
        """
        self._declare(JoinMode.OR)
        if clauses is not None:
            self._fold(JoinMode.AND, self._and_count, clauses)
            self._and_count += 1
        return self

    # --- Clauses --

    def _put(self, field: str, op: Optional[Operator], value: str) -> "Query":
        self._expressions.append(_QueryExpression(field, op, value))
        return self

    def field_is_equal_to(self, field: str, val: Any) -> "Query":
        """
        Adds `field == val`.

        `None` is translated into [`field_is_null`][flatquery.models.query.builders.Query.field_is_null]
        and the empty string into an explicit `field[empty]=true` check, since
        the backend cannot tell an empty-string equality from a missing value.
        """
        if val is None:
            return self.field_is_null(field)
        if val == "":
            return self._put(field, Operator.EMPTY, "true")
        return self._put(field, None, format_value(val))

    def field_is_not_equal(self, field: str, val: Any) -> "Query":
        """
        Adds `field != val`.

        `None` is translated into [`field_is_not_null`][flatquery.models.query.builders.Query.field_is_not_null]
        and the empty string into `field[empty]=false`.
        """
        if val is None:
            return self.field_is_not_null(field)
        if val == "":
            return self._put(field, Operator.EMPTY, "false")
        return self._put(field, Operator.NE, format_value(val))

    def field_is_null(self, field: str) -> "Query":
        return self._put(field, Operator.NULL, "true")

    def field_is_not_null(self, field: str) -> "Query":
        return self._put(field, Operator.NULL, "false")

    def field_is_less_than(self, field: str, val: Any) -> "Query":
        """
        Adds `field < val`. Integers are rendered in decimal; whether the backend
        compares as numbers or strings is up to it.
        """
        return self._put(field, Operator.LT, format_value(val))

    def field_is_less_than_or_equal_to(self, field: str, val: Any) -> "Query":
        """Same as `field_is_less_than`, but applies `<=`."""
        return self._put(field, Operator.LTE, format_value(val))

    def field_is_greater_than(self, field: str, val: Any) -> "Query":
        """Same as `field_is_less_than`, but applies `>`."""
        return self._put(field, Operator.GT, format_value(val))

    def field_is_greater_than_or_equal_to(self, field: str, val: Any) -> "Query":
        """Same as `field_is_less_than`, but applies `>=`."""
        return self._put(field, Operator.GTE, format_value(val))

    def field_is_in(self, field: str, values: Iterable[Any]) -> "Query":
        """
        Adds `field IN values`.

        The values are joined with commas; commas inside a value are not escaped.
        """
        return self._put(field, Operator.IN, join_values(values))

    # --- Geospatial clauses --

    @staticmethod
    def _geo_value(point: GeoPoint, distance: Optional[float], unit: DistanceUnit) -> str:
        arguments = point.as_list()
        if distance is not None:
            arguments.append(format_number(unit.to_radians(distance)))
        return join_values(arguments)

    def field_is_near(
        self,
        field: str,
        point: GeoPoint,
        max_distance: Optional[float] = None,
        unit: DistanceUnit = DistanceUnit.MILES,
    ) -> "Query":
        """
        Adds a NEAR clause on a geo point field. Results are returned sorted by
        distance from `point`, closest first.

        Args:
            field: The geo point field to test.
            point: The lon/lat location at the center of the search.
            max_distance: Optional maximum distance between `point` and a match,
                expressed in `unit`. It is sent to the backend in radians.
            unit: The unit of `max_distance`.

        Returns:
            The `Query` instance for method chaining.
        """
        return self._put(field, Operator.NEAR, self._geo_value(point, max_distance, unit))

    def field_is_near_within_mi(self, field: str, point: GeoPoint, max_distance_mi: float) -> "Query":
        return self.field_is_near(field, point, max_distance_mi, DistanceUnit.MILES)

    def field_is_near_within_km(self, field: str, point: GeoPoint, max_distance_km: float) -> "Query":
        return self.field_is_near(field, point, max_distance_km, DistanceUnit.KILOMETERS)

    def field_is_within_radius(
        self,
        field: str,
        point: GeoPoint,
        radius: float,
        unit: DistanceUnit = DistanceUnit.MILES,
    ) -> "Query":
        """
        Adds a WITHIN clause matching geo points at most `radius` away from
        `point`. Unlike NEAR, results are not sorted by distance.
        """
        return self._put(field, Operator.WITHIN, self._geo_value(point, radius, unit))

    def field_is_within_radius_in_mi(self, field: str, point: GeoPoint, radius_in_mi: float) -> "Query":
        return self.field_is_within_radius(field, point, radius_in_mi, DistanceUnit.MILES)

    def field_is_within_radius_in_km(self, field: str, point: GeoPoint, radius_in_km: float) -> "Query":
        return self.field_is_within_radius(field, point, radius_in_km, DistanceUnit.KILOMETERS)

    def field_is_within_box(self, field: str, lower_left: GeoPoint, upper_right: GeoPoint) -> "Query":
        """
        Adds a WITHIN clause matching geo points inside the box bounded by
        `lower_left` and `upper_right`.
        """
        return self._put(
            field,
            Operator.WITHIN,
            join_values(lower_left.as_list() + upper_right.as_list()),
        )

    # --- Directives --

    def field_is_ordered_by(self, field: str, ordering: Ordering) -> "Query":
        """
        Adds an ORDER BY on `field`.

        Successive calls are appended in call order, which is the tie-break
        priority of the sort, e.g. `age:desc,name:asc`.
        """
        header = self._config.order_by_header
        order = f"{field}:{Ordering(ordering).value}"
        current = self._headers.get(header)
        self._headers[header] = order if current is None else f"{current},{order}"
        return self

    def is_in_range(self, start: int, end: Optional[int] = None) -> "Query":
        """
        Restricts the results to the objects from `start` to `end`, both inclusive.
        Omitting `end` returns every object from `start` onwards. Can be used to
        implement pagination.

        Values are sent as given; no bounds checking is performed.
        """
        end_str = "" if end is None else str(end)
        self._headers[self._config.range_header] = f"objects={start}-{end_str}"
        return self

    def __repr__(self) -> str:
        return (
            f"Query(object_name={self._object_name!r}, join_mode={self._join_mode.name}, "
            f"expressions={self._expressions!r}, headers={self._headers!r})"
        )
