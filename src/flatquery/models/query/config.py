"""
Configuration Module.

Defines the wire-level names the query builders use for the directives that
travel outside the constraint key space (ordering and pagination).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class QueryConfig:
    """
    Directive names used when flattening a [`Query`][flatquery.models.query.builders.Query].

    The transport layer sends each directive as an HTTP header; the names must
    match what the backend reads. The defaults fit the reference backend and
    rarely need to change.
    """

    order_by_header: str = "X-StackMob-OrderBy"
    """
    Header carrying the comma-joined `field:asc|desc` ordering pairs.
    The pairs are listed in tie-break priority order.
    """

    range_header: str = "Range"
    """
    Header carrying the `objects={start}-{end}` pagination descriptor.
    Both ends are inclusive; the end may be empty for an open range.
    """


DEFAULT_QUERY_CONFIG = QueryConfig()
