"""
flatquery - client-side query encoding for flat, prefix-namespaced REST filters.

This package builds nested boolean filter expressions, ordering and pagination
directives, and flattens them into query arguments and request headers:

- **Query**: the fluent builder and its AND/OR group combinators.
- **QueryField**: a builder pinned to a single field.
- **GeoPoint**: the lon/lat point used by geospatial clauses.

Example:
    >>> from flatquery import Query
    >>> Query("user").field_is_greater_than("age", 20).get_arguments()
    [('age[gt]', '20')]
"""

# --- Main Query classes ---
from .models.query import (
    Query as Query,
    QueryField as QueryField,
    QueryConfig as QueryConfig,
    InvalidJoinStateError as InvalidJoinStateError,
)

# --- Models ---
from .models import GeoPoint as GeoPoint

# --- Enums ---
from .enum import (
    Ordering as Ordering,
    Operator as Operator,
    JoinMode as JoinMode,
    DistanceUnit as DistanceUnit,
)

from .logging_config import (
    get_logger as get_logger,
    setup_sdk_logging as setup_sdk_logging,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_sdk_logging",
    # Query
    "Query",
    "QueryField",
    "QueryConfig",
    "InvalidJoinStateError",
    # Models
    "GeoPoint",
    # Enums
    "Ordering",
    "Operator",
    "JoinMode",
    "DistanceUnit",
]


# --- Set up the top-level logger for the package ---

from logging import NullHandler

logging_config = get_logger()
logging_config.addHandler(NullHandler())
