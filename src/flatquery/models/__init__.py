from .geo_point import GeoPoint as GeoPoint
from .query import (
    Query as Query,
    QueryField as QueryField,
    QueryConfig as QueryConfig,
    InvalidJoinStateError as InvalidJoinStateError,
)
