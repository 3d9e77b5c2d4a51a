from .builders import (
    Query as Query,
    InvalidJoinStateError as InvalidJoinStateError,
)
from .field import QueryField as QueryField
from .config import QueryConfig as QueryConfig
