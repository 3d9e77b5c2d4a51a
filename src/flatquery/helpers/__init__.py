from .helpers import (
    format_number as format_number,
    format_value as format_value,
    join_values as join_values,
)
