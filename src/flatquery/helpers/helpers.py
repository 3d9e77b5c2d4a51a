"""
Helper Utilities.

Provides the value formatting shared by the query builders and the geo model.
"""

from typing import Any, Iterable


def format_number(value: float) -> str:
    """
    Renders a number as a query string value.

    Integral values are rendered without a decimal part, all other floats use
    the shortest representation that round-trips.

    Examples:
        - `10` -> `"10"`
        - `10.0` -> `"10"`
        - `0.25` -> `"0.25"`
    """
    if isinstance(value, int):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_value(value: Any) -> str:
    """
    Renders a clause operand as a string.

    Strings pass through untouched, booleans become `"true"`/`"false"` and
    numbers are rendered by `format_number`. Anything else falls back to `str()`.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def join_values(values: Iterable[Any], sep: str = ",") -> str:
    """
    Joins operands into a single separator-delimited value.

    Embedded separators are not escaped.
    """
    return sep.join(format_value(v) for v in values)
