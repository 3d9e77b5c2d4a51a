from enum import StrEnum


class Ordering(StrEnum):
    """
    Sort direction of an ordering directive.

    The value is the token sent on the wire, e.g. `age:desc`.
    """

    ASCENDING = "asc"
    DESCENDING = "desc"
