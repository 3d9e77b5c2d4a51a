from enum import Enum


class JoinMode(Enum):
    """
    Logical join declared for the top level of a query.
    """

    UNSET = "unset"  # Either AND or OR may still be declared.
    AND = "and"  # Top-level constraints are joined by AND (backend default).
    OR = "or"  # Top-level constraints are joined by OR; wrapped at flatten time.
