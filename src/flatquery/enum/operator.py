from enum import StrEnum


class Operator(StrEnum):
    """
    Operator tokens appended to a field name in an encoded constraint key.

    Equality has no token: an untagged key is read as `field == value` by the
    backend.

    Important: Internal Use Only
        End-users never need these identifiers directly; they are produced by
        the clause methods of [`Query`][flatquery.models.query.builders.Query].
    """

    LT = "lt"
    GT = "gt"
    LTE = "lte"
    GTE = "gte"
    IN = "in"
    NEAR = "near"
    WITHIN = "within"
    NE = "ne"
    NULL = "null"
    EMPTY = "empty"

    @property
    def url_tag(self) -> str:
        """The bracketed form used in query keys, e.g. `[gte]`."""
        return f"[{self.value}]"
