from typing import Dict, List, Optional, Sequence, Tuple, Union

from ...enum import JoinMode, Operator


class _QueryExpression:
    """
    A single field-level constraint, the leaf of the clause tree.

    A `_QueryExpression` is not instantiated by the user: it is produced by the
    clause methods of [`Query`][flatquery.models.query.builders.Query] (e.g.
    `field_is_greater_than`) or of
    [`QueryField`][flatquery.models.query.field.QueryField].

    When flattened, the expression becomes exactly one query argument whose key
    is the field name followed by the operator tag:

    | User Call | Internal Translation | Flattened |
    | --- | --- | --- |
    | `field_is_equal_to("name", "bob")` | `_QueryExpression("name", None, "bob")` | `name=bob` |
    | `field_is_greater_than("age", 20)` | `_QueryExpression("age", Operator.GT, "20")` | `age[gt]=20` |
    | `field_is_null("email")` | `_QueryExpression("email", Operator.NULL, "true")` | `email[null]=true` |

    Attributes:
        field: The name of the constrained field.
        op: The operator, or `None` for plain equality.
        value: The already-rendered string operand.
    """

    def __init__(self, field: str, op: Optional[Operator], value: str):
        self.field = field
        self.op = op
        self.value = value

    @property
    def key(self) -> str:
        """The encoded argument key, e.g. `"age[gt]"`."""
        if self.op is None:
            return self.field
        return f"{self.field}{self.op.url_tag}"

    def to_items(self) -> List[Tuple[str, str]]:
        return [(self.key, self.value)]

    def __repr__(self) -> str:
        return f"_QueryExpression({self.key!r}={self.value!r})"


class _QueryGroup:
    """
    A parenthesized sub-expression folded into a parent query.

    The children are joined by `mode` and every key they produce is prefixed
    with an ordinal namespace segment (e.g. `[or1].`), so that sibling groups
    at the same level never collide and the backend can rebuild the boolean
    tree from the key prefixes alone. Nested groups keep their own prefixes,
    which yields outermost-first chains such as `[or1].[and2].age[gt]`.

    Attributes:
        mode: The join applied among the children (`JoinMode.AND` or `JoinMode.OR`).
        ordinal: The 1-based index of this group among the parent's groups of the same mode.
        expressions: The children, leaves or groups, snapshotted at fold-in time.
    """

    def __init__(
        self,
        mode: JoinMode,
        ordinal: int,
        expressions: Sequence["_QueryNode"],
    ):
        if mode is JoinMode.UNSET:
            raise ValueError("A query group must be joined by either AND or OR.")
        self.mode = mode
        self.ordinal = ordinal
        self.expressions = tuple(expressions)

    @property
    def prefix(self) -> str:
        """The namespace segment prepended to every child key, e.g. `"[or1]."`."""
        return f"[{self.mode.value}{self.ordinal}]."

    def to_items(self) -> List[Tuple[str, str]]:
        return [
            (self.prefix + key, value)
            for expr in self.expressions
            for key, value in expr.to_items()
        ]

    def __repr__(self) -> str:
        return f"_QueryGroup({self.prefix!r}, {list(self.expressions)!r})"


_QueryNode = Union[_QueryExpression, _QueryGroup]


class _QueryCombinator:
    """
    Flattens a list of clause tree nodes into ordered query arguments.

    A key written more than once keeps its first position and its last value,
    so e.g. calling `field_is_null` then `field_is_not_null` on the same field
    produces a single `field[null]=false` argument.
    """

    def __init__(self, expressions: Sequence[_QueryNode]):
        self.expressions = list(expressions)

    def to_dict(self) -> Dict[str, str]:
        if not self.expressions:
            return {}
        return {
            key: val for expr in self.expressions for key, val in expr.to_items()
        }

    def to_items(self) -> List[Tuple[str, str]]:
        return list(self.to_dict().items())
