import pytest

from flatquery import InvalidJoinStateError, JoinMode, Ordering, Query


def _sub_query() -> Query:
    return Query().field_is_equal_to("a", "1").field_is_equal_to("b", "2")


def test_declare_same_mode_twice_is_noop():
    query = Query().field_is_equal_to("x", "1").and_().and_()
    assert query.join_mode is JoinMode.AND
    assert query.get_arguments() == [("x", "1")]

    query = Query().or_().or_()
    assert query.join_mode is JoinMode.OR


def test_mixing_join_modes_fails():
    with pytest.raises(InvalidJoinStateError, match="Mixing OR and AND"):
        Query().and_().or_()

    with pytest.raises(InvalidJoinStateError, match="Mixing OR and AND"):
        Query().or_().and_()

    with pytest.raises(InvalidJoinStateError):
        Query().and_(_sub_query()).or_(_sub_query())

    with pytest.raises(InvalidJoinStateError):
        Query().or_(_sub_query()).and_(_sub_query())


def test_invalid_join_state_is_a_value_error():
    with pytest.raises(ValueError):
        Query().or_().and_()


def test_failed_declaration_leaves_query_untouched():
    query = Query().field_is_equal_to("x", "1").or_()
    with pytest.raises(InvalidJoinStateError):
        query.and_(_sub_query())

    assert query.join_mode is JoinMode.OR
    assert query.get_arguments() == [("[or1].x", "1")]


def test_and_folds_sub_query_as_or_group():
    query = Query().and_(_sub_query())
    assert query.join_mode is JoinMode.AND
    assert query.get_arguments() == [("[or1].a", "1"), ("[or1].b", "2")]

    query.and_(Query().field_is_greater_than("c", 3))
    assert query.get_arguments() == [
        ("[or1].a", "1"),
        ("[or1].b", "2"),
        ("[or2].c[gt]", "3"),
    ]


def test_or_folds_sub_query_as_and_group():
    query = Query().field_is_equal_to("x", "1").or_(_sub_query())
    assert query.join_mode is JoinMode.OR
    # The top level is OR'ed, so it is wrapped with one more OR group
    assert query.get_arguments() == [
        ("[or1].x", "1"),
        ("[or1].[and1].a", "1"),
        ("[or1].[and1].b", "2"),
    ]

    query.or_(Query().field_is_null("y"))
    assert query.get_arguments() == [
        ("[or1].x", "1"),
        ("[or1].[and1].a", "1"),
        ("[or1].[and1].b", "2"),
        ("[or1].[and2].y[null]", "true"),
    ]


def test_top_level_or():
    query = (
        Query("user")
        .field_is_equal_to("name", "bob")
        .or_()
        .field_is_greater_than("age", 30)
    )
    assert query.get_arguments() == [("[or1].name", "bob"), ("[or1].age[gt]", "30")]


def test_empty_top_level_or():
    assert Query().or_().get_arguments() == []


def test_sub_query_join_mode_is_ignored_on_fold():
    sub = Query().field_is_equal_to("a", "1").or_()
    assert sub.get_arguments() == [("[or1].a", "1")]

    query = Query().and_(sub)
    assert query.get_arguments() == [("[or1].a", "1")]


def test_nested_groups_keep_their_prefix():
    inner = Query().field_is_equal_to("a", "1").and_(
        Query().field_is_equal_to("b", "2").field_is_equal_to("c", "3")
    )
    middle = Query().field_is_less_than("d", 4).or_(inner)
    query = Query("user").and_(middle)

    assert query.get_arguments() == [
        ("[or1].d[lt]", "4"),
        ("[or1].[and1].a", "1"),
        ("[or1].[and1].[or1].b", "2"),
        ("[or1].[and1].[or1].c", "3"),
    ]


def test_top_level_or_wraps_folded_groups_with_current_counter():
    query = Query().or_(_sub_query()).or_(Query().field_is_equal_to("c", "3"))
    # No OR group was folded in, so the wrapper uses the initial ordinal
    assert query.get_arguments() == [
        ("[or1].[and1].a", "1"),
        ("[or1].[and1].b", "2"),
        ("[or1].[and2].c", "3"),
    ]


def test_sub_query_is_not_mutated_and_is_snapshotted():
    sub = _sub_query()
    query = Query().and_(sub)

    assert sub.join_mode is JoinMode.UNSET
    assert sub.get_arguments() == [("a", "1"), ("b", "2")]

    # Later changes to the sub-query do not leak into the parent
    sub.field_is_equal_to("z", "9")
    assert query.get_arguments() == [("[or1].a", "1"), ("[or1].b", "2")]


def test_sub_query_headers_are_not_folded():
    sub = _sub_query().is_in_range(0, 5)
    query = Query().and_(sub)
    assert query.get_headers() == {}


def test_add_is_a_plain_union():
    other = (
        Query()
        .field_is_equal_to("b", "2")
        .field_is_ordered_by("b", Ordering.ASCENDING)
        .is_in_range(0, 9)
    )
    query = Query("user").field_is_equal_to("a", "1").or_().add(other)

    # No prefix is added by add(); the top-level OR still wraps everything
    assert query.get_arguments() == [("[or1].a", "1"), ("[or1].b", "2")]
    assert query.get_headers() == {
        "X-StackMob-OrderBy": "b:asc",
        "Range": "objects=0-9",
    }
    assert other.get_arguments() == [("b", "2")]


def test_add_ignores_join_mode():
    query = Query().and_().add(Query().field_is_equal_to("a", "1").or_())
    assert query.join_mode is JoinMode.AND
    assert query.get_arguments() == [("a", "1")]


def test_add_keeps_folded_prefixes():
    other = Query().and_(_sub_query())
    query = Query().field_is_equal_to("x", "1").add(other)
    assert query.get_arguments() == [
        ("x", "1"),
        ("[or1].a", "1"),
        ("[or1].b", "2"),
    ]


def test_add_overwrites_ordering_header():
    query = Query().field_is_ordered_by("a", Ordering.ASCENDING)
    query.add(Query().field_is_ordered_by("b", Ordering.DESCENDING))
    assert query.get_headers() == {"X-StackMob-OrderBy": "b:desc"}
