import pytest

from assertpack.compare import (
    ComparisonOptions,
    ComparisonTypeError,
    contains_element,
    items_equal,
)


def test_items_equal_ignores_order() -> None:
    assert items_equal([1, 2, 3], [3, 2, 1])
    assert items_equal({"a": 1, "b": 2}, [2, 1])
    assert items_equal([], {})


def test_items_equal_compares_nested_composites_structurally() -> None:
    assert not items_equal([1, [2, 3], 4], [4, [3, 2], 1])
    assert items_equal([1, [2, 3], 4], [4, [2, 3], 1])


def test_items_equal_counts_duplicates() -> None:
    assert not items_equal([1, 1, 2], [1, 2, 2])
    assert items_equal([1, 2, 1], [1, 1, 2])
    assert not items_equal([1, 2], [1, 2, 2])


def test_items_equal_honours_margin() -> None:
    options = ComparisonOptions(margin=0.01)
    assert items_equal([1.0, 2.0], [2.001, 0.999], options)
    assert not items_equal([1.0, 2.0], [2.001, 0.999])


def test_items_equal_uses_set_members() -> None:
    assert items_equal({1, 2}, [2, 1])


@pytest.mark.parametrize(("actual", "expected"), [(1, [1]), ([1], "1"), (None, [])])
def test_items_equal_rejects_non_composites(actual, expected) -> None:
    with pytest.raises(ComparisonTypeError):
        items_equal(actual, expected)


def test_contains_element_uses_structural_equality() -> None:
    assert contains_element([1, 2, 3, [4]], [4])
    assert contains_element({"k": {"nested": True}}, {"nested": True})
    assert contains_element({"x", "y"}, "y")
    assert not contains_element([1, 2], 3)
    assert not contains_element([[4, 5]], [4])
    assert not contains_element([], None)


def test_contains_element_honours_margin() -> None:
    assert contains_element([1.0], 1.0 + 1e-12, ComparisonOptions(margin=1e-9))
    assert not contains_element([1.0], 1.0 + 1e-12)


def test_contains_element_rejects_non_composite_container() -> None:
    with pytest.raises(ComparisonTypeError, match="container must be a composite value"):
        contains_element("abc", "a")
