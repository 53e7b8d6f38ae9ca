import inspect
import math

import pytest

import assertkit


def test_public_api_symbol_list_is_explicit_and_stable() -> None:
    assert assertkit.__all__[:12] == [
        "__version__",
        "EPS",
        "ComparisonOptions",
        "ComparisonResult",
        "AssertionFailure",
        "AssertionResult",
        "AssertionSettings",
        "equals",
        "identical",
        "items_equal",
        "contains_element",
        "report",
    ]
    for name in assertkit.__all__:
        assert hasattr(assertkit, name), name


def test_assertions_have_negated_counterparts() -> None:
    positives = {
        name
        for name in assertkit.__all__
        if name.startswith("assert_") and not name.startswith("assert_not_")
    } - {"assert_items_equals"}
    negatives = {name for name in assertkit.__all__ if name.startswith("assert_not_")}
    assert {name.replace("assert_", "assert_not_", 1) for name in positives} == negatives


def test_assertion_signatures_end_with_extra_msg() -> None:
    for name in assertkit.__all__:
        if not name.startswith("assert_"):
            continue
        signature = inspect.signature(getattr(assertkit, name))
        parameters = list(signature.parameters.values())
        assert parameters[-1].name == "extra_msg"
        assert parameters[-1].default is None


def test_core_workflow_works_via_public_api_only() -> None:
    actual = {"name": "run", "values": [1.0, 2.0, 3.0]}
    expected = {"name": "run", "values": [1.0, 2.5, 3.0]}

    result = assertkit.equals(actual, expected)
    assert not result.equal
    assert result.path == ("values", 2)

    explanation = assertkit.report(actual, expected, result)
    assert "first difference at ['values'][2] (value mismatch):" in explanation

    approx = assertkit.equals(actual, expected, assertkit.ComparisonOptions(margin=0.5))
    assert approx.equal

    with pytest.raises(assertkit.AssertionFailure):
        assertkit.assert_equals(actual, expected)
    assertkit.assert_almost_equals(actual, expected, 0.5)
    assertkit.assert_items_equals([3, 1, 2], [1, 2, 3])
    assertkit.assert_contains(actual, "run")
    assertkit.assert_minus_zero(-0.0)
    assertkit.assert_nan(math.nan)

    with assertkit.use_settings(show_refs=False) as settings:
        assert isinstance(settings, assertkit.AssertionSettings)
        assert assertkit.pretty_print(actual) == "{'name': 'run', 'values': [1.0, 2.0, 3.0]}"
