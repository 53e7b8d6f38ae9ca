"""Assertion surface over the comparison engine and mismatch reporter.

``check_*`` helpers return an ``AssertionResult``; ``assert_*`` helpers raise
``AssertionFailure`` with the rendered report as the message. Every check
notifies the active observers before and after it runs.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from assertpack.compare import (
    ComparisonOptions,
    ComparisonResult,
    contains_element,
    equals,
    identical,
    items_equal,
)
from assertpack.core.values import (
    classify,
    is_finite_number,
    is_inf,
    is_minus_inf,
    is_minus_zero,
    is_nan,
    is_plus_inf,
    is_plus_zero,
    numeric_distance,
)
from assertpack.observers import ComparisonFinished, ComparisonStarted, active_registry
from assertpack.report import (
    build_report,
    pretty_print,
    render_path,
    render_report,
    result_to_dict,
)
from assertpack.settings import AssertionSettings, get_settings


class AssertionFailure(AssertionError):
    """A failed assertion; ``result`` holds the comparison verdict if any."""

    def __init__(self, message: str, *, result: ComparisonResult | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.result = result


@dataclass(slots=True)
class AssertionResult:
    """Outcome of one assertion check."""

    assertion: str
    passed: bool
    message: str = ""
    comparison: ComparisonResult | None = None
    report: dict[str, Any] | None = None

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self, *, show_refs: bool = False) -> dict[str, Any]:
        return {
            "assertion": self.assertion,
            "status": "pass" if self.passed else "fail",
            "exit_code": self.exit_code,
            "message": self.message,
            "comparison": (
                result_to_dict(self.comparison, show_refs=show_refs)
                if self.comparison is not None
                else None
            ),
            "report": self.report,
        }


def check_equals(
    actual: Any,
    expected: Any,
    *,
    options: ComparisonOptions | None = None,
    settings: AssertionSettings | None = None,
) -> AssertionResult:
    resolved = settings or get_settings()
    name = "equals" if options is None or options.margin is None else "almost_equals"

    def run() -> AssertionResult:
        result = equals(actual, expected, options)
        if result.equal:
            return AssertionResult(assertion=name, passed=True, comparison=result)
        message, summary = _equality_message(actual, expected, result, options, resolved)
        return AssertionResult(
            assertion=name,
            passed=False,
            message=message,
            comparison=result,
            report=summary,
        )

    return _evaluate(name, run, actual, expected, options=options)


def check_almost_equals(
    actual: Any,
    expected: Any,
    margin: float | None = None,
    *,
    settings: AssertionSettings | None = None,
) -> AssertionResult:
    """``check_equals`` with a margin, machine epsilon when none is given."""
    return check_equals(
        actual,
        expected,
        options=ComparisonOptions.approximate(margin),
        settings=settings,
    )


def check_not_equals(
    actual: Any,
    expected: Any,
    *,
    options: ComparisonOptions | None = None,
    settings: AssertionSettings | None = None,
) -> AssertionResult:
    resolved = settings or get_settings()
    name = "not_equals" if options is None or options.margin is None else "not_almost_equals"

    def run() -> AssertionResult:
        result = equals(actual, expected, options)
        if not result.equal:
            return AssertionResult(assertion=name, passed=True, comparison=result)
        if options is not None and options.margin is not None and _both_finite(actual, expected):
            message = (
                "Values are almost equal\n"
                f"Actual: {actual!r}, expected: {expected!r}, "
                f"delta {numeric_distance(actual, expected)!r} below margin of {options.margin!r}"
            )
        else:
            message = (
                "Received the not expected value: "
                f"{pretty_print(actual, show_refs=resolved.show_refs)}"
            )
        return AssertionResult(assertion=name, passed=False, message=message, comparison=result)

    return _evaluate(name, run, actual, expected, options=options)


def check_identical(
    actual: Any,
    expected: Any,
    *,
    negate: bool = False,
    settings: AssertionSettings | None = None,
) -> AssertionResult:
    resolved = settings or get_settings()
    name = "not_is" if negate else "is"

    def run() -> AssertionResult:
        same = identical(actual, expected)
        if same != negate:
            return AssertionResult(assertion=name, passed=True)
        if negate:
            message = (
                "expected and actual object should be different: "
                f"{pretty_print(expected, show_refs=resolved.show_refs)}"
            )
        else:
            message = (
                "expected and actual object should not be different\n"
                f"Expected: {pretty_print(expected, show_refs=resolved.show_refs)}\n"
                f"Received: {pretty_print(actual, show_refs=resolved.show_refs)}"
            )
        return AssertionResult(assertion=name, passed=False, message=message)

    return _evaluate(name, run, actual, expected)


def check_items_equals(
    actual: Any,
    expected: Any,
    *,
    options: ComparisonOptions | None = None,
    settings: AssertionSettings | None = None,
) -> AssertionResult:
    resolved = settings or get_settings()

    def run() -> AssertionResult:
        if items_equal(actual, expected, options):
            return AssertionResult(assertion="items_equals", passed=True)
        return AssertionResult(
            assertion="items_equals",
            passed=False,
            message=(
                "Content of the tables are not identical:\n"
                f"Expected: {pretty_print(expected, show_refs=resolved.show_refs)}\n"
                f"Actual: {pretty_print(actual, show_refs=resolved.show_refs)}"
            ),
        )

    return _evaluate("items_equals", run, actual, expected, options=options)


def check_contains(
    container: Any,
    element: Any,
    *,
    negate: bool = False,
    options: ComparisonOptions | None = None,
    settings: AssertionSettings | None = None,
) -> AssertionResult:
    resolved = settings or get_settings()
    name = "not_contains" if negate else "contains"

    def run() -> AssertionResult:
        found = contains_element(container, element, options)
        if found != negate:
            return AssertionResult(assertion=name, passed=True)
        rendered_element = pretty_print(element, show_refs=resolved.show_refs)
        rendered_container = pretty_print(container, show_refs=resolved.show_refs)
        if negate:
            message = f"Found unexpectedly element {rendered_element} in {rendered_container}"
        else:
            message = f"Could not find element {rendered_element} in {rendered_container}"
        return AssertionResult(assertion=name, passed=False, message=message)

    return _evaluate(name, run, container, element, options=options)


def check_number_kind(
    value: Any,
    kind: str,
    *,
    negate: bool = False,
    settings: AssertionSettings | None = None,
) -> AssertionResult:
    """Check an IEEE-754 classification such as ``nan`` or ``minus_zero``."""
    try:
        predicate, label = _NUMBER_PREDICATES[kind]
    except KeyError as error:
        raise ValueError(f"Unsupported number kind: {kind}") from error
    resolved = settings or get_settings()
    name = f"not_{kind}" if negate else kind

    def run() -> AssertionResult:
        if predicate(value) != negate:
            return AssertionResult(assertion=name, passed=True)
        expectation = f"not {label}" if negate else label
        return AssertionResult(
            assertion=name,
            passed=False,
            message=(
                f"expected: {expectation}, "
                f"actual: {pretty_print(value, show_refs=resolved.show_refs)}"
            ),
        )

    return _evaluate(name, run, value)


_NO_VALUE = object()

_NUMBER_PREDICATES: dict[str, tuple[Callable[[Any], bool], str]] = {
    "nan": (is_nan, "NaN"),
    "plus_inf": (is_plus_inf, "+Inf"),
    "minus_inf": (is_minus_inf, "-Inf"),
    "inf": (is_inf, "+Inf or -Inf"),
    "plus_zero": (is_plus_zero, "+0.0"),
    "minus_zero": (is_minus_zero, "-0.0"),
}


def assert_equals(actual: Any, expected: Any, extra_msg: str | None = None) -> None:
    """Fail unless the two values are structurally equal."""
    actual, expected = _ordered(actual, expected)
    _raise_on_failure(check_equals(actual, expected), extra_msg)


def assert_not_equals(actual: Any, expected: Any, extra_msg: str | None = None) -> None:
    actual, expected = _ordered(actual, expected)
    _raise_on_failure(check_not_equals(actual, expected), extra_msg)


def assert_almost_equals(
    actual: Any,
    expected: Any,
    margin: float | None = None,
    extra_msg: str | None = None,
) -> None:
    """Structural equality where finite numbers may differ by ``margin``.

    Without a margin the machine epsilon is used.
    """
    actual, expected = _ordered(actual, expected)
    _raise_on_failure(check_almost_equals(actual, expected, margin), extra_msg)


def assert_not_almost_equals(
    actual: Any,
    expected: Any,
    margin: float | None = None,
    extra_msg: str | None = None,
) -> None:
    actual, expected = _ordered(actual, expected)
    options = ComparisonOptions.approximate(margin)
    _raise_on_failure(check_not_equals(actual, expected, options=options), extra_msg)


def assert_is(actual: Any, expected: Any, extra_msg: str | None = None) -> None:
    """Fail unless both refer to the same object (or equal scalars)."""
    actual, expected = _ordered(actual, expected)
    _raise_on_failure(check_identical(actual, expected), extra_msg)


def assert_not_is(actual: Any, expected: Any, extra_msg: str | None = None) -> None:
    actual, expected = _ordered(actual, expected)
    _raise_on_failure(check_identical(actual, expected, negate=True), extra_msg)


def assert_items_equals(actual: Any, expected: Any, extra_msg: str | None = None) -> None:
    """Fail unless both composites hold the same items, irrespective of keys."""
    actual, expected = _ordered(actual, expected)
    _raise_on_failure(check_items_equals(actual, expected), extra_msg)


def assert_contains(container: Any, element: Any, extra_msg: str | None = None) -> None:
    """Fail unless some value of ``container`` structurally equals ``element``."""
    _raise_on_failure(check_contains(container, element), extra_msg)


def assert_not_contains(container: Any, element: Any, extra_msg: str | None = None) -> None:
    _raise_on_failure(check_contains(container, element, negate=True), extra_msg)


def assert_nan(value: Any, extra_msg: str | None = None) -> None:
    _raise_on_failure(check_number_kind(value, "nan"), extra_msg)


def assert_not_nan(value: Any, extra_msg: str | None = None) -> None:
    _raise_on_failure(check_number_kind(value, "nan", negate=True), extra_msg)


def assert_plus_inf(value: Any, extra_msg: str | None = None) -> None:
    _raise_on_failure(check_number_kind(value, "plus_inf"), extra_msg)


def assert_not_plus_inf(value: Any, extra_msg: str | None = None) -> None:
    _raise_on_failure(check_number_kind(value, "plus_inf", negate=True), extra_msg)


def assert_minus_inf(value: Any, extra_msg: str | None = None) -> None:
    _raise_on_failure(check_number_kind(value, "minus_inf"), extra_msg)


def assert_not_minus_inf(value: Any, extra_msg: str | None = None) -> None:
    _raise_on_failure(check_number_kind(value, "minus_inf", negate=True), extra_msg)


def assert_inf(value: Any, extra_msg: str | None = None) -> None:
    _raise_on_failure(check_number_kind(value, "inf"), extra_msg)


def assert_not_inf(value: Any, extra_msg: str | None = None) -> None:
    _raise_on_failure(check_number_kind(value, "inf", negate=True), extra_msg)


def assert_plus_zero(value: Any, extra_msg: str | None = None) -> None:
    """Fail unless ``value`` is +0 (the sign bit decides, not ``==``)."""
    _raise_on_failure(check_number_kind(value, "plus_zero"), extra_msg)


def assert_not_plus_zero(value: Any, extra_msg: str | None = None) -> None:
    _raise_on_failure(check_number_kind(value, "plus_zero", negate=True), extra_msg)


def assert_minus_zero(value: Any, extra_msg: str | None = None) -> None:
    _raise_on_failure(check_number_kind(value, "minus_zero"), extra_msg)


def assert_not_minus_zero(value: Any, extra_msg: str | None = None) -> None:
    _raise_on_failure(check_number_kind(value, "minus_zero", negate=True), extra_msg)


def _ordered(first: Any, second: Any) -> tuple[Any, Any]:
    if get_settings().order_actual_expected:
        return first, second
    return second, first


def _raise_on_failure(result: AssertionResult, extra_msg: str | None) -> None:
    if result.passed:
        return
    message = result.message if extra_msg is None else f"{extra_msg}\n{result.message}"
    raise AssertionFailure(message, result=result.comparison)


def _both_finite(actual: Any, expected: Any) -> bool:
    return is_finite_number(actual) and is_finite_number(expected)


def _equality_message(
    actual: Any,
    expected: Any,
    result: ComparisonResult,
    options: ComparisonOptions | None,
    settings: AssertionSettings,
) -> tuple[str, dict[str, Any] | None]:
    if options is not None and options.margin is not None and _both_finite(actual, expected):
        return (
            "Values are not almost equal\n"
            f"Actual: {actual!r}, expected: {expected!r}, "
            f"delta {numeric_distance(actual, expected)!r} above margin of {options.margin!r}"
        ), None
    built = build_report(
        actual,
        expected,
        result,
        options=options,
        show_refs=settings.show_refs,
        list_diff_threshold=settings.list_diff_threshold,
    )
    if built is None:
        return "no difference detected", None
    return render_report(built, show_refs=settings.show_refs), built.to_dict()


def _evaluate(
    assertion: str,
    run: Callable[[], AssertionResult],
    actual: Any,
    expected: Any = _NO_VALUE,
    *,
    options: ComparisonOptions | None = None,
) -> AssertionResult:
    registry = active_registry()
    registry.started(
        ComparisonStarted(
            assertion=assertion,
            actual_kind=classify(actual),
            expected_kind=classify(expected) if expected is not _NO_VALUE else None,
            margin=options.margin if options is not None else None,
        )
    )

    try:
        outcome = run()
    except Exception as error:
        registry.finished(
            ComparisonFinished(
                assertion=assertion,
                outcome="error",
                error=f"{type(error).__name__}: {error}",
            )
        )
        raise

    comparison = outcome.comparison
    mismatch = comparison is not None and not comparison.equal
    registry.finished(
        ComparisonFinished(
            assertion=assertion,
            outcome="pass" if outcome.passed else "fail",
            reason=comparison.reason if mismatch else None,
            path=render_path(comparison.path) if mismatch else None,
            message=outcome.message,
            report=outcome.report,
        )
    )
    return outcome
