"""Human-readable mismatch reports."""

from __future__ import annotations

from typing import Any

from assertpack.compare.models import MISSING, ComparisonOptions, ComparisonResult
from assertpack.core.values import list_length
from assertpack.report.listdiff import analyze_list_diff, render_list_diff
from assertpack.report.models import DiffReport, GenericMismatchReport, ListDiffReport
from assertpack.report.pretty import pretty_print

_REASON_LABELS = {
    "type_mismatch": "type mismatch",
    "scalar_mismatch": "value mismatch",
    "key_set_mismatch": "key set mismatch",
    "cycle_asymmetry_mismatch": "cycle asymmetry",
}


def report(
    actual: Any,
    expected: Any,
    result: ComparisonResult,
    *,
    options: ComparisonOptions | None = None,
    show_refs: bool = False,
    list_diff_threshold: int = 0,
) -> str:
    """Explain why ``actual`` and ``expected`` differ."""
    built = build_report(
        actual,
        expected,
        result,
        options=options,
        show_refs=show_refs,
        list_diff_threshold=list_diff_threshold,
    )
    if built is None:
        return "no difference detected"
    return render_report(built, show_refs=show_refs)


def build_report(
    actual: Any,
    expected: Any,
    result: ComparisonResult,
    *,
    options: ComparisonOptions | None = None,
    show_refs: bool = False,
    list_diff_threshold: int = 0,
) -> DiffReport | None:
    if result.equal:
        return None

    if _use_list_diff(actual, expected, result, threshold=list_diff_threshold):
        list_report = analyze_list_diff(actual, expected, options)
        # Element-wise scans can agree everywhere when only a cross-element
        # cycle differs; the generic report still names the path then.
        if list_report.actual_middle or list_report.expected_middle:
            return list_report

    return GenericMismatchReport(
        actual_text=pretty_print(actual, show_refs=show_refs),
        expected_text=pretty_print(expected, show_refs=show_refs),
        path=result.path,
        path_text=render_path(result.path, show_refs=show_refs),
        reason=result.reason,
        actual_at_path_text=pretty_print(result.actual, show_refs=show_refs),
        expected_at_path_text=pretty_print(result.expected, show_refs=show_refs),
    )


def render_report(built: DiffReport, *, show_refs: bool = False) -> str:
    if isinstance(built, ListDiffReport):
        return render_list_diff(built, show_refs=show_refs)

    lines = [
        f"expected: {built.expected_text}",
        f"actual: {built.actual_text}",
    ]
    if built.path:
        reason = _REASON_LABELS.get(built.reason or "", built.reason)
        lines.append(f"first difference at {built.path_text} ({reason}):")
        lines.append(f"  expected: {built.expected_at_path_text}")
        lines.append(f"  actual: {built.actual_at_path_text}")
    elif built.reason == "type_mismatch":
        lines.append("values have different types")
    return "\n".join(lines)


def render_path(path: tuple[Any, ...], *, show_refs: bool = False) -> str:
    if not path:
        return "<root>"
    return "".join(f"[{pretty_print(key, show_refs=show_refs)}]" for key in path)


def result_to_dict(result: ComparisonResult, *, show_refs: bool = False) -> dict[str, Any]:
    """JSON-safe payload for a comparison result."""
    if result.equal:
        return {"equal": True, "path": None, "reason": None, "actual": None, "expected": None}
    return {
        "equal": False,
        "path": render_path(result.path, show_refs=show_refs),
        "reason": result.reason,
        "actual": None if result.actual is MISSING else pretty_print(result.actual, show_refs=show_refs),
        "expected": (
            None if result.expected is MISSING else pretty_print(result.expected, show_refs=show_refs)
        ),
    }


def _use_list_diff(
    actual: Any,
    expected: Any,
    result: ComparisonResult,
    *,
    threshold: int,
) -> bool:
    if not result.path and result.reason == "type_mismatch":
        return False
    actual_length = list_length(actual)
    expected_length = list_length(expected)
    if actual_length is None or expected_length is None:
        return False
    return max(actual_length, expected_length) >= threshold
