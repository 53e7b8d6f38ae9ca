"""Positional diff analysis for list-shaped composites."""

from __future__ import annotations

from typing import Any

from assertpack.compare.engine import equals
from assertpack.compare.models import ComparisonOptions
from assertpack.core.values import list_values
from assertpack.report.models import CommonEntry, IndexedValue, ListDiffReport
from assertpack.report.pretty import pretty_print


def analyze_list_diff(
    actual: Any,
    expected: Any,
    options: ComparisonOptions | None = None,
) -> ListDiffReport:
    """Split two list-shaped values into common prefix, middle and suffix."""
    actual_items = list_values(actual)
    expected_items = list_values(expected)
    actual_length = len(actual_items)
    expected_length = len(expected_items)

    prefix_end = 0
    limit = min(actual_length, expected_length)
    while prefix_end < limit and equals(
        actual_items[prefix_end], expected_items[prefix_end], options
    ).equal:
        prefix_end += 1

    # The suffix scan stops before it would reach the matched prefix.
    suffix_length = 0
    while (
        actual_length - suffix_length > prefix_end
        and expected_length - suffix_length > prefix_end
        and equals(
            actual_items[actual_length - 1 - suffix_length],
            expected_items[expected_length - 1 - suffix_length],
            options,
        ).equal
    ):
        suffix_length += 1

    actual_middle_end = actual_length - suffix_length
    expected_middle_end = expected_length - suffix_length

    return ListDiffReport(
        actual_length=actual_length,
        expected_length=expected_length,
        common_prefix=[
            CommonEntry(actual_index=index, expected_index=index, value=actual_items[index - 1])
            for index in range(1, prefix_end + 1)
        ],
        actual_middle=[
            IndexedValue(index=index, value=actual_items[index - 1])
            for index in range(prefix_end + 1, actual_middle_end + 1)
        ],
        expected_middle=[
            IndexedValue(index=index, value=expected_items[index - 1])
            for index in range(prefix_end + 1, expected_middle_end + 1)
        ],
        common_suffix=[
            CommonEntry(
                actual_index=actual_middle_end + offset,
                expected_index=expected_middle_end + offset,
                value=actual_items[actual_middle_end + offset - 1],
            )
            for offset in range(1, suffix_length + 1)
        ],
    )


def render_list_diff(report: ListDiffReport, *, show_refs: bool = False) -> str:
    lines = ["List difference analysis:"]

    if report.same_length:
        lines.append("* lists A (actual) and B (expected) have the same size")
    else:
        lines.append(
            "* list sizes differ: "
            f"list A (actual) has {report.actual_length} items, "
            f"list B (expected) has {report.expected_length} items"
        )

    if report.actual_is_prefix:
        lines.append("* list A (actual) is a prefix of list B (expected)")
    elif report.expected_is_prefix:
        lines.append("* list B (expected) is a prefix of list A (actual)")
    else:
        lines.append(f"* lists A and B start differing at index {report.first_diverging_index}")

    reconverging = report.reconverging_indices
    if reconverging is not None:
        actual_index, expected_index = reconverging
        if actual_index == expected_index:
            lines.append(f"* lists A and B are equal again from index {actual_index}")
        else:
            lines.append(
                "* lists A and B are equal again from index "
                f"{actual_index} for A, {expected_index} for B"
            )

    def render(value: Any) -> str:
        return pretty_print(value, show_refs=show_refs)

    if report.common_prefix:
        lines.append("* Common parts:")
        lines.extend(_common_lines(report.common_prefix, render))

    if report.actual_middle or report.expected_middle:
        lines.append("* Differing parts:")
        for offset in range(max(len(report.actual_middle), len(report.expected_middle))):
            if offset < len(report.actual_middle):
                entry = report.actual_middle[offset]
                lines.append(f"  - A[{entry.index}]: {render(entry.value)}")
            if offset < len(report.expected_middle):
                entry = report.expected_middle[offset]
                lines.append(f"  + B[{entry.index}]: {render(entry.value)}")

    if report.common_suffix:
        lines.append("* Common parts at the end of the lists")
        lines.extend(_common_lines(report.common_suffix, render))

    return "\n".join(lines)


def _common_lines(entries: list[CommonEntry], render: Any) -> list[str]:
    return [
        f"  = A[{entry.actual_index}], B[{entry.expected_index}]: {render(entry.value)}"
        for entry in entries
    ]
