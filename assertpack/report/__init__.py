"""Mismatch reporting for assertkit."""

from assertpack.report.formatting import (
    build_report,
    render_path,
    render_report,
    report,
    result_to_dict,
)
from assertpack.report.listdiff import analyze_list_diff, render_list_diff
from assertpack.report.models import (
    CommonEntry,
    DiffReport,
    GenericMismatchReport,
    IndexedValue,
    ListDiffReport,
)
from assertpack.report.pretty import pretty_print

__all__ = [
    "CommonEntry",
    "IndexedValue",
    "ListDiffReport",
    "GenericMismatchReport",
    "DiffReport",
    "analyze_list_diff",
    "render_list_diff",
    "build_report",
    "render_report",
    "render_path",
    "report",
    "result_to_dict",
    "pretty_print",
]
