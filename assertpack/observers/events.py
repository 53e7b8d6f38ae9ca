"""Comparison events seen by observers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

OBSERVER_API_VERSION = "1.0"

Outcome = Literal["pass", "fail", "error"]
OUTCOMES: tuple[str, ...] = ("pass", "fail", "error")


@dataclass(frozen=True, slots=True)
class ComparisonStarted:
    """An assertion is about to compare its inputs.

    ``expected_kind`` is ``None`` for single-value checks such as ``nan``.
    """

    assertion: str
    actual_kind: str
    expected_kind: str | None = None
    margin: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "assertion": self.assertion,
            "actual_kind": self.actual_kind,
            "expected_kind": self.expected_kind,
            "margin": self.margin,
        }


@dataclass(frozen=True, slots=True)
class ComparisonFinished:
    """Verdict of one assertion.

    A failed structural comparison carries the diverging ``path`` and
    ``reason``, the rendered failure ``message`` and the structured ``report``
    (a list-diff summary or the generic mismatch texts). ``error`` is
    ``"TypeName: message"`` when the check raised instead.
    """

    assertion: str
    outcome: Outcome
    reason: str | None = None
    path: str | None = None
    message: str = ""
    report: dict[str, Any] | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.outcome != "pass"

    @property
    def report_kind(self) -> str | None:
        return None if self.report is None else self.report.get("kind")

    def to_dict(self) -> dict[str, Any]:
        return {
            "assertion": self.assertion,
            "outcome": self.outcome,
            "reason": self.reason,
            "path": self.path,
            "message": self.message,
            "report": self.report,
            "error": self.error,
        }


class ComparisonObserver:
    """Base observer; subclasses override the hooks they care about."""

    api_version = OBSERVER_API_VERSION
    name = "observer"

    def comparison_started(self, event: ComparisonStarted) -> None:
        return None

    def comparison_finished(self, event: ComparisonFinished) -> None:
        return None
