"""Ready-made observers."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import Any

from assertpack.observers.events import OBSERVER_API_VERSION, ComparisonFinished


@dataclass(slots=True)
class FailureLog:
    """Append every failed or erroring assertion to an NDJSON file.

    Each line is the finished event, so it holds the rendered message and the
    structured report next to the diverging path.
    """

    output_path: str = "runs/assertkit/failures.ndjson"
    name: str = "failure-log"
    api_version: str = OBSERVER_API_VERSION

    def comparison_finished(self, event: ComparisonFinished) -> None:
        if not event.failed:
            return
        path = Path(self.output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(event.to_dict(), sort_keys=True, default=repr))
            handle.write("\n")


@dataclass(slots=True)
class ComparisonTally:
    """Count outcomes per assertion, and failure reasons per report kind."""

    name: str = "tally"
    api_version: str = OBSERVER_API_VERSION
    outcomes: dict[str, Counter] = field(default_factory=dict)
    reports: Counter = field(default_factory=Counter)

    def comparison_finished(self, event: ComparisonFinished) -> None:
        self.outcomes.setdefault(event.assertion, Counter())[event.outcome] += 1
        if event.report_kind is not None:
            self.reports[event.report_kind] += 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "outcomes": {name: dict(counts) for name, counts in sorted(self.outcomes.items())},
            "reports": dict(self.reports),
        }
