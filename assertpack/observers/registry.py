"""Observer registry; a raising observer is detached, never the assertion."""

from __future__ import annotations

from dataclasses import dataclass, field
import warnings

from assertpack.observers.events import ComparisonFinished, ComparisonStarted


class ObserverWarning(RuntimeWarning):
    """An observer raised and has been detached."""


@dataclass(frozen=True, slots=True)
class ObserverFault:
    observer: str
    hook: str
    assertion: str
    error: str


@dataclass(slots=True)
class ObserverRegistry:
    """Observers notified, in order, around every assertion.

    An observer that raises is detached for the rest of the registry's life
    and the fault is recorded; later observers still run.
    """

    observers: tuple[object, ...] = ()
    faults: list[ObserverFault] = field(default_factory=list)
    _detached: set[int] = field(default_factory=set, repr=False)

    @property
    def attached(self) -> tuple[object, ...]:
        return tuple(item for item in self.observers if id(item) not in self._detached)

    def extended(self, *observers: object) -> "ObserverRegistry":
        """A new registry with ``observers`` after the currently attached ones."""
        return ObserverRegistry(observers=self.attached + observers)

    def started(self, event: ComparisonStarted) -> None:
        self._notify("comparison_started", event.assertion, event)

    def finished(self, event: ComparisonFinished) -> None:
        self._notify("comparison_finished", event.assertion, event)

    def _notify(self, hook: str, assertion: str, event: object) -> None:
        for observer in self.attached:
            callback = getattr(observer, hook, None)
            if callback is None:
                continue
            try:
                callback(event)
            except Exception as error:
                self._detach(observer, hook, assertion, error)

    def _detach(self, observer: object, hook: str, assertion: str, error: Exception) -> None:
        fault = ObserverFault(
            observer=observer_name(observer),
            hook=hook,
            assertion=assertion,
            error=f"{type(error).__name__}: {error}",
        )
        self.faults.append(fault)
        self._detached.add(id(observer))
        warnings.warn(
            f"assertkit observer {fault.observer!r} detached: "
            f"{fault.hook} raised {fault.error} during {fault.assertion}",
            ObserverWarning,
            stacklevel=4,
        )


def observer_name(observer: object) -> str:
    return str(getattr(observer, "name", type(observer).__name__))
