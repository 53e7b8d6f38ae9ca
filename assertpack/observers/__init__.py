"""Observers notified around every assertion."""

from assertpack.observers.config import OBSERVER_CONFIG_VERSION, load_observers
from assertpack.observers.events import (
    OBSERVER_API_VERSION,
    OUTCOMES,
    ComparisonFinished,
    ComparisonObserver,
    ComparisonStarted,
    Outcome,
)
from assertpack.observers.exceptions import ObserverConfigError, ObserverError, ObserverLoadError
from assertpack.observers.recorders import ComparisonTally, FailureLog
from assertpack.observers.registry import ObserverFault, ObserverRegistry, ObserverWarning
from assertpack.observers.runtime import (
    OBSERVER_CONFIG_ENV_VAR,
    active_registry,
    forget_configured_observers,
    observe,
    observe_config,
)

__all__ = [
    "OBSERVER_API_VERSION",
    "OBSERVER_CONFIG_ENV_VAR",
    "OBSERVER_CONFIG_VERSION",
    "OUTCOMES",
    "ComparisonFinished",
    "ComparisonObserver",
    "ComparisonStarted",
    "ComparisonTally",
    "FailureLog",
    "ObserverConfigError",
    "ObserverError",
    "ObserverFault",
    "ObserverLoadError",
    "ObserverRegistry",
    "ObserverWarning",
    "Outcome",
    "active_registry",
    "forget_configured_observers",
    "load_observers",
    "observe",
    "observe_config",
]
