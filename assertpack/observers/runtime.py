"""Which observers are active for the current context."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
import os
from pathlib import Path
from typing import Iterator

from assertpack.observers.config import load_observers
from assertpack.observers.registry import ObserverRegistry

OBSERVER_CONFIG_ENV_VAR = "ASSERTKIT_OBSERVER_CONFIG"

_CURRENT: ContextVar[ObserverRegistry | None] = ContextVar("assertkit_observers", default=None)
_CONFIGURED: dict[str, ObserverRegistry] = {}
_NOBODY = ObserverRegistry()


def active_registry() -> ObserverRegistry:
    """The registry set by ``observe``, else the one named by the env var."""
    registry = _CURRENT.get()
    if registry is not None:
        return registry
    config_path = os.getenv(OBSERVER_CONFIG_ENV_VAR, "").strip()
    if not config_path:
        return _NOBODY
    if config_path not in _CONFIGURED:
        _CONFIGURED[config_path] = load_observers(config_path)
    return _CONFIGURED[config_path]


@contextmanager
def observe(*observers: object) -> Iterator[ObserverRegistry]:
    """Add ``observers`` to whatever is already active, for this block."""
    registry = active_registry().extended(*observers)
    token = _CURRENT.set(registry)
    try:
        yield registry
    finally:
        _CURRENT.reset(token)


@contextmanager
def observe_config(path: str | Path) -> Iterator[ObserverRegistry]:
    """Activate only the observers listed in the config at ``path``."""
    token = _CURRENT.set(load_observers(path))
    try:
        yield _CURRENT.get()
    finally:
        _CURRENT.reset(token)


def forget_configured_observers() -> None:
    """Drop registries cached from the env var, so the next lookup reloads."""
    _CONFIGURED.clear()
