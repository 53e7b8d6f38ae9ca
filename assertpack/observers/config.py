"""Build an observer registry from a JSON file.

Format::

    {"config_version": 1,
     "observers": [{"entrypoint": "pkg.mod:Factory", "options": {}, "enabled": true}]}

The entrypoint is called with ``options`` as keyword arguments; a
non-callable target is used as is and takes no options.
"""

from __future__ import annotations

import importlib
import json
from pathlib import Path
from typing import Any

from assertpack.observers.events import OBSERVER_API_VERSION
from assertpack.observers.exceptions import ObserverConfigError, ObserverLoadError
from assertpack.observers.registry import ObserverRegistry

OBSERVER_CONFIG_VERSION = 1
_ENTRY_KEYS = frozenset({"entrypoint", "options", "enabled"})


def load_observers(path: str | Path) -> ObserverRegistry:
    """Registry holding every enabled observer of the config at ``path``."""
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise ObserverConfigError(f"{config_path}: invalid JSON: {error}") from error

    if not isinstance(raw, dict):
        raise ObserverConfigError(f"{config_path}: expected a JSON object")
    if raw.get("config_version") != OBSERVER_CONFIG_VERSION:
        raise ObserverConfigError(
            f"{config_path}: config_version must be {OBSERVER_CONFIG_VERSION}, "
            f"got {raw.get('config_version')!r}"
        )
    entries = raw.get("observers")
    if not isinstance(entries, list):
        raise ObserverConfigError(f"{config_path}: 'observers' must be an array")

    observers = []
    for position, entry in enumerate(entries, start=1):
        observer = _build(entry, position)
        if observer is not None:
            observers.append(observer)
    return ObserverRegistry(observers=tuple(observers))


def _build(entry: Any, position: int) -> object | None:
    label = f"observer #{position}"
    if not isinstance(entry, dict):
        raise ObserverConfigError(f"{label}: expected a JSON object")
    unknown = sorted(set(entry) - _ENTRY_KEYS)
    if unknown:
        raise ObserverConfigError(f"{label}: unknown keys {', '.join(unknown)}")

    enabled = entry.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ObserverConfigError(f"{label}: 'enabled' must be a boolean")
    if not enabled:
        return None

    entrypoint = entry.get("entrypoint")
    if not isinstance(entrypoint, str) or entrypoint.count(":") != 1:
        raise ObserverConfigError(f"{label}: 'entrypoint' must look like 'module:attribute'")
    options = entry.get("options", {})
    if not isinstance(options, dict):
        raise ObserverConfigError(f"{label}: 'options' must be a JSON object")

    module_name, attribute = entrypoint.split(":")
    try:
        target = getattr(importlib.import_module(module_name), attribute)
    except (ImportError, AttributeError) as error:
        raise ObserverLoadError(f"{label}: cannot resolve {entrypoint!r}: {error}") from error

    if callable(target):
        try:
            observer = target(**options)
        except Exception as error:
            raise ObserverLoadError(f"{label}: {entrypoint!r} rejected its options: {error}") from error
    elif options:
        raise ObserverLoadError(f"{label}: {entrypoint!r} is not callable and takes no options")
    else:
        observer = target

    major = str(getattr(observer, "api_version", OBSERVER_API_VERSION)).split(".")[0]
    if major != OBSERVER_API_VERSION.split(".")[0]:
        raise ObserverLoadError(
            f"{label}: {entrypoint!r} targets observer API {observer.api_version!r}, "
            f"this release speaks {OBSERVER_API_VERSION}"
        )
    return observer
