"""Event template catalog loaded from the packaged ``event_templates.json``."""

from __future__ import annotations

import json
from collections.abc import Mapping
from importlib import resources
from typing import Any

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}
_JSON_FILENAME = "event_templates.json"


def _flatten(raw: Mapping[str, Any]) -> dict[tuple[str, str], str]:
    templates: dict[tuple[str, str], str] = {}
    for domain, actions in raw.items():
        if not isinstance(actions, Mapping):
            continue
        for action, template in actions.items():
            if isinstance(template, str):
                templates[(str(domain), str(action))] = template
    return templates


def _load_event_templates() -> dict[tuple[str, str], str]:
    source = resources.files(__package__).joinpath(_JSON_FILENAME)
    try:
        raw: Any = json.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {("app", "load_error"): "Event templates file missing"}
    except (OSError, ValueError) as e:
        return {("app", "load_error"): f"Failed to load event templates: {e}"[:200]}
    return _flatten(raw) if isinstance(raw, Mapping) else {}


def template_for(domain: str, action: str) -> str | None:
    return EVENT_TEMPLATES.get((domain, action))


def reload_event_templates() -> None:
    global EVENT_TEMPLATES  # noqa: PLW0603
    EVENT_TEMPLATES = _load_event_templates()


reload_event_templates()

__all__ = ["EVENT_TEMPLATES", "reload_event_templates", "template_for"]
