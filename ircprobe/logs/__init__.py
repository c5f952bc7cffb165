"""Project logging package.

Contains the event catalog and ProbeLogger. Avoid importing stdlib logging
through this package name externally.
"""

from .event_catalog import EVENT_TEMPLATES, reload_event_templates  # noqa: F401
from .logger import ProbeLogger, logger  # noqa: F401

__all__ = ["ProbeLogger", "logger", "EVENT_TEMPLATES", "reload_event_templates"]
