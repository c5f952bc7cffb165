"""Configuration package."""

from .loader import ENV_FIELDS, load_config  # noqa: F401
from .model import CheckConfig  # noqa: F401

__all__ = ["CheckConfig", "ENV_FIELDS", "load_config"]
