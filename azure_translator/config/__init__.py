"""Connector configuration helpers."""

from .defaults import (
    DEFAULT_CONFIG,
    DEFAULT_TOKEN_URL,
    DEFAULT_V2_URL,
    DEFAULT_V3_URL,
    get_default_config,
    merge_config,
)
from .validator import ConfigValidator, ValidationError

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_TOKEN_URL",
    "DEFAULT_V2_URL",
    "DEFAULT_V3_URL",
    "get_default_config",
    "merge_config",
    "ConfigValidator",
    "ValidationError",
]
