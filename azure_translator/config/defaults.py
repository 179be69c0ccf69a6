"""Default configuration values for the Microsoft Translator connector."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

# NOTE:
# Endpoint URLs may point at a regional host or a private deployment.

DEFAULT_TOKEN_URL = "https://api.cognitive.microsoft.com/sts/v1.0/issueToken"
DEFAULT_V2_URL = "https://api.microsofttranslator.com/v2/http.svc/Translate"
DEFAULT_V3_URL = "https://api.cognitive.microsofttranslator.com/translate"

DEFAULT_CONFIG: Dict[str, Any] = {
    "endpoints": {
        "token_url": DEFAULT_TOKEN_URL,
        "v2_url": DEFAULT_V2_URL,
        "v3_url": DEFAULT_V3_URL,
    },
    "http": {
        "timeout": {
            "connect": 10.0,
            "read": 30.0,
            "write": 30.0,
            "pool": 10.0,
        },
    },
    "cache": {
        "max_entries": 1000,
        "ttl_seconds": 24 * 60 * 60,
        "max_key_length": 10000,
    },
    "v3": {
        # "key": Ocp-Apim-Subscription-Key/Region ヘッダで認証
        # "token": トークン交換後に Authorization ヘッダで認証
        "auth": "key",
    },
}


def get_default_config() -> Dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return deepcopy(DEFAULT_CONFIG)


def merge_config(base: Dict[str, Any], override: Dict[str, Any] | None) -> Dict[str, Any]:
    """
    Recursively merge two configuration dictionaries.

    Args:
        base: The base configuration that provides default values.
        override: Overrides coming from callers (can be None).

    Returns:
        A new dictionary containing the merged configuration.
    """
    if override is None:
        return deepcopy(base)

    merged = deepcopy(base)
    for key, value in override.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged
