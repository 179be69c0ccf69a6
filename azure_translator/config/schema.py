"""TypedDict definitions for the connector configuration.

These types mirror ``DEFAULT_CONFIG`` in :mod:`azure_translator.config.defaults`
and drive :class:`~azure_translator.config.validator.ConfigValidator`.
"""

from typing import Literal, TypedDict

__all__ = [
    "EndpointsConfig",
    "TimeoutConfig",
    "HttpConfig",
    "CacheConfig",
    "V3Config",
    "ConnectorConfig",
]


class EndpointsConfig(TypedDict, total=False):
    token_url: str
    v2_url: str
    v3_url: str


class TimeoutConfig(TypedDict, total=False):
    connect: float
    read: float
    write: float
    pool: float


class HttpConfig(TypedDict, total=False):
    timeout: TimeoutConfig


class CacheConfig(TypedDict, total=False):
    max_entries: int
    ttl_seconds: float
    max_key_length: int


class V3Config(TypedDict, total=False):
    auth: Literal["key", "token"]


class ConnectorConfig(TypedDict, total=False):
    endpoints: EndpointsConfig
    http: HttpConfig
    cache: CacheConfig
    v3: V3Config
