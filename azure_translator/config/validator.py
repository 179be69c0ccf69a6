"""Lightweight configuration validation utilities for the connector."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, get_args, get_origin, get_type_hints

from .schema import ConnectorConfig


@dataclass(frozen=True)
class ValidationError:
    """Represents a single configuration validation failure."""

    path: str
    message: str


class ConfigValidator:
    """Validate a connector configuration against the TypedDict schema."""

    _ROOT_SCHEMA = ConnectorConfig

    # 0 を許さない数値設定
    _POSITIVE_KEYS = (
        "http.timeout.connect",
        "http.timeout.read",
        "http.timeout.write",
        "http.timeout.pool",
        "cache.max_entries",
        "cache.ttl_seconds",
    )

    @classmethod
    def validate(cls, config: Mapping[str, Any]) -> List[ValidationError]:
        """Validate a configuration dictionary and return a list of errors."""
        if not isinstance(config, MappingABC):
            return [
                ValidationError(
                    path="<root>",
                    message="Expected a mapping for the configuration root",
                )
            ]
        errors = cls._validate_typed_dict(config, cls._ROOT_SCHEMA, path="")
        errors.extend(cls._validate_values(config))
        return errors

    @classmethod
    def validate_or_raise(cls, config: Mapping[str, Any]) -> None:
        """Validate the configuration and raise ValueError on failure."""
        errors = cls.validate(config)
        if errors:
            details = "\n".join(f"- {err.path}: {err.message}" for err in errors)
            raise ValueError(f"Configuration validation failed:\n{details}")

    # Internal helpers -----------------------------------------------------

    @classmethod
    def _validate_typed_dict(
        cls,
        value: Mapping[str, Any],
        schema: type[dict],
        path: str,
    ) -> List[ValidationError]:
        errors: List[ValidationError] = []
        annotations: Dict[str, Any] = get_type_hints(schema)

        for key in sorted(value.keys()):
            key_path = cls._join(path, key)
            annotation = annotations.get(key)
            if annotation is None:
                errors.append(
                    ValidationError(
                        path=key_path,
                        message=f"Unexpected key for {schema.__name__}",
                    )
                )
                continue

            sub_value = value[key]
            if cls._is_typed_dict(annotation):
                if not isinstance(sub_value, MappingABC):
                    errors.append(
                        ValidationError(
                            path=key_path,
                            message=f"Expected {annotation.__name__} structure, got {type(sub_value).__name__}",
                        )
                    )
                else:
                    errors.extend(cls._validate_typed_dict(sub_value, annotation, key_path))
            elif not cls._matches_type(sub_value, annotation):
                errors.append(
                    ValidationError(
                        path=key_path,
                        message=f"Expected {cls._describe(annotation)}, got {type(sub_value).__name__}",
                    )
                )

        return errors

    @classmethod
    def _validate_values(cls, config: Mapping[str, Any]) -> List[ValidationError]:
        errors: List[ValidationError] = []

        for dotted in cls._POSITIVE_KEYS:
            value = cls._lookup(config, dotted)
            if isinstance(value, (int, float)) and not isinstance(value, bool) and value <= 0:
                errors.append(ValidationError(path=dotted, message="Must be greater than zero"))

        max_key_length = cls._lookup(config, "cache.max_key_length")
        if isinstance(max_key_length, int) and not isinstance(max_key_length, bool) and max_key_length < 4:
            errors.append(
                ValidationError(path="cache.max_key_length", message="Must be at least 4")
            )

        endpoints = config.get("endpoints")
        if isinstance(endpoints, MappingABC):
            for name, url in endpoints.items():
                if isinstance(url, str) and not url.startswith(("http://", "https://")):
                    errors.append(
                        ValidationError(
                            path=cls._join("endpoints", name),
                            message="Expected an http(s) URL",
                        )
                    )

        return errors

    @staticmethod
    def _lookup(config: Mapping[str, Any], dotted: str) -> Any:
        node: Any = config
        for part in dotted.split("."):
            if not isinstance(node, MappingABC) or part not in node:
                return None
            node = node[part]
        return node

    @staticmethod
    def _matches_type(value: Any, annotation: Any) -> bool:
        if get_origin(annotation) is Literal:
            return value in get_args(annotation)
        if annotation is float:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if annotation is int:
            return isinstance(value, int) and not isinstance(value, bool)
        if isinstance(annotation, type):
            return isinstance(value, annotation)
        return True

    @staticmethod
    def _describe(annotation: Any) -> str:
        if get_origin(annotation) is Literal:
            values = ", ".join(repr(arg) for arg in get_args(annotation))
            return f"literal ({values})"
        if isinstance(annotation, type):
            return annotation.__name__
        return str(annotation)

    @staticmethod
    def _is_typed_dict(annotation: Any) -> bool:
        return isinstance(annotation, type) and issubclass(annotation, dict) and hasattr(annotation, "__required_keys__")

    @staticmethod
    def _join(path: str, key: str) -> str:
        return key if not path else f"{path}.{key}"
