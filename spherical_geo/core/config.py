"""Decoder configuration loaded from environment variables.

Defaults keep the lenient decoding behaviour: JSON payloads missing
``lat``/``lon`` decode those coordinates as ``0``, and binary payloads
longer than 16 bytes have their trailing bytes ignored.  Either can be
tightened per process through the environment.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a flag is set to
    something that is not a recognised boolean, so a typo never silently
    falls back to the lenient default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from spherical_geo.core.exceptions import ValidationError
from spherical_geo.utils.helpers import parse_bool


class ConfigValidationError(ValidationError):
    """Raised when a configuration value is invalid.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_operation = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class GeoConfig:
    """Immutable decoder configuration.

    Attributes:
        json_strict_keys: Reject JSON points missing ``lat`` or ``lon``
            instead of defaulting them to ``0``.
        binary_strict_length: Reject binary points that are not exactly
            16 bytes instead of ignoring trailing bytes.
    """

    json_strict_keys: bool = False
    binary_strict_length: bool = False

    @classmethod
    def from_env(cls) -> GeoConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a flag is not a recognised boolean.
        """
        return cls(
            json_strict_keys=_env_flag("GEO_JSON_STRICT_KEYS", default=False),
            binary_strict_length=_env_flag("GEO_BINARY_STRICT_LENGTH", default=False),
        )


def _env_flag(key: str, *, default: bool) -> bool:
    raw = os.getenv(key, "")
    try:
        return parse_bool(raw, default=default)
    except ValueError as exc:
        raise ConfigValidationError(
            key,
            raw,
            "must be one of 1/0, true/false, yes/no, on/off",
        ) from exc
