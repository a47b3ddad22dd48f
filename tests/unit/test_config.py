"""Tests for decoder configuration.

Covers:
- Default values keep the lenient decoding behaviour
- Loading boolean flags from environment variables
- Fail-fast validation of unrecognised flag values
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from spherical_geo.core.config import ConfigValidationError, GeoConfig
from spherical_geo.core.exceptions import ValidationError


class TestGeoConfigDefaults:
    """Verify default configuration values."""

    def test_json_keys_lenient(self) -> None:
        assert GeoConfig().json_strict_keys is False

    def test_binary_length_lenient(self) -> None:
        assert GeoConfig().binary_strict_length is False

    def test_frozen_immutability(self) -> None:
        cfg = GeoConfig()
        with pytest.raises(AttributeError):
            cfg.json_strict_keys = True  # type: ignore[misc]


class TestGeoConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        env = {
            "GEO_JSON_STRICT_KEYS": "true",
            "GEO_BINARY_STRICT_LENGTH": "1",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = GeoConfig.from_env()

        assert cfg.json_strict_keys is True
        assert cfg.binary_strict_length is True

    def test_defaults_when_env_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = GeoConfig.from_env()
        assert cfg == GeoConfig()

    def test_empty_value_uses_default(self) -> None:
        with patch.dict(os.environ, {"GEO_JSON_STRICT_KEYS": ""}, clear=True):
            cfg = GeoConfig.from_env()
        assert cfg.json_strict_keys is False

    @pytest.mark.parametrize("raw", ["TRUE", "Yes", " on ", "1"])
    def test_truthy_spellings(self, raw: str) -> None:
        with patch.dict(os.environ, {"GEO_BINARY_STRICT_LENGTH": raw}, clear=True):
            cfg = GeoConfig.from_env()
        assert cfg.binary_strict_length is True

    @pytest.mark.parametrize("raw", ["false", "NO", "off", "0"])
    def test_falsy_spellings(self, raw: str) -> None:
        with patch.dict(os.environ, {"GEO_JSON_STRICT_KEYS": raw}, clear=True):
            cfg = GeoConfig.from_env()
        assert cfg.json_strict_keys is False


class TestGeoConfigValidation:
    """Fail-fast validation in from_env."""

    def test_unrecognised_json_flag_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEO_JSON_STRICT_KEYS": "strict"}, clear=True),
            pytest.raises(ConfigValidationError, match="GEO_JSON_STRICT_KEYS"),
        ):
            GeoConfig.from_env()

    def test_unrecognised_binary_flag_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEO_BINARY_STRICT_LENGTH": "2"}, clear=True),
            pytest.raises(ConfigValidationError, match="true/false"),
        ):
            GeoConfig.from_env()

    def test_error_contains_key_and_value(self) -> None:
        with (
            patch.dict(os.environ, {"GEO_JSON_STRICT_KEYS": "maybe"}, clear=True),
            pytest.raises(ConfigValidationError) as exc_info,
        ):
            GeoConfig.from_env()
        assert exc_info.value.key == "GEO_JSON_STRICT_KEYS"
        assert exc_info.value.value == "maybe"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_is_validation_error(self) -> None:
        err = ConfigValidationError("K", "v", "bad")
        assert isinstance(err, ValidationError)
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert err.operation == "config"
