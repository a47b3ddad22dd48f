"""Unified exception taxonomy.

Provides a shared base exception hierarchy for the point and polygon
models and the configuration layer.  Every domain exception inherits
from ``GeoError`` and carries structured context fields so callers can
tell bad input apart from undecodable payloads without string matching.

Taxonomy categories
-------------------
- ``ValidationError``: invalid input or configuration.
- ``DecodeError``: an encoded payload (binary or JSON) cannot be decoded.
- ``EncodeError``: a value cannot be represented in the target format.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class GeoError(Exception):
    """Base exception for all spherical_geo errors.

    Attributes:
        message: Human-readable error description.
        operation: Operation that failed (e.g. ``"point.from_bytes"``).
        code: Machine-readable error code (e.g. ``"POINT_DECODE_FAILED"``).
    """

    #: Default operation for subclasses (override via class attribute or kwarg).
    default_operation: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        operation: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.operation = operation or self.default_operation
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, DecodeError):
            return "decode"
        if isinstance(self, EncodeError):
            return "encode"
        return "unknown"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "operation": self.operation,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeoError):
    """Invalid input or configuration."""


class DecodeError(GeoError):
    """An encoded payload could not be decoded."""


class EncodeError(GeoError):
    """A value could not be encoded in the requested format."""
