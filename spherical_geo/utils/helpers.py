"""Shared helper functions used by the models and configuration layer."""

from __future__ import annotations

from decimal import Decimal

_PLAIN_MIN_EXPONENT = -4
_PLAIN_MAX_EXPONENT = 5

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def format_json_number(value: float) -> str:
    """Render a finite number in its shortest round-tripping ``%g`` form.

    Uses the fewest significant digits that read back as the same double.
    Plain notation is used for decimal exponents from -4 to 5.  Outside
    that range the text switches to exponent form with at least two
    exponent digits (``1e+06``, ``1.5e-07``).  Integral values carry no
    fractional part (``10.0`` -> ``"10"``).

    Args:
        value: A finite ``int`` or ``float``.

    Returns:
        The decimal text, e.g. ``"40.7486"`` or ``"-73.9864"``.
    """
    sign, digit_tuple, exponent = Decimal(repr(float(value))).as_tuple()
    prefix = "-" if sign else ""
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    if not digits:
        return f"{prefix}0"

    # Digits before the decimal point (negative: leading zeros after it)
    point = len(digit_tuple) + exponent
    decimal_exponent = point - 1
    if decimal_exponent < _PLAIN_MIN_EXPONENT or decimal_exponent > _PLAIN_MAX_EXPONENT:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        return f"{prefix}{mantissa}e{decimal_exponent:+03d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def parse_bool(raw: str, *, default: bool) -> bool:
    """Parse a boolean setting string.

    Accepts ``1/true/yes/on`` and ``0/false/no/off`` (case-insensitive,
    surrounding whitespace ignored).  An empty string yields *default*.

    Raises:
        ValueError: If *raw* is not a recognised boolean spelling.
    """
    normalised = raw.strip().lower()
    if not normalised:
        return default
    if normalised in _TRUE_VALUES:
        return True
    if normalised in _FALSE_VALUES:
        return False
    msg = f"not a boolean: {raw!r}"
    raise ValueError(msg)
