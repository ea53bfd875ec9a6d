"""Conversions between NUMERIC columns and domain decimal strings."""

from decimal import Decimal, InvalidOperation


def format_decimal(value: Decimal | None) -> str | None:
    """Render a NUMERIC value without trailing zeros ("9.9900" -> "9.99")."""
    if value is None:
        return None
    normalized = value.normalize()
    # normalize() of zero can keep a negative exponent or sign
    if normalized == 0:
        return "0"
    return format(normalized, "f")


def parse_decimal(value: str | int | float | Decimal | None) -> Decimal | None:
    """Parse a decimal string for a NUMERIC column.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if value is None:
        return None
    try:
        parsed = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Not a decimal number: {value!r}") from e
    if not parsed.is_finite():
        raise ValueError(f"Not a finite decimal number: {value!r}")
    return parsed
