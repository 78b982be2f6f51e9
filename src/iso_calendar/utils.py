"""
Iso-Calendar Utility Module.

This module provides the checked integer arithmetic used across the iso_calendar package. Python integers never
overflow, so every calculation that models a signed 32-bit ("int") or 64-bit ("long") quantity is checked explicitly
and fails fast with an :class:`ArithmeticOverflowError` instead of silently producing an out-of-range value.
"""

from iso_calendar.exceptions import ArithmeticOverflowError
from iso_calendar.fields import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN


def check_long(value: int) -> int:
    """Check that a value fits in a signed 64-bit integer.

    Args:
        value: The value to check.

    Returns:
        The value, unchanged.

    Raises:
        ArithmeticOverflowError: If the value does not fit.
    """
    if not LONG_MIN <= value <= LONG_MAX:
        raise ArithmeticOverflowError("long overflow")
    return value


def to_int_exact(value: int) -> int:
    """Check that a value fits in a signed 32-bit integer.

    Args:
        value: The value to check.

    Returns:
        The value, unchanged.

    Raises:
        ArithmeticOverflowError: If the value does not fit.
    """
    if not INT_MIN <= value <= INT_MAX:
        raise ArithmeticOverflowError("integer overflow")
    return value


def add_exact(a: int, b: int) -> int:
    """Add two 64-bit values, raising on overflow."""
    return check_long(a + b)


def subtract_exact(a: int, b: int) -> int:
    """Subtract two 64-bit values, raising on overflow."""
    return check_long(a - b)


def multiply_exact(a: int, b: int) -> int:
    """Multiply two 64-bit values, raising on overflow."""
    return check_long(a * b)


def add_exact_int(a: int, b: int) -> int:
    """Add two 32-bit values, raising on overflow."""
    return to_int_exact(a + b)


def multiply_exact_int(a: int, b: int) -> int:
    """Multiply two 32-bit values, raising on overflow."""
    return to_int_exact(a * b)


def trunc_div(a: int, b: int) -> int:
    """Divide, rounding the quotient towards zero rather than towards negative infinity.

    Calendar differences use this so that the quotient and the remainder (see :func:`trunc_mod`) carry the same
    sign as the dividend, e.g. -15 months splits into -1 year and -3 months.

    Args:
        a: The dividend.
        b: The divisor, not zero.

    Returns:
        The truncated quotient.
    """
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """The remainder matching :func:`trunc_div`, which has the sign of the dividend."""
    return a - b * trunc_div(a, b)


def negate_exact(value: int) -> int:
    """Negate a 64-bit value, raising when the result does not fit (only for the minimum value)."""
    return check_long(-value)
