"""
Exact integer arithmetic.

Python integers never overflow, but the calculus works with signed 64-bit
values (and 32-bit values for int fields). These helpers reject results
outside those ranges instead of silently widening them.
"""

from __future__ import annotations

from .errors import ArithmeticOverflowError

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _check_long(result: int, operation: str) -> int:
    if result < LONG_MIN or result > LONG_MAX:
        raise ArithmeticOverflowError(f"long overflow in {operation}", context={"result": str(result)})
    return result


def add_exact(a: int, b: int) -> int:
    return _check_long(a + b, f"{a} + {b}")


def subtract_exact(a: int, b: int) -> int:
    return _check_long(a - b, f"{a} - {b}")


def multiply_exact(a: int, b: int) -> int:
    return _check_long(a * b, f"{a} * {b}")


def to_int_exact(value: int) -> int:
    """Narrow a 64-bit value to 32 bits."""
    if value < INT_MIN or value > INT_MAX:
        raise ArithmeticOverflowError(f"integer overflow: {value}", context={"value": value})
    return value


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q
