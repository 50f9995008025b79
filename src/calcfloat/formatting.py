"""
Canonical text rendering and text parsing for calculator values.

Numbers render in scientific notation with the shortest mantissa that
round-trips the float64 value:

    3.0      -> "3e0"
    2.5      -> "2.5e0"
    0.001    -> "1e-3"
    -1234.5  -> "-1.2345e3"

This rendering is used everywhere a number is embedded in a symbolic
expression, and for string comparison in isclose.
"""

import math
from decimal import Decimal
from typing import Optional


def format_scientific(number: float) -> str:
    """Render a float in canonical scientific notation."""
    number = float(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"

    sign = "-" if math.copysign(1.0, number) < 0 else ""
    # repr gives the shortest digit string that round-trips
    _, digits, exponent = Decimal(repr(abs(number))).normalize().as_tuple()
    if digits == (0,):
        return f"{sign}0e0"

    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    return f"{sign}{mantissa}e{exponent + len(digits) - 1}"


def parse_float(text: str) -> Optional[float]:
    """
    Parse text as a float literal.

    Returns None when the text is not a number; symbolic text is never
    an error here. Padding whitespace, digit underscores and non-ASCII
    digits are not part of the literal grammar.
    """
    if not text.isascii() or "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None
