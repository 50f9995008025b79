"""
Calculator Float Package

A single scalar type for parameters that are either known numbers or
deferred symbolic expressions.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Parsing or evaluating symbolic expression text
    - The document format that stores the values
    - The operations the values parameterize

Symbolic text is opaque. It is wrapped and combined, never interpreted.
"""

from calcfloat.calculator_float import (
    ATOL,
    RTOL,
    CalculatorDivisionByZero,
    CalculatorError,
    CalculatorFloat,
    Numeric,
    Symbolic,
    SymbolicNotConvertibleError,
)

__version__ = "0.1.0"

__all__ = [
    "ATOL",
    "RTOL",
    "CalculatorDivisionByZero",
    "CalculatorError",
    "CalculatorFloat",
    "Numeric",
    "Symbolic",
    "SymbolicNotConvertibleError",
]
