"""
Serialization helpers for CalculatorFloat values.

A Numeric value is written as a native float and a Symbolic value as a
native string, so the enclosing document stays readable:

    Numeric(3.0)        ->  3.0
    Symbolic("theta")   ->  "theta"

Reading accepts a float, a 32-bit integer or a string. Strings follow
the same parse-then-fallback rule as CalculatorFloat.from_value().
"""
from __future__ import annotations

import json
import warnings
from typing import Any

import yaml

from calcfloat.calculator_float import CalculatorFloat, Numeric, Symbolic
from calcfloat.formatting import parse_float


INT32_MIN = -(2 ** 31)
UINT32_MAX = 2 ** 32 - 1


class NumericTextWarning(UserWarning):
    """Emitted when a string token is read back as a number."""
    pass


def to_native(value: CalculatorFloat) -> float | str:
    if isinstance(value, Numeric):
        return value.value
    if isinstance(value, Symbolic):
        return value.text
    raise TypeError(f"Unsupported CalculatorFloat type: {type(value)}")


def from_native(token: Any) -> CalculatorFloat:
    if isinstance(token, bool):
        raise TypeError(f"expected float or string, got {type(token).__name__}")
    if isinstance(token, float):
        return Numeric(token)
    if isinstance(token, int):
        if not INT32_MIN <= token <= UINT32_MAX:
            raise TypeError(f"expected float or string, got out-of-range integer {token}")
        return Numeric(token)
    if isinstance(token, str):
        parsed = parse_float(token)
        if parsed is None:
            return Symbolic(token)
        warnings.warn(
            f"String token '{token}' was read as the number {parsed!r}; the original text is not kept",
            NumericTextWarning,
        )
        return Numeric(parsed)
    raise TypeError(f"expected float or string, got {type(token).__name__}")


def to_json(value: CalculatorFloat) -> str:
    return json.dumps(to_native(value))


def from_json(s: str) -> CalculatorFloat:
    return from_native(json.loads(s))


def to_yaml(value: CalculatorFloat) -> str:
    return yaml.safe_dump(to_native(value))


def from_yaml(s: str) -> CalculatorFloat:
    return from_native(yaml.safe_load(s))
