"""
Hybrid Numeric/Symbolic Scalar

A CalculatorFloat is exactly one of:
    - Numeric(value)   a resolved float64 number
    - Symbolic(text)   a deferred expression, stored as opaque text

Arithmetic on two Numeric values is evaluated immediately.
Arithmetic involving a Symbolic value builds a new expression string:

    Numeric(2.0) + Symbolic("b")   ->  Symbolic("(2e0 + b)")
    Symbolic("a") * Symbolic("b")  ->  Symbolic("(a * b)")

When one side is a known number, identity simplifications keep the
generated text minimal:

    Symbolic("x") * Numeric(0.0)   ->  Numeric(0.0)
    Symbolic("x") * Numeric(1.0)   ->  Symbolic("x")
    Numeric(0.0) + Symbolic("x")   ->  Symbolic("x")

ARCHITECTURAL RULE:
    Symbolic text is never parsed back into structure.
    It is only wrapped and concatenated.
"""

import math
import numbers
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Union

import numpy as np

from calcfloat.formatting import format_scientific, parse_float


ATOL = sys.float_info.epsilon
RTOL = 1e-8


class CalculatorError(ValueError):
    """Base class for recoverable calculator errors."""
    pass


class SymbolicNotConvertibleError(CalculatorError):
    """Raised when a Symbolic value is asked for a concrete float."""

    def __init__(self, offending_text: str):
        super().__init__(
            f"Symbolic value '{offending_text}' can not be converted to float"
        )
        self.offending_text = offending_text


class CalculatorDivisionByZero(ZeroDivisionError):
    """
    Raised when a value is divided by a Numeric zero.

    This is a programmer error, not a recoverable calculator error.
    It deliberately does not derive from CalculatorError.
    """
    pass


Operand = Union["CalculatorFloat", int, float, str]


class CalculatorFloat(ABC):
    """
    Base class for the two value variants.

    Every operation returns a new value. The in-place operators
    (+=, -=, *=, /=) rebind the target to the result.

    Right-hand operands may be native numbers, text or another
    CalculatorFloat; they are converted with from_value() before
    dispatch.
    """

    @classmethod
    def from_value(cls, value: Operand) -> "CalculatorFloat":
        """
        Convert a native value into a CalculatorFloat.

        Numbers become Numeric. Text is parsed as a float literal and
        becomes Numeric on success, otherwise Symbolic with the text
        kept verbatim. Existing values are returned unchanged.

        Raises:
            TypeError: for bool and any other unsupported type
        """
        converted = _coerce(value)
        if converted is None:
            raise TypeError(
                f"Cannot convert {type(value).__name__} to CalculatorFloat"
            )
        return converted

    @property
    @abstractmethod
    def is_float(self) -> bool:
        """True when the value is a resolved number."""

    @abstractmethod
    def to_float(self) -> float:
        """Return the number, or raise SymbolicNotConvertibleError."""

    @abstractmethod
    def to_text(self) -> str:
        """Return the canonical text rendering."""

    def __str__(self) -> str:
        return self.to_text()

    def __float__(self) -> float:
        return self.to_float()

    # Transcendental and utility operations

    def sqrt(self) -> "CalculatorFloat":
        return _unary(self, np.sqrt, "sqrt")

    def exp(self) -> "CalculatorFloat":
        return _unary(self, np.exp, "exp")

    def sin(self) -> "CalculatorFloat":
        return _unary(self, np.sin, "sin")

    def cos(self) -> "CalculatorFloat":
        return _unary(self, np.cos, "cos")

    def acos(self) -> "CalculatorFloat":
        return _unary(self, np.arccos, "acos")

    def abs(self) -> "CalculatorFloat":
        return _unary(self, np.abs, "abs")

    def signum(self) -> "CalculatorFloat":
        """Sign of the value; zero keeps the sign of its sign bit."""
        return _unary(self, _signum, "sign")

    def recip(self) -> "CalculatorFloat":
        """Reciprocal 1/x. A Numeric zero gives infinity, never an error."""
        if isinstance(self, Numeric):
            return Numeric(_evaluate(np.divide, 1.0, self.value))
        return Symbolic(f"(1 / {self})")

    def atan2(self, other: Operand) -> "CalculatorFloat":
        return _wrap_binary(self, self.from_value(other), np.arctan2, "atan2({}, {})")

    def powf(self, other: Operand) -> "CalculatorFloat":
        return _wrap_binary(self, self.from_value(other), np.power, "({} ^ {})")

    def isclose(self, other: Operand) -> bool:
        """
        Approximate comparison.

        Two numbers compare with |x - y| <= ATOL + RTOL * |y|.
        A number and a symbol compare by canonical text.
        Two symbols compare by exact text.
        """
        other = self.from_value(other)
        if isinstance(self, Numeric) and isinstance(other, Numeric):
            return abs(self.value - other.value) <= ATOL + RTOL * abs(other.value)
        return self.to_text() == other.to_text()

    # Python operator protocol

    def __add__(self, other):
        return _forward(_add, self, other)

    def __radd__(self, other):
        return _reflect(_add, self, other)

    def __sub__(self, other):
        return _forward(_sub, self, other)

    def __rsub__(self, other):
        return _reflect(_sub, self, other)

    def __mul__(self, other):
        return _forward(_mul, self, other)

    def __rmul__(self, other):
        return _reflect(_mul, self, other)

    def __truediv__(self, other):
        return _forward(_div, self, other)

    def __rtruediv__(self, other):
        return _reflect(_div, self, other)

    def __pow__(self, other):
        return _forward(CalculatorFloat.powf, self, other)

    def __rpow__(self, other):
        return _reflect(CalculatorFloat.powf, self, other)

    def __neg__(self) -> "CalculatorFloat":
        if isinstance(self, Numeric):
            return Numeric(-self.value)
        return Symbolic(f"(-{self})")

    def __abs__(self) -> "CalculatorFloat":
        return self.abs()


@dataclass(frozen=True)
class Numeric(CalculatorFloat):
    """
    A resolved float64 number.

    The payload is normalised to float, so Numeric(3) == Numeric(3.0).
    """

    value: float

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise TypeError(f"Numeric expects a real number, got {type(self.value).__name__}")
        object.__setattr__(self, "value", _to_float64(self.value))

    @property
    def is_float(self) -> bool:
        return True

    def to_float(self) -> float:
        return self.value

    def to_text(self) -> str:
        return format_scientific(self.value)


@dataclass(frozen=True)
class Symbolic(CalculatorFloat):
    """
    A deferred expression held as opaque text.

    Building a Symbolic directly never parses the text, so
    Symbolic("3.0") stays symbolic. Use CalculatorFloat.from_value()
    to get the parse-then-fallback behaviour.
    """

    text: str

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"Symbolic expects str, got {type(self.text).__name__}")

    @property
    def is_float(self) -> bool:
        return False

    def to_float(self) -> float:
        raise SymbolicNotConvertibleError(self.text)

    def to_text(self) -> str:
        return self.text


def _to_float64(value) -> float:
    try:
        return float(value)
    except OverflowError:
        # integers beyond the float64 range round to infinity
        return math.inf if value > 0 else -math.inf


def _coerce(value) -> Optional[CalculatorFloat]:
    if isinstance(value, CalculatorFloat):
        return value
    if isinstance(value, str):
        parsed = parse_float(value)
        if parsed is None:
            return Symbolic(value)
        return Numeric(parsed)
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        return Numeric(value)
    return None


def _forward(operation: Callable, left: CalculatorFloat, other) -> CalculatorFloat:
    right = _coerce(other)
    if right is None:
        return NotImplemented
    return operation(left, right)


def _reflect(operation: Callable, right: CalculatorFloat, other) -> CalculatorFloat:
    left = _coerce(other)
    if left is None:
        return NotImplemented
    return operation(left, right)


def _evaluate(func: Callable, *args: float) -> float:
    # float64 semantics: NaN and infinity instead of exceptions
    with np.errstate(all="ignore"):
        return float(func(*(np.float64(arg) for arg in args)))


def _signum(x):
    if np.isnan(x):
        return x
    return math.copysign(1.0, x)


def _is_zero(x: float) -> bool:
    return abs(x) <= ATOL


def _is_one(x: float) -> bool:
    return abs(x - 1.0) < ATOL


def _unary(value: CalculatorFloat, func: Callable, name: str) -> CalculatorFloat:
    if isinstance(value, Numeric):
        return Numeric(_evaluate(func, value.value))
    return Symbolic(f"{name}({value})")


def _wrap_binary(left: CalculatorFloat, right: CalculatorFloat, func: Callable, template: str) -> CalculatorFloat:
    if isinstance(left, Numeric) and isinstance(right, Numeric):
        return Numeric(_evaluate(func, left.value, right.value))
    return Symbolic(template.format(left, right))


def _add(left: CalculatorFloat, right: CalculatorFloat) -> CalculatorFloat:
    if isinstance(left, Numeric):
        if isinstance(right, Numeric):
            return Numeric(left.value + right.value)
        if _is_zero(left.value):
            return right
    elif isinstance(right, Numeric) and _is_zero(right.value):
        return left
    return Symbolic(f"({left} + {right})")


def _sub(left: CalculatorFloat, right: CalculatorFloat) -> CalculatorFloat:
    if isinstance(left, Numeric):
        if isinstance(right, Numeric):
            return Numeric(left.value - right.value)
        if _is_zero(left.value):
            return Symbolic(f"(-{right})")
    elif isinstance(right, Numeric) and _is_zero(right.value):
        return left
    return Symbolic(f"({left} - {right})")


def _mul(left: CalculatorFloat, right: CalculatorFloat) -> CalculatorFloat:
    if isinstance(left, Numeric) and isinstance(right, Numeric):
        return Numeric(left.value * right.value)
    if isinstance(left, Numeric) or isinstance(right, Numeric):
        number, symbol = (left, right) if isinstance(left, Numeric) else (right, left)
        # a symbol times an exact zero is exactly zero
        if number.value == 0.0:
            return Numeric(0.0)
        if _is_one(number.value):
            return symbol
    return Symbolic(f"({left} * {right})")


def _div(left: CalculatorFloat, right: CalculatorFloat) -> CalculatorFloat:
    if isinstance(right, Numeric):
        if right.value == 0.0:
            raise CalculatorDivisionByZero("Division by zero")
        if isinstance(left, Numeric):
            return Numeric(left.value / right.value)
        if _is_one(right.value):
            return left
    elif isinstance(left, Numeric) and left.value == 0.0:
        return Numeric(0.0)
    return Symbolic(f"({left} / {right})")
