"""
Example parameter builder for a single-qubit rotation.

The same builder works for a known angle and for a symbolic one:
a known angle gives numbers, a symbolic angle gives expression text.
"""
from typing import Dict

from calcfloat.calculator_float import CalculatorFloat, Operand


def build_example_rotation(theta: Operand = "theta", phase: Operand = 0.0) -> Dict[str, CalculatorFloat]:
    theta = CalculatorFloat.from_value(theta)
    phase = CalculatorFloat.from_value(phase)

    half_angle = theta / 2
    cos_half = half_angle.cos()
    sin_half = half_angle.sin()

    return {
        "theta": theta,
        "phase": phase,
        "half_angle": half_angle,
        "cos_half": cos_half,
        "sin_half": sin_half,
        # identity simplifications drop the phase term when it is zero
        "shifted_angle": theta + phase,
        "norm": (cos_half * cos_half + sin_half * sin_half).sqrt(),
        "axis_angle": sin_half.atan2(cos_half),
    }
