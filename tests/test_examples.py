"""
Test the example rotation builder for symbolic and numeric angles.
"""

import math

from calcfloat.calculator_float import Numeric, Symbolic
from calcfloat.examples import build_example_rotation


def test_symbolic_rotation():
    params = build_example_rotation()

    assert params["theta"] == Symbolic("theta")
    assert params["half_angle"] == Symbolic("(theta / 2e0)")
    assert params["cos_half"] == Symbolic("cos((theta / 2e0))")
    assert params["sin_half"] == Symbolic("sin((theta / 2e0))")
    assert params["axis_angle"] == Symbolic("atan2(sin((theta / 2e0)), cos((theta / 2e0)))")

    # Zero phase is dropped rather than wrapped
    assert params["shifted_angle"] == Symbolic("theta")
    assert params["norm"].to_text().startswith("sqrt((")
    assert not params["norm"].is_float


def test_symbolic_phase():
    params = build_example_rotation("theta", phase="phi")
    assert params["shifted_angle"] == Symbolic("(theta + phi)")


def test_numeric_rotation():
    params = build_example_rotation(math.pi)

    assert params["half_angle"] == Numeric(math.pi / 2)
    assert params["cos_half"].isclose(0.0)
    assert params["sin_half"].isclose(1.0)
    assert params["norm"].isclose(1.0)
    assert params["shifted_angle"] == Numeric(math.pi)
    assert all(value.is_float for value in params.values())
