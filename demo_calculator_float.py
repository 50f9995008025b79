"""
Demo: Build rotation parameters for a known and a symbolic angle and
show how they serialize.
"""

import math

from calcfloat.calculator_float import CalculatorFloat, SymbolicNotConvertibleError
from calcfloat.examples import build_example_rotation
from calcfloat.serialization import to_json, to_yaml


def print_parameters(title, parameters):
    """Pretty-print a parameter dict."""
    print()
    print("=" * 70)
    print(title)
    print("=" * 70)
    for name, value in parameters.items():
        kind = "numeric " if value.is_float else "symbolic"
        print(f"  {name:<15} [{kind}]  {value}")
    print()


def main():
    print_parameters("ROTATION WITH KNOWN ANGLE (pi / 2)", build_example_rotation(math.pi / 2))
    symbolic = build_example_rotation("theta", phase="phi")
    print_parameters("ROTATION WITH SYMBOLIC ANGLE", symbolic)

    print("📦 SERIALIZED")
    print(f"  JSON: {to_json(symbolic['cos_half'])}")
    print(f"  YAML: {to_yaml(CalculatorFloat.from_value(0.5)).splitlines()[0]}")
    print()

    print("⚠️  CONVERSION")
    try:
        float(symbolic["half_angle"])
    except SymbolicNotConvertibleError as e:
        print(f"  {e}")
    print()


if __name__ == "__main__":
    main()
