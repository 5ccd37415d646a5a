from __future__ import annotations
import math
import re

__all__ = ["format_value", "format_complex", "coerce_float"]

_PREFIXES = [
    (1e9, "G"),
    (1e6, "M"),
    (1e3, "k"),
    (1.0, ""),
    (1e-3, "m"),
    (1e-6, "µ"),
    (1e-9, "n"),
    (1e-12, "p"),
]

# leading decimal number, the way a browser's parseFloat() reads it
_NUMBER = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def format_value(value: float, unit: str) -> str:
    """Formats `value` with an SI prefix, e.g. 0.0318 H -> '31.8mH'."""
    if value == 0.0 or not math.isfinite(value):
        return f"{value:g}{unit}"
    for scale, prefix in _PREFIXES:
        if abs(value) >= scale:
            return f"{value / scale:.4g}{prefix}{unit}"
    return f"{value:g}{unit}"


def format_complex(z: complex, unit: str) -> str:
    sign = "+" if z.imag >= 0 else "-"
    return f"{z.real:.6g} {sign} j{abs(z.imag):.6g} {unit}"


def coerce_float(value: str | float | int | None) -> float:
    """
    Converts user input to a float. Anything that does not start with a
    number (empty text, None, garbage, NaN) becomes 0.0.
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        value = float(value)
        return 0.0 if math.isnan(value) else value
    m = _NUMBER.match(str(value))
    if m is None:
        return 0.0
    return float(m.group(0))
