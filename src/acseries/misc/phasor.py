from __future__ import annotations
from dataclasses import dataclass
import math

__all__ = [
    "Phasor",
    "add",
    "multiply",
    "divide",
    "conjugate",
    "to_polar",
    "from_polar"
]


def add(a: complex, b: complex) -> complex:
    return complex(a.real + b.real, a.imag + b.imag)


def multiply(a: complex, b: complex) -> complex:
    return complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real
    )


def divide(a: complex, b: complex) -> complex:
    """
    Divides complex number `a` by complex number `b`.

    Division by a zero-magnitude divisor does not raise: the result is 0j.
    An infinite divisor (e.g. an open capacitor at DC) also returns 0j.
    """
    if not (math.isfinite(b.real) and math.isfinite(b.imag)):
        return 0j
    den = b.real * b.real + b.imag * b.imag
    if den == 0.0:
        return 0j
    if math.isinf(den):
        # |b|^2 overflows: scale both operands down first
        s = max(abs(b.real), abs(b.imag))
        return divide(complex(a.real / s, a.imag / s), complex(b.real / s, b.imag / s))
    return complex(
        (a.real * b.real + a.imag * b.imag) / den,
        (a.imag * b.real - a.real * b.imag) / den
    )


def conjugate(z: complex) -> complex:
    return complex(z.real, -z.imag)


def to_polar(z: complex) -> tuple[float, float]:
    """Returns (magnitude, angle_deg) with the angle in (-180°, 180°]."""
    magnitude = math.sqrt(z.real * z.real + z.imag * z.imag)
    angle_deg = math.degrees(math.atan2(z.imag, z.real))
    if angle_deg == -180.0:
        angle_deg = 180.0
    return magnitude, angle_deg


def from_polar(magnitude: float, angle_deg: float) -> complex:
    """Returns the complex number for a phasor (angle in degrees)."""
    rad = math.radians(angle_deg)
    return complex(magnitude * math.cos(rad), magnitude * math.sin(rad))


@dataclass(frozen=True)
class Phasor:
    value: complex

    @classmethod
    def from_polar(cls, magnitude: float, angle_deg: float) -> Phasor:
        return cls(from_polar(magnitude, angle_deg))

    @property
    def magnitude(self) -> float:
        return to_polar(self.value)[0]

    @property
    def mag(self) -> float:
        return self.magnitude

    @property
    def angle_deg(self) -> float:
        return to_polar(self.value)[1]

    @property
    def angle_rad(self) -> float:
        return math.radians(self.angle_deg)

    def __str__(self) -> str:
        return f"|{self.mag:.6g}| < {self.angle_deg:.6g}°"
