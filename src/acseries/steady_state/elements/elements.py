from __future__ import annotations
from dataclasses import dataclass, field
import math

from .base import ImpedanceElement, InputMode, new_uid
from ...misc.phasor import from_polar
from ...misc.formatting import format_value

__all__ = ["RectangularImpedance", "PolarImpedance", "RLCImpedance"]


@dataclass(frozen=True)
class RectangularImpedance(ImpedanceElement):
    resistance: float  # ohm
    reactance: float  # ohm, < 0 capacitive, > 0 inductive
    uid: str = field(default_factory=new_uid)

    mode = InputMode.RECTANGULAR

    def Z_jw(self, omega: float) -> complex:
        return complex(self.resistance, self.reactance)

    def __str__(self) -> str:
        sign = "+" if self.reactance >= 0 else "-"
        return f"Z={self.resistance:g} {sign} j{abs(self.reactance):g}Ω"


@dataclass(frozen=True)
class PolarImpedance(ImpedanceElement):
    magnitude: float  # ohm
    angle: float  # degrees
    uid: str = field(default_factory=new_uid)

    mode = InputMode.POLAR

    def Z_jw(self, omega: float) -> complex:
        return from_polar(self.magnitude, self.angle)

    def __str__(self) -> str:
        return f"Z={format_value(self.magnitude, 'Ω')} < {self.angle:g}°"


@dataclass(frozen=True)
class RLCImpedance(ImpedanceElement):
    """
    Series connection of a resistor, an inductor and a capacitor.

    Attributes
    ----------
    R: float
        Resistance in ohm.
    L: float
        Inductance in henry (>= 0).
    C: float
        Capacitance in farad (>= 0). A value of 0 means that there is no
        capacitor: it then adds no reactance.
    """
    R: float
    L: float
    C: float
    uid: str = field(default_factory=new_uid)

    mode = InputMode.RLC

    def __post_init__(self) -> None:
        if self.L < 0:
            raise ValueError("L must be >= 0")
        if self.C < 0:
            raise ValueError("C must be >= 0")

    def X_L(self, omega: float) -> float:
        return omega * self.L

    def X_C(self, omega: float) -> float:
        if self.C <= 0.0:
            return 0.0
        den = omega * self.C
        if den == 0.0:
            # DC (or an underflowing product): the capacitor is an open circuit
            return math.inf
        return 1 / den

    def Z_jw(self, omega: float) -> complex:
        return complex(self.R, self.X_L(omega) - self.X_C(omega))

    def __str__(self) -> str:
        return (
            f"R={format_value(self.R, 'Ω')}, "
            f"L={format_value(self.L, 'H')}, "
            f"C={format_value(self.C, 'F')}"
        )
