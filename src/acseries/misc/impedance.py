from __future__ import annotations
import math

from dataclasses import dataclass

from .phasor import multiply, conjugate, to_polar
from .formatting import format_complex

__all__ = ["Impedance", "ImpedancePower"]


@dataclass(frozen=True)
class Impedance:
    """
    Wrapper class around a complex number that represents the impedance of
    a (series combination of) network element(s).

    Attributes
    ----------
    value: complex
        The complex number that represents an impedance. The real part is the
        resistance, the imaginary part is the reactance (positive for an
        inductive, negative for a capacitive impedance).
    """
    value: complex

    @property
    def R(self) -> float:
        return self.value.real

    @property
    def X(self) -> float:
        return self.value.imag

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

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.value.real) and math.isfinite(self.value.imag)

    @property
    def is_zero(self) -> bool:
        return self.value.real == 0.0 and self.value.imag == 0.0

    @property
    def is_inductive(self) -> bool:
        return self.X > 0.0

    @property
    def is_capacitive(self) -> bool:
        return self.X < 0.0

    @property
    def is_resistive(self) -> bool:
        return self.X == 0.0

    @property
    def cos_phi(self) -> float:
        return math.cos(self.angle_rad)

    @property
    def sin_phi(self) -> float:
        return math.sin(self.angle_rad)

    def __str__(self) -> str:
        return format_complex(self.value, "Ω")


@dataclass(frozen=True)
class ImpedancePower:
    """
    Power (apparent, active, and reactive) taken by an impedance, determined
    from the voltage phasor across the impedance and the current phasor
    through it.

    Attributes
    ----------
    U: complex
        Voltage phasor across the impedance (RMS).
    I: complex
        Current phasor through the impedance (RMS).
    """
    U: complex
    I: complex

    @property
    def apparent_power(self) -> complex:
        """Complex power S = U * conj(I)."""
        return multiply(self.U, conjugate(self.I))

    @property
    def active_power(self) -> float:
        return self.apparent_power.real

    @property
    def reactive_power(self) -> float:
        return self.apparent_power.imag

    @property
    def apparent_power_magnitude(self) -> float:
        return to_polar(self.apparent_power)[0]

    @property
    def S(self) -> complex:
        return self.apparent_power

    @property
    def P(self) -> float:
        return self.active_power

    @property
    def Q(self) -> float:
        return self.reactive_power
