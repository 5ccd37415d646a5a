from __future__ import annotations
from dataclasses import dataclass
import math

from ...misc.formatting import format_value

__all__ = ["CircuitSource"]


@dataclass(frozen=True)
class CircuitSource:
    """
    Sinusoidal voltage source feeding the series circuit.

    Attributes
    ----------
    voltage_rms: float
        RMS voltage in volts. The source voltage is the phase reference (0°).
    f_hz: float
        Frequency in Hz. 0 Hz is allowed (DC).
    """
    voltage_rms: float
    f_hz: float

    def __post_init__(self) -> None:
        if self.voltage_rms < 0:
            raise ValueError("voltage_rms must be >= 0")
        if self.f_hz < 0:
            raise ValueError("f_hz must be >= 0")

    @property
    def omega(self) -> float:
        return 2 * math.pi * self.f_hz

    @property
    def voltage(self) -> complex:
        """Source voltage phasor."""
        return complex(self.voltage_rms, 0.0)

    def __str__(self) -> str:
        return f"{format_value(self.voltage_rms, 'V')} @ {format_value(self.f_hz, 'Hz')}"
