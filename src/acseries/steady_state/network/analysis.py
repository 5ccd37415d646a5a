from __future__ import annotations

import math
import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..elements.base import ImpedanceElement
from ..elements.conversion import derive_impedance
from ...misc.phasor import divide, multiply, conjugate, to_polar
from ...misc.impedance import Impedance, ImpedancePower
from ...misc.formatting import format_complex
from .source import CircuitSource

__all__ = ["ElementResult", "CircuitAnalysis", "analyze_circuit"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementResult:
    """
    Voltage and power of one element of the series circuit.

    Attributes
    ----------
    uid: str
        Identity of the element.
    index: int
        Position of the element in the series connection (0-based).
    impedance: complex
        Complex impedance of the element at the source frequency (ohm).
    voltage: complex
        Voltage drop across the element (V, RMS phasor).
    voltage_rms: float
        Magnitude of the voltage drop.
    voltage_angle_deg: float
        Angle of the voltage drop with respect to the source voltage.
    phase_to_current_deg: float
        Angle of the voltage drop with respect to the series current.
    power: ImpedancePower
        Active, reactive, and apparent power taken by the element.
    """
    uid: str
    index: int
    impedance: complex
    voltage: complex
    voltage_rms: float
    voltage_angle_deg: float
    phase_to_current_deg: float
    power: ImpedancePower

    def __str__(self) -> str:
        return (
            f"Z{self.index + 1}: {format_complex(self.impedance, 'Ω')}  "
            f"U = {self.voltage_rms:.6g} V < {self.voltage_angle_deg:.4g}°  "
            f"P = {self.power.P:.6g} W, Q = {self.power.Q:.6g} VAR"
        )


@dataclass(frozen=True)
class CircuitAnalysis:
    """
    Steady-state solution of a series circuit.

    Attributes
    ----------
    source: CircuitSource
        The source the circuit was solved for.
    total_impedance: complex
        Series sum of all element impedances (ohm).
    total_current: complex
        Series current phasor (A, RMS); the source voltage is at 0°.
    current_rms: float
        Magnitude of the series current.
    current_angle_deg: float
        Angle of the series current.
    complex_power: complex
        S = U * conj(I) delivered by the source.
    active_power: float
        P in W.
    reactive_power: float
        Q in VAR; positive for an inductive (lagging) load.
    apparent_power: float
        |S| in VA.
    phase_diff_deg: float
        Phase angle phi of the voltage with respect to the current. Negative
        when the current leads the voltage (capacitive load).
    power_factor: float
        |cos(phi)|. See `lead_lag` for the sign.
    element_results: tuple[ElementResult, ...]
        Voltage and power of each element, in series order.
    is_short_circuit: bool
        True if the total impedance is zero. The current is then reported as
        0 A, not as an infinite current.
    is_open_circuit: bool
        True if the total impedance is infinite (a capacitor at 0 Hz).
    """
    source: CircuitSource
    total_impedance: complex
    total_current: complex
    current_rms: float
    current_angle_deg: float
    complex_power: complex
    active_power: float
    reactive_power: float
    apparent_power: float
    phase_diff_deg: float
    power_factor: float
    element_results: tuple[ElementResult, ...]
    is_short_circuit: bool = False
    is_open_circuit: bool = False

    @property
    def impedance(self) -> Impedance:
        return Impedance(self.total_impedance)

    @property
    def is_leading(self) -> bool:
        """The current leads the voltage (capacitive load)."""
        return self.phase_diff_deg < 0.0

    @property
    def is_lagging(self) -> bool:
        return not self.is_leading

    @property
    def lead_lag(self) -> str:
        return "leading" if self.is_leading else "lagging"

    def element_result(self, uid: str) -> ElementResult:
        for res in self.element_results:
            if res.uid == uid:
                return res
        raise KeyError(f"No element with uid '{uid}' in the analysis.")

    def __str__(self) -> str:
        Z = self.impedance
        lines: list[str] = [
            "Circuit analysis",
            f"  Source: {self.source}",
            f"  Z = {Z}  ({Z.mag:.6g} Ω < {Z.angle_deg:.4g}°)",
            f"  I = {self.current_rms:.6g} A < {self.current_angle_deg:.4g}°",
            f"  cos(phi) = {self.power_factor:.4g} ({self.lead_lag}), "
            f"phi = {self.phase_diff_deg:.4g}°",
            f"  P = {self.active_power:.6g} W",
            f"  Q = {self.reactive_power:.6g} VAR",
            f"  S = {self.apparent_power:.6g} VA",
        ]
        if self.is_short_circuit:
            lines.append("  ! short circuit: total impedance is zero")
        if self.is_open_circuit:
            lines.append("  ! open circuit: total impedance is infinite")
        lines.append("")
        lines.append("  Elements:")
        for res in self.element_results:
            lines.append(f"    {res}")
        return "\n".join(lines)


def _voltage_drops(
    z_values: np.ndarray,
    I: complex,
    U: complex,
    open_circuit: bool
) -> list[complex]:
    if not open_circuit:
        return [multiply(I, complex(z)) for z in z_values]
    # No current flows: the open elements take the whole source voltage.
    is_open = np.isinf(z_values)
    n_open = int(np.count_nonzero(is_open))
    return [U / n_open if op else 0j for op in is_open]


def analyze_circuit(
    elements: Sequence[ImpedanceElement],
    source: CircuitSource
) -> CircuitAnalysis | None:
    """
    Solves a series circuit of impedance elements fed by `source`.

    Parameters
    ----------
    elements: Sequence[ImpedanceElement]
        The elements connected in series, in circuit order.
    source: CircuitSource
        RMS voltage and frequency of the source.

    Returns
    -------
    CircuitAnalysis | None
        None if `elements` is empty.
    """
    if len(elements) == 0:
        return None

    z_values = np.array(
        [derive_impedance(elem, source.f_hz) for elem in elements],
        dtype=complex
    )
    Z_tot = complex(np.sum(z_values))
    U = source.voltage

    is_short = Z_tot == 0
    is_open = bool(np.any(np.isinf(z_values)))
    if is_short:
        logger.warning(
            "Total impedance is zero (short circuit); reporting zero current."
        )
    if is_open:
        logger.warning(
            "Total impedance is infinite at %g Hz (open circuit); "
            "no current flows.", source.f_hz
        )

    I = divide(U, Z_tot)
    I_mag, I_angle = to_polar(I)

    S = multiply(U, conjugate(I))
    P, Q = S.real, S.imag

    phi_deg = 0.0 - I_angle
    pf = abs(math.cos(math.radians(phi_deg)))

    results: list[ElementResult] = []
    drops = _voltage_drops(z_values, I, U, is_open)
    for k, (elem, z, v) in enumerate(zip(elements, z_values, drops)):
        v_mag, v_angle = to_polar(v)
        results.append(ElementResult(
            uid=elem.uid,
            index=k,
            impedance=complex(z),
            voltage=v,
            voltage_rms=v_mag,
            voltage_angle_deg=v_angle,
            phase_to_current_deg=v_angle - I_angle,
            power=ImpedancePower(U=v, I=I)
        ))

    logger.debug(
        "Analyzed %d element(s) at %s: Z=%s, I=%.6g A < %.4g°",
        len(elements), source, Z_tot, I_mag, I_angle
    )
    return CircuitAnalysis(
        source=source,
        total_impedance=Z_tot,
        total_current=I,
        current_rms=I_mag,
        current_angle_deg=I_angle,
        complex_power=S,
        active_power=P,
        reactive_power=Q,
        apparent_power=math.sqrt(P**2 + Q**2),
        phase_diff_deg=phi_deg,
        power_factor=pf,
        element_results=tuple(results),
        is_short_circuit=is_short,
        is_open_circuit=is_open
    )
