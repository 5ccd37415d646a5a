from __future__ import annotations
from typing import NamedTuple
import logging
import math

from .base import ImpedanceElement, InputMode
from .elements import RectangularImpedance, PolarImpedance, RLCImpedance
from ...misc.phasor import to_polar

__all__ = [
    "RLCValues",
    "ImpedanceViews",
    "derive_impedance",
    "deduce_rlc",
    "switch_mode",
    "impedance_views",
    "make_element"
]

logger = logging.getLogger(__name__)

_ELEMENT_TYPES: dict[InputMode, type[ImpedanceElement]] = {
    InputMode.RECTANGULAR: RectangularImpedance,
    InputMode.POLAR: PolarImpedance,
    InputMode.RLC: RLCImpedance,
}


class RLCValues(NamedTuple):
    r: float  # ohm
    l: float  # henry
    c: float  # farad


class ImpedanceViews(NamedTuple):
    """The same electrical value of an element in each input mode."""
    rectangular: RectangularImpedance
    polar: PolarImpedance
    rlc: RLCImpedance


def _as_mode(mode: InputMode | str) -> InputMode:
    try:
        return InputMode(mode)
    except ValueError:
        raise ValueError(
            f"Unknown input mode '{mode}'. "
            f"Must be one of: {', '.join(m.value for m in InputMode)}."
        ) from None


def derive_impedance(element: ImpedanceElement, f_hz: float) -> complex:
    """
    Returns the complex impedance of `element` at frequency `f_hz`.

    Only the fields of the element's own input mode are used. For an R-L-C
    element with a capacitor at 0 Hz the reactance is -inf.
    """
    return element.Z_f(f_hz)


def deduce_rlc(z: complex, f_hz: float) -> RLCValues:
    """
    Deduces R-L-C values that realise impedance `z` at frequency `f_hz`.

    A reactance has infinitely many R-L-C realisations; this returns the one
    with a single reactive component: an inductor for a positive reactance,
    a capacitor for a negative reactance. At 0 Hz, or for a purely resistive
    `z`, both L and C are 0.

    Parameters
    ----------
    z: complex
        Impedance in ohm.
    f_hz: float
        Frequency in Hz.

    Returns
    -------
    RLCValues
    """
    omega = 2 * math.pi * f_hz
    r = z.real
    l = 0.0
    c = 0.0
    if z.imag > 0 and omega > 0:
        l = z.imag / omega
    elif z.imag < 0 and omega > 0:
        den = omega * z.imag
        c = -1 / den if den != 0.0 else math.inf
    return RLCValues(r, l, c)


def _from_impedance(
    mode: InputMode,
    z: complex,
    f_hz: float,
    uid: str
) -> ImpedanceElement:
    if mode is InputMode.RECTANGULAR:
        return RectangularImpedance(z.real, z.imag, uid=uid)
    if mode is InputMode.POLAR:
        magnitude, angle = to_polar(z)
        return PolarImpedance(magnitude, angle, uid=uid)
    r, l, c = deduce_rlc(z, f_hz)
    return RLCImpedance(r, l, c, uid=uid)


def switch_mode(
    element: ImpedanceElement,
    mode: InputMode | str,
    f_hz: float
) -> ImpedanceElement:
    """
    Changes the input mode of `element` while keeping its electrical value.

    The impedance is derived at frequency `f_hz` in the current mode, and the
    fields of the target mode are recomputed from it. The returned element
    keeps the uid of `element`.

    Raises
    ------
    ValueError
        If `mode` is not a known input mode.
    """
    mode = _as_mode(mode)
    if mode is element.mode:
        return element
    z = derive_impedance(element, f_hz)
    logger.debug(
        "Element %s: %s -> %s at %g Hz (Z=%s)",
        element.uid, element.mode.value, mode.value, f_hz, z
    )
    return _from_impedance(mode, z, f_hz, element.uid)


def impedance_views(element: ImpedanceElement, f_hz: float) -> ImpedanceViews:
    z = derive_impedance(element, f_hz)
    return ImpedanceViews(*(
        element if element.mode is mode else _from_impedance(mode, z, f_hz, element.uid)
        for mode in (InputMode.RECTANGULAR, InputMode.POLAR, InputMode.RLC)
    ))


def make_element(mode: InputMode | str, **fields) -> ImpedanceElement:
    """
    Creates an element of the given input mode, e.g.
    `make_element("rlc", R=10.0, L=0.0318, C=0.0)`.
    """
    mode = _as_mode(mode)
    return _ELEMENT_TYPES[mode](**fields)
