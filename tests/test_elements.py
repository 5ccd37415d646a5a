"""Tests for impedance elements, R-L-C deduction and input-mode switching."""

import dataclasses
import math

import pytest

from acseries import (
    InputMode,
    RectangularImpedance,
    PolarImpedance,
    RLCImpedance,
    derive_impedance,
    deduce_rlc,
    switch_mode,
    make_element,
)


def test_rectangular_impedance_is_verbatim():
    z = RectangularImpedance(3.0, -4.0)
    for f in [0.0, 50.0, 1e6]:
        assert derive_impedance(z, f) == 3 - 4j


def test_polar_impedance():
    z = PolarImpedance(10.0, 90.0)
    assert derive_impedance(z, 50.0) == pytest.approx(10j, abs=1e-12)
    z = PolarImpedance(14.142135623730951, 45.0)
    assert derive_impedance(z, 50.0) == pytest.approx(10 + 10j, abs=1e-9)


def test_rlc_inductor():
    z = derive_impedance(RLCImpedance(R=10.0, L=0.1, C=0.0), 50.0)
    assert z.real == 10.0
    assert z.imag == pytest.approx(2 * math.pi * 50.0 * 0.1)


def test_rlc_capacitor():
    z = derive_impedance(RLCImpedance(R=0.0, L=0.0, C=1e-3), 50.0)
    assert z.real == 0.0
    assert z.imag == pytest.approx(-1 / (2 * math.pi * 50.0 * 1e-3))


def test_rlc_series_resonance():
    # f0 = 1 / (2 pi sqrt(LC))
    L, C = 0.1, 1e-5
    f0 = 1 / (2 * math.pi * math.sqrt(L * C))
    z = derive_impedance(RLCImpedance(R=5.0, L=L, C=C), f0)
    assert z == pytest.approx(5 + 0j, abs=1e-9)


def test_rlc_capacitor_at_dc_is_open():
    z = derive_impedance(RLCImpedance(R=10.0, L=0.1, C=1e-6), 0.0)
    assert z.real == 10.0
    assert z.imag == -math.inf


def test_rlc_without_capacitor_at_dc():
    z = derive_impedance(RLCImpedance(R=10.0, L=0.1, C=0.0), 0.0)
    assert z == 10 + 0j


@pytest.mark.parametrize("fields", [
    dict(R=1.0, L=-1e-3, C=0.0),
    dict(R=1.0, L=0.0, C=-1e-6),
])
def test_rlc_rejects_negative_components(fields):
    with pytest.raises(ValueError):
        RLCImpedance(**fields)


def test_deduce_rlc_inductive():
    r, l, c = deduce_rlc(10 + 10j, 50.0)
    assert r == 10.0
    assert l == pytest.approx(10.0 / (2 * math.pi * 50.0))
    assert c == 0.0


def test_deduce_rlc_capacitive():
    r, l, c = deduce_rlc(5 - 20j, 60.0)
    assert r == 5.0
    assert l == 0.0
    assert c == pytest.approx(1 / (2 * math.pi * 60.0 * 20.0))
    assert c > 0.0


@pytest.mark.parametrize("z,f", [(10 + 10j, 0.0), (10 - 10j, 0.0), (10 + 0j, 50.0)])
def test_deduce_rlc_without_reactive_part(z, f):
    assert deduce_rlc(z, f) == (z.real, 0.0, 0.0)


ROUND_TRIP_VALUES = [(10.0, 10.0), (0.0, -20.0), (5.0, 0.0), (-3.0, 4.0), (0.5, -1e3)]


@pytest.mark.parametrize("R,X", ROUND_TRIP_VALUES)
@pytest.mark.parametrize("via", [InputMode.POLAR, InputMode.RLC])
def test_mode_switch_round_trip(R, X, via):
    f = 50.0
    elem = RectangularImpedance(R, X)
    other = switch_mode(elem, via, f)
    assert other.mode is via
    back = switch_mode(other, "rectangular", f)
    assert isinstance(back, RectangularImpedance)
    assert back.resistance == pytest.approx(R, abs=1e-9)
    assert back.reactance == pytest.approx(X, rel=1e-9, abs=1e-9)


def test_mode_switch_keeps_value_and_uid():
    elem = RLCImpedance(R=10.0, L=0.0318, C=0.0)
    polar = elem.to_mode(InputMode.POLAR, 50.0)
    assert polar.uid == elem.uid
    assert derive_impedance(polar, 50.0) == pytest.approx(derive_impedance(elem, 50.0), abs=1e-9)


def test_mode_switch_to_same_mode_is_identity():
    elem = PolarImpedance(5.0, 30.0)
    assert switch_mode(elem, "polar", 50.0) is elem


def test_mode_switch_unknown_mode():
    with pytest.raises(ValueError, match="Unknown input mode"):
        switch_mode(RectangularImpedance(1.0, 0.0), "admittance", 50.0)


def test_views():
    elem = RectangularImpedance(10.0, 10.0)
    views = elem.views(50.0)
    assert views.rectangular is elem
    assert views.polar.magnitude == pytest.approx(math.sqrt(200.0))
    assert views.polar.angle == pytest.approx(45.0)
    assert views.rlc.R == 10.0
    assert views.rlc.L == pytest.approx(10.0 / (2 * math.pi * 50.0))
    assert views.rlc.C == 0.0
    assert {v.uid for v in views} == {elem.uid}


def test_make_element():
    elem = make_element("rlc", R=10.0, L=0.0318, C=0.0)
    assert isinstance(elem, RLCImpedance)
    elem = make_element(InputMode.POLAR, magnitude=1.0, angle=0.0, uid="z1")
    assert isinstance(elem, PolarImpedance)
    assert elem.uid == "z1"
    with pytest.raises(ValueError):
        make_element("lcr", R=1.0)


def test_elements_are_immutable_values():
    elem = RectangularImpedance(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        elem.resistance = 3.0
    edited = elem.with_values(resistance=3.0)
    assert edited.uid == elem.uid
    assert edited.resistance == 3.0
    assert elem.resistance == 1.0
    assert RectangularImpedance(1.0, 2.0) != RectangularImpedance(1.0, 2.0)
    assert RectangularImpedance(1.0, 2.0, uid="a") == RectangularImpedance(1.0, 2.0, uid="a")


def test_element_str():
    assert str(RectangularImpedance(10.0, -5.0)) == "Z=10 - j5Ω"
    assert str(RLCImpedance(R=10.0, L=0.0318, C=0.0)) == "R=10Ω, L=31.8mH, C=0F"


def test_rlc_capacitor_with_underflowing_reactance_product():
    z = derive_impedance(RLCImpedance(R=1.0, L=0.0, C=5e-324), 1e-3)
    assert z.real == 1.0
    assert z.imag == -math.inf


def test_deduce_rlc_with_underflowing_reactance_product():
    r, l, c = deduce_rlc(1 - 1e-200j, 1e-200)
    assert r == 1.0
    assert l == 0.0
    assert c == math.inf
    # an infinite capacitance adds no reactance
    assert derive_impedance(RLCImpedance(R=r, L=l, C=c), 1e-200) == 1 + 0j
