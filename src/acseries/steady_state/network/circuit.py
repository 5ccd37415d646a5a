from __future__ import annotations

import dataclasses
import logging
from typing import Iterator, Sequence

from ... import config
from ...misc.formatting import coerce_float
from ..elements.base import ImpedanceElement, InputMode
from ..elements.elements import RectangularImpedance
from ..elements.conversion import switch_mode
from .source import CircuitSource
from .analysis import CircuitAnalysis, analyze_circuit

__all__ = ["SeriesCircuit", "default_source", "default_element"]

logger = logging.getLogger(__name__)


def default_source() -> CircuitSource:
    return CircuitSource(config.DEFAULT_VOLTAGE_RMS, config.DEFAULT_FREQUENCY)


def default_element(initial: bool = False) -> RectangularImpedance:
    """
    Returns a new element with default values: the purely resistive element a
    new circuit starts with if `initial` is True, otherwise the element that
    is appended when the user adds one.
    """
    if initial:
        return RectangularImpedance(config.INITIAL_RESISTANCE, config.INITIAL_REACTANCE)
    return RectangularImpedance(config.DEFAULT_RESISTANCE, config.DEFAULT_REACTANCE)


class SeriesCircuit:
    """
    Represents a series circuit: an ordered collection of impedance elements
    fed by a voltage source.

    Elements are immutable; editing an element replaces it in the collection
    by a new element with the same uid. The circuit keeps no analysis state:
    `analyze()` solves the circuit from scratch.
    """
    def __init__(
        self,
        source: CircuitSource | None = None,
        elements: Sequence[ImpedanceElement] = ()
    ) -> None:
        self._source = source if source is not None else default_source()
        self._elements: list[ImpedanceElement] = []
        for elem in elements:
            self.add_element(elem)

    @classmethod
    def with_defaults(cls) -> SeriesCircuit:
        """Creates a circuit with the default source and one resistive element."""
        return cls(elements=[default_element(initial=True)])

    @property
    def source(self) -> CircuitSource:
        return self._source

    @property
    def elements(self) -> tuple[ImpedanceElement, ...]:
        return tuple(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[ImpedanceElement]:
        return iter(tuple(self._elements))

    def _index(self, uid: str) -> int:
        for k, elem in enumerate(self._elements):
            if elem.uid == uid:
                return k
        raise KeyError(f"Element '{uid}' not found in the circuit.")

    def element(self, uid: str) -> ImpedanceElement:
        return self._elements[self._index(uid)]

    def add_element(self, element: ImpedanceElement | None = None) -> ImpedanceElement:
        """
        Appends an element at the end of the series connection. If `element`
        is None, an element with default values is added.

        Raises
        ------
        ValueError
            If an element with the same uid is already in the circuit.
        """
        if element is None:
            element = default_element()
        if any(elem.uid == element.uid for elem in self._elements):
            raise ValueError(f"Element '{element.uid}' is already in the circuit.")
        self._elements.append(element)
        logger.debug("Added element %s (%s)", element.uid, element)
        return element

    def remove_element(self, uid: str) -> ImpedanceElement:
        elem = self._elements.pop(self._index(uid))
        logger.debug("Removed element %s", uid)
        return elem

    def update_element(self, uid: str, /, **fields) -> ImpedanceElement:
        """
        Replaces values of the element with the given uid, e.g.
        `circuit.update_element(uid, resistance="12.5")`. Values are coerced
        to float; input that is not a number becomes 0.0.

        Raises
        ------
        KeyError
            If no element has the given uid.
        ValueError
            If a field is not a value of the element's input mode, or is the
            uid itself.
        """
        if "uid" in fields:
            raise ValueError("The uid of an element cannot be changed.")
        k = self._index(uid)
        elem = self._elements[k]
        names = {f.name for f in dataclasses.fields(elem)}
        for name in fields:
            if name not in names:
                raise ValueError(
                    f"'{name}' is not a field of a {elem.mode.value} element."
                )
        values = {name: coerce_float(value) for name, value in fields.items()}
        elem = elem.with_values(**values)
        self._elements[k] = elem
        return elem

    def switch_mode(self, uid: str, mode: InputMode | str) -> ImpedanceElement:
        """
        Changes the input mode of an element, keeping its impedance at the
        frequency of the source.
        """
        k = self._index(uid)
        elem = switch_mode(self._elements[k], mode, self._source.f_hz)
        self._elements[k] = elem
        return elem

    def set_source(
        self,
        voltage_rms: str | float | None = None,
        f_hz: str | float | None = None
    ) -> CircuitSource:
        """Changes the source voltage and/or frequency. None keeps the current value."""
        self._source = CircuitSource(
            voltage_rms=self._source.voltage_rms if voltage_rms is None else coerce_float(voltage_rms),
            f_hz=self._source.f_hz if f_hz is None else coerce_float(f_hz)
        )
        return self._source

    def analyze(self) -> CircuitAnalysis | None:
        return analyze_circuit(self._elements, self._source)

    def __str__(self) -> str:
        lines = ["Series circuit:", f"  Source: {self._source}", "  Elements:"]
        for k, elem in enumerate(self._elements):
            lines.append(f"    - Z{k + 1} [{elem.mode.value}] {elem}")
        return "\n".join(lines)
