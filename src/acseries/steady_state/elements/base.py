from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar
import dataclasses
import math
import uuid


__all__ = ["InputMode", "ImpedanceElement", "new_uid"]


class InputMode(str, Enum):
    """Selects which representation of an impedance element is authoritative."""
    RECTANGULAR = "rectangular"
    POLAR = "polar"
    RLC = "rlc"


def new_uid() -> str:
    return uuid.uuid4().hex


class ImpedanceElement(ABC):
    """
    Abstract base for the impedance elements of a series circuit.

    Each concrete element holds only the fields of its own input mode. The
    attribute `uid` identifies the element within a circuit; it survives
    value edits and mode switches.
    """
    mode: ClassVar[InputMode]
    uid: str

    @abstractmethod
    def Z_jw(self, omega: float) -> complex:
        """Complex impedance at angular frequency omega (rad/s)."""
        raise NotImplementedError

    def Z_f(self, f_hz: float) -> complex:
        return self.Z_jw(2 * math.pi * f_hz)

    def with_values(self, **fields) -> ImpedanceElement:
        """Returns a copy of the element with some fields replaced (same uid)."""
        return dataclasses.replace(self, **fields)

    def to_mode(self, mode: InputMode | str, f_hz: float) -> ImpedanceElement:
        from .conversion import switch_mode
        return switch_mode(self, mode, f_hz)

    def views(self, f_hz: float):
        from .conversion import impedance_views
        return impedance_views(self, f_hz)
