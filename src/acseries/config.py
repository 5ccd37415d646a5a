"""Default values used when a circuit or element is created without explicit values."""
from __future__ import annotations

# Source: RMS voltage [V] at 0° and frequency [Hz]
DEFAULT_VOLTAGE_RMS = 230.0
DEFAULT_FREQUENCY = 50.0

# First element of a new circuit: purely resistive 10 Ω
INITIAL_RESISTANCE = 10.0
INITIAL_REACTANCE = 0.0

# Element appended to an existing circuit: 10 + j10 Ω
DEFAULT_RESISTANCE = 10.0
DEFAULT_REACTANCE = 10.0
