"""
acseries - steady-state analysis of series AC circuits.

Usage:
    from acseries import SeriesCircuit, CircuitSource, RLCImpedance, analyze_circuit
"""
from . import config, misc, steady_state
from .misc import *
from .steady_state import *

__version__ = "0.1.0"
__all__ = misc.__all__ + steady_state.__all__ + ["config", "__version__"]
