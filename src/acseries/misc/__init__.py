from . import phasor, impedance, formatting
from .phasor import *
from .impedance import *
from .formatting import *

__all__ = phasor.__all__ + impedance.__all__ + formatting.__all__
