from . import elements, network
from .elements import *
from .network import *

__all__ = elements.__all__ + network.__all__
