from . import source, analysis, circuit
from .source import *
from .analysis import *
from .circuit import *

__all__ = source.__all__ + analysis.__all__ + circuit.__all__
