from . import base, elements, conversion
from .base import *
from .elements import *
from .conversion import *

__all__ = base.__all__ + elements.__all__ + conversion.__all__
