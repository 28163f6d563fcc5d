"""
rootserial: hardware serial of the physical storage device backing "/".
"""

from .errors import SerialResolutionError
from .resolvers import get_device_serial, resolve

__all__ = ["SerialResolutionError", "get_device_serial", "resolve"]
__version__ = "0.1.0"
