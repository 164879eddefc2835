"""
carlib - A Python 3 library holding a Car with a speed that can be accelerated.
"""

import carlib.const as const
from carlib.car import Car
from carlib.exceptions import (
    CarException,
    CarConfigException,
    CarSpeedOverflowException,
)

from .__version__ import __version__

__all__ = [
    "Car",
    "CarException",
    "CarConfigException",
    "CarSpeedOverflowException",
    "const",
    "__version__",
]
