#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Car data model.
Holds a signed 32-bit speed that changes only through accelerate().
"""

from __future__ import annotations
import logging
from operator import index

from carlib.const import (
    SPEED_BITS,
    SPEED_MIN,
    SPEED_MAX,
    WRAP,
    SATURATE,
    RAISE,
    OVERFLOW_POLICIES,
    DEFAULT_OVERFLOW,
)
from carlib.exceptions import CarConfigException, CarSpeedOverflowException

_LOGGER = logging.getLogger(__name__)


class Car:
    """Car data model."""

    def __init__(self: Car, initial_speed: int, overflow: str = DEFAULT_OVERFLOW) -> None:
        """
        Init Car data model class

        Arguments:
            initial_speed: int, speed of the car when created
            overflow: str, what to do when speed leaves the 32-bit range,
                one of 'wrap' (default), 'saturate' or 'raise'
        """
        if overflow not in OVERFLOW_POLICIES:
            raise CarConfigException(
                f'Unknown overflow policy "{overflow}", expected one of {", ".join(OVERFLOW_POLICIES)}'
            )
        self._overflow = overflow
        self._speed = self._bound(index(initial_speed))
        _LOGGER.debug(f'Created car with speed {self._speed}')

    def __repr__(self) -> str:
        return f'{type(self).__name__}(speed={self._speed}, overflow={self._overflow!r})'

    def _bound(self, value: int) -> int:
        """Returns value brought into the speed range according to the overflow policy."""
        if SPEED_MIN <= value <= SPEED_MAX:
            return value
        if self._overflow == WRAP:
            span = 1 << SPEED_BITS
            bounded = (value - SPEED_MIN) % span + SPEED_MIN
            _LOGGER.warning(f'Speed {value} out of range, wrapped to {bounded}')
            return bounded
        if self._overflow == SATURATE:
            bounded = SPEED_MAX if value > SPEED_MAX else SPEED_MIN
            _LOGGER.warning(f'Speed {value} out of range, saturated to {bounded}')
            return bounded
        raise CarSpeedOverflowException(f'Speed {value} is outside [{SPEED_MIN}, {SPEED_MAX}]')

    def accelerate(self, amount: int) -> None:
        """
        Add amount to the current speed. Negative amounts slow the car down.

        Raises CarSpeedOverflowException under the 'raise' policy if the result
        is out of range, in which case the speed is left unchanged.
        """
        amount = index(amount)
        try:
            self._speed = self._bound(self._speed + amount)
        except CarSpeedOverflowException as error:
            raise CarSpeedOverflowException(error.status, speed=self._speed, amount=amount) from None
        _LOGGER.debug(f'Accelerated by {amount}, speed is now {self._speed}')

    def get_speed(self) -> int:
        """Return current speed."""
        return self._speed

    # Properties of class instance
    @property
    def speed(self) -> int:
        """Return current speed."""
        return self._speed

    @property
    def overflow(self) -> str:
        """Return overflow policy."""
        return self._overflow
