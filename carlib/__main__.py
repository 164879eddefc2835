#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Drive a car and print its speed."""
import logging
from sys import argv

from carlib.car import Car
from carlib.const import INITIAL_SPEED, ACCELERATION, SPEED_FORMAT

_LOGGER = logging.getLogger(__name__)


def main(args=None) -> int:
    """Main method."""
    args = argv[1:] if args is None else args
    if "-v" in args:
        logging.basicConfig(level=logging.INFO)
    elif "-vv" in args:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.ERROR)

    car = Car(INITIAL_SPEED)
    car.accelerate(ACCELERATION)
    _LOGGER.info(f'Final state {car!r}')
    print(SPEED_FORMAT.format(speed=car.get_speed()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
