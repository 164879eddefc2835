#!/usr/bin/env python3
# Simple script to drive a car
"""EXAMPLE"""
import logging
from carlib import Car, CarSpeedOverflowException, const


def main():
    """Main"""
    logging.basicConfig(level=logging.DEBUG)

    # Default policy wraps like a native 32-bit int
    car = Car(0)
    car.accelerate(10)
    print(f"Speed: {car.get_speed()}")
    print()

    # Speed may go negative, it is never clamped to zero
    car = Car(100)
    car.accelerate(-150)
    print(f"Speed: {car.speed}")
    print()

    # Saturate at the limits instead of wrapping
    car = Car(const.SPEED_MAX, overflow=const.SATURATE)
    car.accelerate(1)
    print(f"Speed: {car.speed}")
    print()

    # Refuse to leave the range
    car = Car(const.SPEED_MAX, overflow=const.RAISE)
    try:
        car.accelerate(1)
    except CarSpeedOverflowException as error:
        print(f"Refused: {error}")
    print(f"Speed: {car.speed}")


if __name__ == "__main__":
    main()
