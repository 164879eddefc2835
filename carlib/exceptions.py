"""Exceptions raised by carlib."""


class CarException(Exception):
    """Raised when an unknown error occurs."""

    def __init__(self, status):
        """Initialize exception"""
        super(CarException, self).__init__(status)
        self.status = status


class CarConfigException(CarException):
    """Raised when a Car is configured with invalid settings."""

    def __init__(self, status):
        """Initialize exception"""
        super(CarConfigException, self).__init__(status)
        self.status = status


class CarSpeedOverflowException(CarException):
    """Raised when an acceleration leaves the speed range under the 'raise' policy."""

    def __init__(self, status, speed=None, amount=None):
        """Initialize exception"""
        super(CarSpeedOverflowException, self).__init__(status)
        self.status = status
        self.speed = speed
        self.amount = amount
