"""Constants for carlib."""

# Speed is held as a 32-bit signed integer
SPEED_BITS = 32
SPEED_MIN = -(2 ** (SPEED_BITS - 1))
SPEED_MAX = 2 ** (SPEED_BITS - 1) - 1

# Overflow policies
WRAP = 'wrap'
SATURATE = 'saturate'
RAISE = 'raise'
OVERFLOW_POLICIES = (WRAP, SATURATE, RAISE)
DEFAULT_OVERFLOW = WRAP

# Demonstration driver
INITIAL_SPEED = 0
ACCELERATION = 10
SPEED_FORMAT = 'Speed: {speed}'
