# config.py

import sys

# ===== FreezyDrive =====
THROTTLE_DEADBAND = 0.02
MAGNITUDE_DEADBAND = 0.02
WHEEL_DEADBAND = 0.02

HIGH_GEAR_WHEEL_NON_LINEARITY = 0.65
LOW_GEAR_WHEEL_NON_LINEARITY = 0.65

HIGH_NEGATIVE_INERTIA_SCALAR = 4.0

LOW_NEGATIVE_INERTIA_THRESHOLD = 0.65
LOW_NEGATIVE_TURN_SCALAR = 3.5
LOW_NEGATIVE_INERTIA_CLOSE_SCALAR = 4.0
LOW_NEGATIVE_INERTIA_FAR_SCALAR = 5.0

HIGH_GEAR_SENSITIVITY = 0.95
LOW_GEAR_SENSITIVITY = 1.3

QUICKSTOP_DEAD_BAND = 0.2
QUICKSTOP_WEIGHT = 0.1
QUICKSTOP_SCALAR = 5.0

# Gear state at startup (triangle on the gamepad / "g" on the keyboard toggles)
START_IN_HIGH_GEAR = False


# ===== Motors (PCA9685, RC ESC) =====
PCA_FREQUENCY = 50

LEFT_MOTOR_CHANNELS = (1, 2)    # leader first, then followers
RIGHT_MOTOR_CHANNELS = (3, 4)

LEFT_MOTOR_INVERT = False
RIGHT_MOTOR_INVERT = True       # right side is mounted mirrored

MOTOR_NEUTRAL_US = 1500
MOTOR_FORWARD_US = 2000
MOTOR_REVERSE_US = 1000


# ===== Input =====
KEYBOARD_ENABLED = sys.stdin.isatty()
GAMEPAD_ENABLED = True

GAMEPAD_DEVICE = "/dev/input/event5"  # DualShock 4
GAMEPAD_RETRY_INTERVAL = 2.0          # seconds

KEYBOARD_STEP = 0.1


# ===== Loop =====
LOOP_PERIOD = 0.02      # 50 Hz
DEBUG_LOG_INTERVAL = 0.5
