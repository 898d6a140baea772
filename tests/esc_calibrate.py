import time

import config
from hardware.motor import Motor, open_pca

# Bench script, not a pytest module: run with the wheels off the ground.
pca = open_pca(config.PCA_FREQUENCY)
sides = [
    Motor(pca, channels=config.LEFT_MOTOR_CHANNELS, name="left"),
    Motor(pca, channels=config.RIGHT_MOTOR_CHANNELS, name="right"),
]


def set_all(us):
    for m in sides:
        m._set_us(us)


print("ESC CALIBRATION (both sides)")
print(f"1) FULL FORWARD ({config.MOTOR_FORWARD_US}us) for 3 s. Power the ESCs now.")
set_all(config.MOTOR_FORWARD_US)
time.sleep(3)

print(f"2) FULL REVERSE ({config.MOTOR_REVERSE_US}us) for 3 s.")
set_all(config.MOTOR_REVERSE_US)
time.sleep(3)

print(f"3) NEUTRAL ({config.MOTOR_NEUTRAL_US}us).")
set_all(config.MOTOR_NEUTRAL_US)
time.sleep(5)

for m in sides:
    m.stop()
pca.deinit()

print("Done. The ESCs should have armed (LED steady / mode changed).")
