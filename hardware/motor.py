# hardware/motor.py
import board
import busio
from adafruit_pca9685 import PCA9685


def open_pca(frequency: int = 50) -> PCA9685:
    i2c = busio.I2C(board.SCL, board.SDA)
    pca = PCA9685(i2c)
    pca.frequency = frequency
    return pca


class Motor:
    """
    One drivetrain side: a leader ESC plus followers, all on the same PCA9685.
    Every channel gets the same pulse.
    """

    def __init__(
        self,
        pca: PCA9685,
        channels=(1,),
        neutral_us: int = 1500,
        forward_us: int = 2000,
        reverse_us: int = 1000,
        invert: bool = False,
        name: str = "motor",
    ):
        self.pca = pca
        self.chs = [pca.channels[c] for c in channels]

        self.neutral_us = neutral_us
        self.forward_us = forward_us
        self.reverse_us = reverse_us
        self.invert = invert
        self.name = name

        self._last_us = None
        self.set_neutral()

    def _set_us(self, us: int):
        us = int(us)
        duty = int(us * 65535 / 20000)
        for ch in self.chs:
            ch.duty_cycle = duty

        if us != self._last_us:
            print(f"[MOTOR] {self.name} {us} µs")
            self._last_us = us

    def set_neutral(self):
        self._set_us(self.neutral_us)

    def set_percent_output(self, value: float):
        value = max(-1.0, min(1.0, value))

        if self.invert:
            value = -value

        if abs(value) < 1e-6:
            self._set_us(self.neutral_us)
            return

        if value > 0:
            us = self.neutral_us + value * (self.forward_us - self.neutral_us)
        else:
            us = self.neutral_us + value * (self.neutral_us - self.reverse_us)

        self._set_us(us)

    def stop(self):
        self.set_neutral()
        for ch in self.chs:
            ch.duty_cycle = 0

