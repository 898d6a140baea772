# hardware/print_motor.py


class PrintMotor:
    """
    Motor sink for --dry-run and benches without a PCA9685.
    Keeps the last commanded value and prints changes.
    """

    def __init__(self, name: str = "motor", verbose: bool = True):
        self.name = name
        self.verbose = verbose
        self.value = 0.0

    def _set(self, value: float):
        if self.verbose and abs(value - self.value) > 1e-3:
            print(f"[MOTOR] {self.name} {value:+.3f}")
        self.value = value

    def set_neutral(self):
        self._set(0.0)

    def set_percent_output(self, value: float):
        self._set(max(-1.0, min(1.0, value)))

    def stop(self):
        self.set_neutral()
