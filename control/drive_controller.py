# control/drive_controller.py

from control.freezy_drive import FreezyDrive
from control.models import NEUTRAL, DriveInput, MotorPowerPair


class TankDriveController:
    """
    One FreezyDrive feeding two motor sides.

    left / right: anything with set_percent_output(value) and set_neutral().
    Motors stay neutral until armed.
    """

    def __init__(self, mixer: FreezyDrive, left, right):
        self.mixer = mixer
        self.left = left
        self.right = right
        self.armed = False
        self.last = NEUTRAL

    def arm(self):
        if not self.armed:
            print("[ARM] Drive armed")
        self.armed = True

    def disarm(self):
        if self.armed:
            print("[ARM] Drive disarmed")
        self.armed = False

        # re-arming starts the recurrence from rest
        self.mixer.reset()

    def update(self, drive_input: DriveInput) -> MotorPowerPair:
        if drive_input.arm_event == "arm":
            self.arm()
        elif drive_input.arm_event == "disarm":
            self.disarm()

        if not self.armed:
            self._neutral()
            return self.last

        self.last = self.mixer.drive(drive_input)
        self.left.set_percent_output(self.last.left)
        self.right.set_percent_output(self.last.right)
        return self.last

    def stop(self):
        self.disarm()
        self._neutral()

    def _neutral(self):
        self.left.set_neutral()
        self.right.set_neutral()
        self.last = NEUTRAL
