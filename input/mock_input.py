# input/mock_input.py

from dataclasses import replace

from control.models import DriveInput

# arm, spin in place, drive an arc, stop
DEFAULT_SCRIPT = [
    (DriveInput(arm_event="arm"), 5),
    (DriveInput(turn=0.6, quick_turn=True), 50),
    (DriveInput(), 25),
    (DriveInput(throttle=0.6, turn=0.3), 100),
    (DriveInput(throttle=0.6, turn=-0.3, high_gear=True), 100),
    (DriveInput(), 25),
    (DriveInput(arm_event="disarm"), 1),
]


class ScriptedDriveInput:
    """
    Replays (DriveInput, ticks) pairs, one DriveInput per tick.
    An arm event is only emitted on the first tick of its step.
    """

    def __init__(self, script=None):
        self.script = list(script) if script is not None else list(DEFAULT_SCRIPT)

    def values(self):
        for drive_input, ticks in self.script:
            for i in range(ticks):
                if i == 0 or drive_input.arm_event is None:
                    yield drive_input
                else:
                    yield replace(drive_input, arm_event=None)
