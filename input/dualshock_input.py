from evdev import InputDevice, ecodes
from select import select

from control.models import DriveInput


class DualShockInput:
    """
    DualShock 4 input reader (Linux evdev), curvature style.

    Emits DriveInput (through generator values()):
        throttle        : left stick Y, up = +1.0
        wheel_x/wheel_y : right stick, up/right = +1.0
        quick_turn      : R1 held
        high_gear       : toggled by triangle
        arm_event       : X -> "arm", PS -> "disarm"
    """

    def __init__(self, device_path: str, high_gear: bool = False, poll_timeout: float = 0.02):
        print(f"[DS] Opening input device: {device_path}")

        # no grab: it breaks Bluetooth + systemd
        self.dev = InputDevice(device_path)
        self.poll_timeout = poll_timeout

        # --- state ---
        self.throttle = 0.0
        self.wheel_x = 0.0
        self.wheel_y = 0.0
        self.quick_turn = False
        self.high_gear = high_gear

        print(f"[DS] Connected: {self.dev.name}")

    # ---------- helpers ----------

    @staticmethod
    def _norm_axis(value: int, center=128, span=128) -> float:
        """
        ABS axis (0..255) -> -1.0 .. +1.0
        """
        return max(-1.0, min(1.0, (value - center) / span))

    def _handle(self, event):
        """Apply one evdev event to the held state; return an arm event or None."""
        if event.type == ecodes.EV_ABS:
            # stick Y axes read negative when pushed up
            if event.code == ecodes.ABS_Y:
                self.throttle = -self._norm_axis(event.value)

            elif event.code == ecodes.ABS_RX:
                self.wheel_x = self._norm_axis(event.value)

            elif event.code == ecodes.ABS_RY:
                self.wheel_y = -self._norm_axis(event.value)

        elif event.type == ecodes.EV_KEY:
            if event.code == ecodes.BTN_TR:
                self.quick_turn = event.value != 0
                return None

            # react on press only
            if event.value != 1:
                return None

            if event.code == ecodes.BTN_NORTH:
                self.high_gear = not self.high_gear
                print(f"[DS] Gear: {'HIGH' if self.high_gear else 'LOW'}")

            elif event.code == ecodes.BTN_SOUTH:
                return "arm"

            elif event.code == ecodes.BTN_MODE:
                return "disarm"

        return None

    # ---------- main generator ----------

    def values(self):
        """
        Generator of gamepad state, one DriveInput per poll.
        Cleanly stops if device disappears.
        """
        while True:
            arm_event = None

            try:
                r, _, _ = select([self.dev], [], [], self.poll_timeout)

                if r:
                    for event in self.dev.read():
                        ev = self._handle(event)
                        if ev is not None:
                            arm_event = ev

            except OSError as e:
                # Bluetooth device went away
                print(f"[WARN] Gamepad disconnected: {e}")
                return

            yield DriveInput(
                throttle=self.throttle,
                wheel_x=self.wheel_x,
                wheel_y=self.wheel_y,
                quick_turn=self.quick_turn,
                high_gear=self.high_gear,
                arm_event=arm_event,
            )
