# input/keyboard_input.py

import sys
import termios
import tty
import select

from control.models import DriveInput


class KeyboardDriveInput:
    """
    Wheel-style driving from the terminal.

        w / s    throttle up / down
        a / d    turn left / right
        space    center both
        q        toggle quick-turn
        g        toggle gear
        Enter    arm
        Esc      disarm
    """

    def __init__(self, step=0.05, high_gear=False, stream=None):
        self.step = step
        self.throttle = 0.0
        self.turn = 0.0
        self.quick_turn = False
        self.high_gear = high_gear

        self.stream = stream or sys.stdin
        self.fd = self.stream.fileno()
        self.old_settings = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)

    def _read_key(self):
        if select.select([self.stream], [], [], 0)[0]:
            return self.stream.read(1)
        return None

    def apply_key(self, key):
        """Update held state from one key; return an arm event or None."""
        if key == "w":
            self.throttle += self.step
        elif key == "s":
            self.throttle -= self.step
        elif key == "a":
            self.turn -= self.step
        elif key == "d":
            self.turn += self.step
        elif key == " ":
            self.throttle = 0.0
            self.turn = 0.0
        elif key == "q":
            self.quick_turn = not self.quick_turn
            print(f"[KEY] Quick-turn: {'ON' if self.quick_turn else 'OFF'}")
        elif key == "g":
            self.high_gear = not self.high_gear
            print(f"[KEY] Gear: {'HIGH' if self.high_gear else 'LOW'}")
        elif key == "\r" or key == "\n":  # Enter
            return "arm"
        elif key == "\x1b":  # Esc
            return "disarm"

        self.throttle = max(-1.0, min(1.0, self.throttle))
        self.turn = max(-1.0, min(1.0, self.turn))
        return None

    def read(self) -> DriveInput:
        arm_event = self.apply_key(self._read_key())

        return DriveInput(
            throttle=self.throttle,
            turn=self.turn,
            quick_turn=self.quick_turn,
            high_gear=self.high_gear,
            arm_event=arm_event,
        )

    def close(self):
        termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
