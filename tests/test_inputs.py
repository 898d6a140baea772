from types import SimpleNamespace

import pytest
from evdev import ecodes

from control.models import DriveInput
from input.mock_input import DEFAULT_SCRIPT, ScriptedDriveInput


# ---------- scripted ----------

def test_script_expands_ticks():
    script = [(DriveInput(throttle=0.5), 3), (DriveInput(turn=0.2), 2)]
    values = list(ScriptedDriveInput(script).values())

    assert len(values) == 5
    assert [v.throttle for v in values] == [0.5, 0.5, 0.5, 0.0, 0.0]
    assert values[-1].turn == 0.2


def test_script_emits_arm_event_once():
    values = list(ScriptedDriveInput([(DriveInput(arm_event="arm"), 4)]).values())

    assert [v.arm_event for v in values] == ["arm", None, None, None]


def test_default_script_arms_then_disarms():
    values = list(ScriptedDriveInput().values())
    events = [v.arm_event for v in values if v.arm_event]

    assert events == ["arm", "disarm"]
    assert len(values) == sum(ticks for _, ticks in DEFAULT_SCRIPT)


# ---------- keyboard ----------

@pytest.fixture
def keyboard(monkeypatch):
    import input.keyboard_input as kb

    monkeypatch.setattr(kb.termios, "tcgetattr", lambda fd: [])
    monkeypatch.setattr(kb.tty, "setcbreak", lambda fd: None)

    stream = SimpleNamespace(fileno=lambda: 0)
    return kb.KeyboardDriveInput(step=0.1, stream=stream)


def test_keyboard_axes(keyboard):
    for key in "wwwddd":
        keyboard.apply_key(key)
    keyboard.apply_key("a")

    assert keyboard.throttle == pytest.approx(0.3)
    assert keyboard.turn == pytest.approx(0.2)

    keyboard.apply_key(" ")
    assert keyboard.throttle == 0.0
    assert keyboard.turn == 0.0


def test_keyboard_axes_saturate(keyboard):
    for _ in range(30):
        keyboard.apply_key("s")
    assert keyboard.throttle == -1.0


def test_keyboard_toggles_and_arming(keyboard):
    keyboard.apply_key("q")
    keyboard.apply_key("g")
    assert keyboard.quick_turn
    assert keyboard.high_gear

    assert keyboard.apply_key("\r") == "arm"
    assert keyboard.apply_key("\x1b") == "disarm"
    assert keyboard.apply_key(None) is None


def test_keyboard_read_is_wheel_style(keyboard, monkeypatch):
    monkeypatch.setattr(keyboard, "_read_key", lambda: "w")

    drive_input = keyboard.read()

    assert not drive_input.is_curvature
    assert drive_input.throttle == pytest.approx(0.1)


# ---------- gamepad ----------

@pytest.fixture
def dualshock(monkeypatch):
    import input.dualshock_input as ds

    monkeypatch.setattr(ds, "InputDevice", lambda path: SimpleNamespace(name="fake DS4"))
    return ds.DualShockInput("/dev/input/fake")


def test_gamepad_sticks(dualshock):
    dualshock._handle(SimpleNamespace(type=ecodes.EV_ABS, code=ecodes.ABS_Y, value=0))
    dualshock._handle(SimpleNamespace(type=ecodes.EV_ABS, code=ecodes.ABS_RX, value=192))
    dualshock._handle(SimpleNamespace(type=ecodes.EV_ABS, code=ecodes.ABS_RY, value=64))

    # stick up is positive
    assert dualshock.throttle == 1.0
    assert dualshock.wheel_x == 0.5
    assert dualshock.wheel_y == 0.5


def test_gamepad_buttons(dualshock):
    def key(code, value):
        return dualshock._handle(SimpleNamespace(type=ecodes.EV_KEY, code=code, value=value))

    key(ecodes.BTN_TR, 1)
    assert dualshock.quick_turn
    key(ecodes.BTN_TR, 0)
    assert not dualshock.quick_turn

    key(ecodes.BTN_NORTH, 1)
    key(ecodes.BTN_NORTH, 0)
    assert dualshock.high_gear

    assert key(ecodes.BTN_SOUTH, 1) == "arm"
    assert key(ecodes.BTN_SOUTH, 0) is None
    assert key(ecodes.BTN_MODE, 1) == "disarm"


def test_gamepad_arm_press_is_silent(dualshock, capsys):
    capsys.readouterr()

    dualshock._handle(SimpleNamespace(type=ecodes.EV_KEY, code=ecodes.BTN_SOUTH, value=1))
    dualshock._handle(SimpleNamespace(type=ecodes.EV_KEY, code=ecodes.BTN_MODE, value=1))

    # the drive controller reports arming
    assert "[ARM]" not in capsys.readouterr().out
