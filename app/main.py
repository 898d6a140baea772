# app/main.py

import argparse
import os
import sys
import time

import config

from control.drive_controller import TankDriveController
from control.freezy_drive import FreezyDrive, FreezyDriveConfig
from control.models import DriveInput

from hardware.print_motor import PrintMotor

from input.mock_input import ScriptedDriveInput


# =========================================================
# Helpers
# =========================================================

def gamepad_available(device_path: str) -> bool:
    return bool(device_path) and os.path.exists(device_path)


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="FreezyDrive tank teleop")

    p.add_argument("--keyboard", action="store_true", help="Force keyboard input even without a gamepad.")
    p.add_argument("--dry-run", action="store_true", help="Replay a scripted drive; print motor outputs.")
    p.add_argument("--high-gear", action="store_true", default=config.START_IN_HIGH_GEAR)
    p.add_argument("--period", type=float, default=config.LOOP_PERIOD, help="Control tick in seconds.")

    args = p.parse_args(argv)
    if args.period <= 0:
        p.error("--period must be positive")
    return args


def build_motors(dry_run: bool):
    if dry_run:
        return PrintMotor("left"), PrintMotor("right")

    try:
        from hardware.motor import Motor, open_pca

        pca = open_pca(config.PCA_FREQUENCY)
        left = Motor(
            pca,
            channels=config.LEFT_MOTOR_CHANNELS,
            neutral_us=config.MOTOR_NEUTRAL_US,
            forward_us=config.MOTOR_FORWARD_US,
            reverse_us=config.MOTOR_REVERSE_US,
            invert=config.LEFT_MOTOR_INVERT,
            name="left",
        )
        right = Motor(
            pca,
            channels=config.RIGHT_MOTOR_CHANNELS,
            neutral_us=config.MOTOR_NEUTRAL_US,
            forward_us=config.MOTOR_FORWARD_US,
            reverse_us=config.MOTOR_REVERSE_US,
            invert=config.RIGHT_MOTOR_INVERT,
            name="right",
        )
        return left, right
    except Exception as e:
        print("[WARN] Motors not available, printing outputs instead:", e)
        return PrintMotor("left"), PrintMotor("right")


# =========================================================
# Main
# =========================================================

def main(argv=None):
    args = parse_args(argv)
    has_tty = sys.stdin.isatty()

    # =========================================================
    # Drive
    # =========================================================

    left, right = build_motors(args.dry_run)

    mixer = FreezyDrive(FreezyDriveConfig.from_module(config))
    drive = TankDriveController(mixer, left, right)

    # =========================================================
    # Inputs
    # =========================================================

    script = ScriptedDriveInput().values() if args.dry_run else None

    keyboard = None
    if not args.dry_run and (config.KEYBOARD_ENABLED or args.keyboard) and has_tty:
        from input.keyboard_input import KeyboardDriveInput

        keyboard = KeyboardDriveInput(step=config.KEYBOARD_STEP, high_gear=args.high_gear)
        print("[SYSTEM] Keyboard input enabled")
    else:
        print("[SYSTEM] Keyboard input disabled")

    gamepad = None
    gamepad_values = None
    last_gamepad_check = 0.0
    use_gamepad = config.GAMEPAD_ENABLED and not args.dry_run

    if not config.GAMEPAD_ENABLED:
        print("[SYSTEM] Gamepad disabled in config")

    print(f"[SYSTEM] Main loop started ({1.0 / args.period:.0f} Hz)")

    # =========================================================
    # Main loop
    # =========================================================

    last_log = 0.0
    next_tick = time.monotonic()

    try:
        while True:
            now = time.monotonic()

            drive_input = DriveInput(high_gear=args.high_gear)

            # -----------------------------------------------------
            # Gamepad hot-plug / reconnect
            # -----------------------------------------------------

            if use_gamepad:
                if gamepad is None and now - last_gamepad_check > config.GAMEPAD_RETRY_INTERVAL:
                    last_gamepad_check = now

                    if gamepad_available(config.GAMEPAD_DEVICE):
                        try:
                            from input.dualshock_input import DualShockInput

                            gamepad = DualShockInput(
                                config.GAMEPAD_DEVICE,
                                high_gear=args.high_gear,
                                poll_timeout=0.0,
                            )
                            gamepad_values = gamepad.values()
                            print("[SYSTEM] Gamepad connected")
                        except Exception as e:
                            print("[WARN] Failed to init gamepad:", e)

                elif gamepad is not None and not gamepad_available(config.GAMEPAD_DEVICE):
                    print("[WARN] Gamepad disconnected")
                    gamepad = None
                    gamepad_values = None
                    drive.disarm()

            # -----------------------------------------------------
            # Read
            # -----------------------------------------------------

            if script is not None:
                try:
                    drive_input = next(script)
                except StopIteration:
                    print("[SYSTEM] Script finished")
                    break

            if keyboard:
                kb_input = keyboard.read()
                if gamepad is None:
                    drive_input = kb_input
                elif kb_input.arm_event == "disarm":
                    drive.disarm()

            if gamepad_values is not None:
                try:
                    drive_input = next(gamepad_values)
                except StopIteration:
                    print("[WARN] Gamepad input stopped (device lost)")
                    gamepad = None
                    gamepad_values = None
                    drive.disarm()
                    drive_input = DriveInput(high_gear=args.high_gear)

            # -----------------------------------------------------
            # Apply
            # -----------------------------------------------------

            power = drive.update(drive_input)

            # -----------------------------------------------------
            # Debug
            # -----------------------------------------------------

            if now - last_log > config.DEBUG_LOG_INTERVAL:
                print(
                    f"[DRIVE] throttle={drive_input.throttle:+.2f} "
                    f"quick={drive_input.quick_turn} "
                    f"gear={'HIGH' if drive_input.high_gear else 'LOW'} "
                    f"left={power.left:+.2f} right={power.right:+.2f} "
                    f"armed={drive.armed}"
                )
                last_log = now

            # missed ticks are not made up
            next_tick += args.period
            delay = next_tick - time.monotonic()
            if delay > 0:
                time.sleep(delay)
            else:
                next_tick = time.monotonic()

    except KeyboardInterrupt:
        print("[SYSTEM] Keyboard interrupt")

    finally:
        print("[SYSTEM] Shutting down safely")

        drive.stop()
        left.stop()
        right.stop()

        if keyboard:
            keyboard.close()


if __name__ == "__main__":
    main()
