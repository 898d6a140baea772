"""
FreezyDrive: "Cheesy Drive" (254) crossed with "Culver Drive" (33).

Turns operator axes into left/right percent outputs for a tank drivetrain.
Call exactly once per control tick; the mixer keeps three accumulators
between ticks (see DriveMixerState).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from control.models import DriveInput, DriveMixerState, MotorPowerPair
from control.util import apply_deadband, clamp


@dataclass(frozen=True)
class FreezyDriveConfig:
    throttle_deadband: float = 0.02
    magnitude_deadband: float = 0.02
    wheel_deadband: float = 0.02

    high_gear_wheel_non_linearity: float = 0.65
    low_gear_wheel_non_linearity: float = 0.65

    high_negative_inertia_scalar: float = 4.0

    low_negative_inertia_threshold: float = 0.65
    low_negative_turn_scalar: float = 3.5
    low_negative_inertia_close_scalar: float = 4.0
    low_negative_inertia_far_scalar: float = 5.0

    high_gear_sensitivity: float = 0.95
    low_gear_sensitivity: float = 1.3

    quickstop_deadband: float = 0.2
    quickstop_weight: float = 0.1
    quickstop_scalar: float = 5.0

    @classmethod
    def from_module(cls, module) -> "FreezyDriveConfig":
        """Build from the upper-case constants of a config module."""
        return cls(
            throttle_deadband=module.THROTTLE_DEADBAND,
            magnitude_deadband=module.MAGNITUDE_DEADBAND,
            wheel_deadband=module.WHEEL_DEADBAND,
            high_gear_wheel_non_linearity=module.HIGH_GEAR_WHEEL_NON_LINEARITY,
            low_gear_wheel_non_linearity=module.LOW_GEAR_WHEEL_NON_LINEARITY,
            high_negative_inertia_scalar=module.HIGH_NEGATIVE_INERTIA_SCALAR,
            low_negative_inertia_threshold=module.LOW_NEGATIVE_INERTIA_THRESHOLD,
            low_negative_turn_scalar=module.LOW_NEGATIVE_TURN_SCALAR,
            low_negative_inertia_close_scalar=module.LOW_NEGATIVE_INERTIA_CLOSE_SCALAR,
            low_negative_inertia_far_scalar=module.LOW_NEGATIVE_INERTIA_FAR_SCALAR,
            high_gear_sensitivity=module.HIGH_GEAR_SENSITIVITY,
            low_gear_sensitivity=module.LOW_GEAR_SENSITIVITY,
            quickstop_deadband=module.QUICKSTOP_DEAD_BAND,
            quickstop_weight=module.QUICKSTOP_WEIGHT,
            quickstop_scalar=module.QUICKSTOP_SCALAR,
        )


class FreezyDrive:
    def __init__(
        self,
        cfg: Optional[FreezyDriveConfig] = None,
        state: Optional[DriveMixerState] = None,
    ):
        self.cfg = cfg or FreezyDriveConfig()
        self.state = state if state is not None else DriveMixerState()

    def reset(self) -> None:
        self.state.reset()

    # ---------- entry points ----------

    def curvature_drive(
        self,
        throttle: float,
        wheel_x: float,
        wheel_y: float,
        is_quick_turn: bool,
        is_high_gear: bool,
    ) -> MotorPowerPair:
        """
        Two-axis stick as the steering wheel.

        The stick position is squared off into a magnitude, and its angle
        from straight ahead (-180..180 deg) scales that magnitude into a
        turn value.
        """
        # axes past sqrt(2) would make the radicand negative
        x_scale = math.sqrt(max(0.0, 2 - math.pow(wheel_x, 2.0)))
        y_scale = math.sqrt(max(0.0, 2 - math.pow(wheel_y, 2.0)))

        magnitude = math.sqrt(
            math.pow(abs(wheel_x * y_scale), 2.0)
            + math.pow(abs(wheel_y * x_scale), 2.0)
        ) / math.sqrt(2.0)
        magnitude = apply_deadband(magnitude, self.cfg.magnitude_deadband)

        angle = math.degrees(math.atan2(wheel_x, wheel_y))

        wheel = magnitude * (angle / 180.0)
        return self._mix(throttle, wheel, is_quick_turn, is_high_gear)

    def wheel_drive(
        self,
        throttle: float,
        wheel: float,
        is_quick_turn: bool,
        is_high_gear: bool,
    ) -> MotorPowerPair:
        """Single turn axis used directly as the steering wheel."""
        wheel = apply_deadband(wheel, self.cfg.wheel_deadband)
        return self._mix(throttle, wheel, is_quick_turn, is_high_gear)

    def drive(self, drive_input: DriveInput) -> MotorPowerPair:
        if drive_input.is_curvature:
            wheel_x = drive_input.wheel_x if drive_input.wheel_x is not None else 0.0
            return self.curvature_drive(
                drive_input.throttle,
                wheel_x,
                drive_input.wheel_y,
                drive_input.quick_turn,
                drive_input.high_gear,
            )
        return self.wheel_drive(
            drive_input.throttle,
            drive_input.turn,
            drive_input.quick_turn,
            drive_input.high_gear,
        )

    # ---------- shared core ----------

    def _shape_wheel(self, wheel: float, is_high_gear: bool) -> float:
        if is_high_gear:
            non_linearity = self.cfg.high_gear_wheel_non_linearity
            passes = 2
        else:
            non_linearity = self.cfg.low_gear_wheel_non_linearity
            passes = 3

        denominator = math.sin(math.pi / 2.0 * non_linearity)
        for _ in range(passes):
            wheel = math.sin(math.pi / 2.0 * non_linearity * wheel) / denominator
        return wheel

    def _mix(
        self,
        throttle: float,
        wheel: float,
        is_quick_turn: bool,
        is_high_gear: bool,
    ) -> MotorPowerPair:
        cfg = self.cfg
        st = self.state

        throttle = apply_deadband(throttle, cfg.throttle_deadband)
        throttle = math.pow(throttle, 3.0)

        # derivative is taken on the unshaped wheel
        negative_inertia = wheel - st.previous_turn_input
        st.previous_turn_input = wheel

        wheel = self._shape_wheel(wheel, is_high_gear)

        # Negative inertia
        if is_high_gear:
            neg_inertia_scalar = cfg.high_negative_inertia_scalar
            sensitivity = cfg.high_gear_sensitivity
        else:
            if wheel * negative_inertia > 0:
                # moving away from center
                neg_inertia_scalar = cfg.low_negative_turn_scalar
            elif abs(wheel) > cfg.low_negative_inertia_threshold:
                neg_inertia_scalar = cfg.low_negative_inertia_far_scalar
            else:
                neg_inertia_scalar = cfg.low_negative_inertia_close_scalar
            sensitivity = cfg.low_gear_sensitivity

        st.negative_inertia_accumulator += negative_inertia * neg_inertia_scalar
        wheel = wheel + st.negative_inertia_accumulator

        if st.negative_inertia_accumulator > 1:
            st.negative_inertia_accumulator -= 1.0
        elif st.negative_inertia_accumulator < -1:
            st.negative_inertia_accumulator += 1.0
        else:
            st.negative_inertia_accumulator = 0.0

        linear_power = throttle

        # Quickturn
        if is_quick_turn:
            if abs(linear_power) < cfg.quickstop_deadband:
                alpha = cfg.quickstop_weight
                st.quickstop_accumulator = (
                    (1 - alpha) * st.quickstop_accumulator
                    + alpha * clamp(wheel, 1.0) * cfg.quickstop_scalar
                )
            over_power = 1.0
            angular_power = wheel
        else:
            over_power = 0.0
            angular_power = abs(throttle) * wheel * sensitivity - st.quickstop_accumulator

            # upper threshold is 2, not 1
            if st.quickstop_accumulator > 2:
                st.quickstop_accumulator -= 1.0
            elif st.quickstop_accumulator < -1:
                st.quickstop_accumulator += 1.0
            else:
                st.quickstop_accumulator = 0.0

        left = linear_power + angular_power
        right = linear_power - angular_power

        # only the first side found out of range is corrected
        if left > 1.0:
            right -= over_power * (left - 1.0)
            left = 1.0
        elif right > 1.0:
            left -= over_power * (right - 1.0)
            right = 1.0
        elif left < -1.0:
            right += over_power * (-1.0 - left)
            left = -1.0
        elif right < -1.0:
            left += over_power * (-1.0 - right)
            right = -1.0

        # quick-turn push-through can still leave the other side out of range;
        # MotorPowerPair bounds both
        return MotorPowerPair(left, right)
