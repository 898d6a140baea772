from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from control.util import clamp


@dataclass(frozen=True)
class MotorPowerPair:
    # percent output per side, -1.0 .. +1.0
    left: float = 0.0
    right: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "left", clamp(self.left, 1.0))
        object.__setattr__(self, "right", clamp(self.right, 1.0))

    def as_tuple(self) -> Tuple[float, float]:
        return self.left, self.right


NEUTRAL = MotorPowerPair(0.0, 0.0)


@dataclass
class DriveMixerState:
    """
    Memory of one FreezyDrive between ticks.
    Written only by the mixer, once per tick.
    """

    previous_turn_input: float = 0.0
    quickstop_accumulator: float = 0.0
    negative_inertia_accumulator: float = 0.0

    def reset(self) -> None:
        self.previous_turn_input = 0.0
        self.quickstop_accumulator = 0.0
        self.negative_inertia_accumulator = 0.0


@dataclass(frozen=True)
class DriveInput:
    """
    One tick of operator input.

    Curvature style sets wheel_x / wheel_y (two-axis stick),
    wheel style sets turn (single axis).
    """

    throttle: float = 0.0
    turn: float = 0.0
    wheel_x: Optional[float] = None
    wheel_y: Optional[float] = None
    quick_turn: bool = False
    high_gear: bool = False

    # "arm" | "disarm" | None
    arm_event: Optional[str] = None

    @property
    def is_curvature(self) -> bool:
        return self.wheel_y is not None
