# control/util.py

from typing import Optional


def clamp(value: float, min_value: float, max_value: Optional[float] = None) -> float:
    """
    clamp(v, m)       -> v limited to [-m, m]
    clamp(v, lo, hi)  -> v limited to [lo, hi]

    NaN passes through.
    """
    if max_value is None:
        return clamp(value, -min_value, min_value)
    if value > max_value:
        return max_value
    if value < min_value:
        return min_value
    return value


def apply_deadband(value: float, deadband: float) -> float:
    # values outside the band pass through as-is, no rescale from zero
    if abs(value) > abs(deadband):
        return value
    return 0.0
