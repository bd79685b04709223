"""
Thruster saturation handling.

The whole command vector is shrunk by one common factor instead of clipping
channels individually, so the ratio between thrusters (and with it the
heading authority) is kept at the cost of peak thrust. There is no per-axis
priority.
"""
from typing import Sequence, Tuple


def saturation_scale(fractions: Sequence[float]) -> float:
    """
    Scale factor that brings all thrust fractions back into [-1, 1].

    Args:
        fractions: Normalized thrust fractions (port, vert, stbd)

    Returns:
        1 / max(|min|, max) when saturated, otherwise exactly 1.0
    """
    max_val = max(fractions)
    min_val = min(fractions)

    if min_val < -1 or max_val > 1:
        return 1.0 / max(abs(min_val), max_val)
    return 1.0


def apply_scale(fractions: Sequence[float], scale: float) -> Tuple[float, ...]:
    """Multiply every fraction by the same scale."""
    return tuple(float(f) * scale for f in fractions)


def limit_saturation(fractions: Sequence[float]) -> Tuple[Tuple[float, ...], float]:
    """
    Scale fractions into [-1, 1] if any of them saturates.

    Returns:
        (scaled fractions, scale factor)
    """
    scale = saturation_scale(fractions)
    return apply_scale(fractions, scale), scale
