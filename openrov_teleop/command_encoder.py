"""
ESC pulse-width encoding.
1500 us is neutral, 1000/2000 us full reverse/forward.
"""
from typing import NamedTuple, Sequence

import numpy as np

PWM_NEUTRAL = 1500
PWM_HALF_RANGE = 500


class MotorCommand(NamedTuple):
    """Pulse widths [us] for the port, vertical and starboard ESCs."""
    port: int
    vertical: int
    starboard: int


NEUTRAL_COMMAND = MotorCommand(PWM_NEUTRAL, PWM_NEUTRAL, PWM_NEUTRAL)


def fraction_to_pulse_width(fraction: float) -> int:
    """
    Encode a scaled thrust fraction as an ESC pulse width.

    Args:
        fraction: Thrust fraction in [-1, 1]

    Returns:
        Pulse width in [1000, 2000] us
    """
    # round half away from zero
    offset = fraction * PWM_HALF_RANGE
    return PWM_NEUTRAL + int(np.sign(offset) * np.floor(abs(offset) + 0.5))


def encode_command(fractions: Sequence[float]) -> MotorCommand:
    """Encode (port, vert, stbd) fractions into a MotorCommand."""
    port, vertical, starboard = fractions
    return MotorCommand(
        fraction_to_pulse_width(port),
        fraction_to_pulse_width(vertical),
        fraction_to_pulse_width(starboard),
    )
