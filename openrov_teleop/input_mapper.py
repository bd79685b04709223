"""
Joystick input mapping.
Interprets stick deflection as a desired body wrench (force/torque), not a twist.
"""
from typing import NamedTuple, Sequence, Tuple

from openrov_teleop.config import ConfigurationError, TeleopConfig
from openrov_teleop.thrust_allocator import BodyWrench


class JoystickSample(NamedTuple):
    """One joystick event: axis values (nominally [-1, 1]) and button states."""
    axes: Tuple[float, ...]
    buttons: Tuple[int, ...]

    @classmethod
    def capture(cls, axes: Sequence[float], buttons: Sequence[int]) -> 'JoystickSample':
        """Copy raw axis/button sequences into an immutable sample."""
        return cls(tuple(float(a) for a in axes), tuple(int(b) for b in buttons))


def read_axis(sample: JoystickSample, index: int, name: str) -> float:
    """
    Bounds-checked axis lookup.

    Raises:
        ConfigurationError: If ``index`` is outside the sample's axes
    """
    if not 0 <= index < len(sample.axes):
        raise ConfigurationError(
            f"{name}={index} out of range for sample with {len(sample.axes)} axes"
        )
    return sample.axes[index]


def read_button(sample: JoystickSample, index: int, name: str) -> bool:
    """
    Bounds-checked button lookup.

    Raises:
        ConfigurationError: If ``index`` is outside the sample's buttons
    """
    if not 0 <= index < len(sample.buttons):
        raise ConfigurationError(
            f"{name}={index} out of range for sample with {len(sample.buttons)} buttons"
        )
    return sample.buttons[index] != 0


def validate_sample(sample: JoystickSample, config: TeleopConfig) -> None:
    """
    Check that every channel the pipeline reads exists in the sample.

    Raises:
        ConfigurationError: If the sample is too short for the configuration
    """
    if len(sample.axes) < config.required_axes():
        raise ConfigurationError(
            f"Sample has {len(sample.axes)} axes, configuration needs {config.required_axes()}"
        )
    if len(sample.buttons) < config.required_buttons():
        raise ConfigurationError(
            f"Sample has {len(sample.buttons)} buttons, configuration needs {config.required_buttons()}"
        )


def map_to_wrench(sample: JoystickSample, config: TeleopConfig) -> BodyWrench:
    """
    Map joystick axes to a desired body wrench.

    Args:
        sample: Joystick sample
        config: Axis mapping and gains

    Returns:
        (fx, fz, mz) in body frame

    Raises:
        ConfigurationError: If a configured axis is missing from the sample
    """
    fx = config.forward_gain * read_axis(sample, config.forward_axis, 'forward_axis')
    fz = config.vertical_gain * read_axis(sample, config.vertical_axis, 'vertical_axis')
    mz = config.yaw_gain * read_axis(sample, config.yaw_axis, 'yaw_axis')
    return BodyWrench(fx, fz, mz)
