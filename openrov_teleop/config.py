"""
Teleoperation configuration: joystick channel mapping, gains and vehicle geometry.

Joystick axis/button indices follow http://wiki.ros.org/joy.
"""
import math
from typing import Any, Dict, Mapping

import yaml


class ConfigurationError(ValueError):
    """Raised for invalid configuration or a sample that does not fit it."""


# ROS parameter name -> TeleopConfig argument
PARAMETER_NAMES = {
    'X_stick': 'forward_axis',
    'Z_stick': 'vertical_axis',
    'Yaw_stick': 'yaw_axis',
    'lights_adj': 'light_adjust_button',
    'laser_toggle': 'laser_toggle_button',
    'camera_tilt': 'camera_tilt_button',
    'x_gain': 'forward_gain',
    'z_gain': 'vertical_gain',
    'yaw_gain': 'yaw_gain',
    'thruster_offset': 'thruster_offset',
    'publish_period': 'publish_period',
}


def _index(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def _number(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite")
    return value


class TeleopConfig:
    """
    Teleop settings, loaded once at startup and treated as read-only.

    The light dimmer reads the cross key left/right, which the joy driver
    reports as an axis, so ``light_adjust_button`` indexes ``axes`` while
    ``laser_toggle_button`` indexes ``buttons``.
    ``camera_tilt_button`` is accepted but drives no output.
    """

    def __init__(
        self,
        forward_axis: int = 1,          # left stick up/down
        vertical_axis: int = 4,         # right stick up/down
        yaw_axis: int = 0,              # left stick left/right
        light_adjust_button: int = 6,   # cross key left/right
        laser_toggle_button: int = 4,
        camera_tilt_button: int = 7,    # cross key up/down
        forward_gain: float = 4.0,
        vertical_gain: float = 3.0,
        yaw_gain: float = 0.3,
        thruster_offset: float = 0.045,
        publish_period: float = 0.2,
    ):
        """
        Args:
            forward_axis: Joystick axis index for surge
            vertical_axis: Joystick axis index for heave
            yaw_axis: Joystick axis index for yaw
            light_adjust_button: Joystick axis index for the light dimmer
            laser_toggle_button: Joystick button index for the laser
            camera_tilt_button: Joystick index reserved for camera tilt
            forward_gain: Surge force per unit axis [N]
            vertical_gain: Heave force per unit axis [N]
            yaw_gain: Yaw torque per unit axis [N⋅m]
            thruster_offset: Port/stbd thruster distance from centre line [m]
            publish_period: Motor command re-publish period [s]

        Raises:
            ConfigurationError: If any value is invalid
        """
        self.forward_axis = _index('forward_axis', forward_axis)
        self.vertical_axis = _index('vertical_axis', vertical_axis)
        self.yaw_axis = _index('yaw_axis', yaw_axis)
        self.light_adjust_button = _index('light_adjust_button', light_adjust_button)
        self.laser_toggle_button = _index('laser_toggle_button', laser_toggle_button)
        self.camera_tilt_button = _index('camera_tilt_button', camera_tilt_button)

        self.forward_gain = _number('forward_gain', forward_gain)
        self.vertical_gain = _number('vertical_gain', vertical_gain)
        self.yaw_gain = _number('yaw_gain', yaw_gain)
        self.thruster_offset = _number('thruster_offset', thruster_offset)
        self.publish_period = _number('publish_period', publish_period)
        if self.publish_period <= 0:
            raise ConfigurationError("publish_period must be positive")

    def required_axes(self) -> int:
        """Minimum axes length a joystick sample must have."""
        return max(self.forward_axis, self.vertical_axis, self.yaw_axis,
                   self.light_adjust_button) + 1

    def required_buttons(self) -> int:
        """Minimum buttons length a joystick sample must have."""
        return self.laser_toggle_button + 1

    def as_dict(self) -> Dict[str, Any]:
        return dict(vars(self))

    def __eq__(self, other):
        return isinstance(other, TeleopConfig) and vars(self) == vars(other)

    def __repr__(self):
        fields = ', '.join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"TeleopConfig({fields})"

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, Any]) -> 'TeleopConfig':
        """Build a config from ROS parameter names (``X_stick``, ``x_gain``, ...)."""
        unknown = set(parameters) - set(PARAMETER_NAMES)
        if unknown:
            raise ConfigurationError(f"Unknown parameters: {sorted(unknown)}")
        return cls(**{PARAMETER_NAMES[name]: value for name, value in parameters.items()})


def load_config_from_yaml(yaml_path: str) -> TeleopConfig:
    """
    Load teleop configuration from a YAML file.

    Args:
        yaml_path: Path to YAML file with a ``teleop`` section

    Returns:
        TeleopConfig, with defaults for any missing keys

    Raises:
        ConfigurationError: On unknown keys or invalid values
    """
    with open(yaml_path, 'r') as f:
        config = yaml.safe_load(f) or {}

    settings = config.get('teleop', {})
    if not isinstance(settings, dict):
        raise ConfigurationError("'teleop' section must be a mapping")

    try:
        return TeleopConfig(**settings)
    except TypeError as e:
        raise ConfigurationError(f"Invalid teleop settings: {e}") from None
