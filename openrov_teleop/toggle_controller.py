"""
Auxiliary outputs driven from the joystick: light dimmer and laser toggle.
"""
import logging
from typing import NamedTuple, Optional

import numpy as np

from openrov_teleop.config import TeleopConfig
from openrov_teleop.input_mapper import JoystickSample, read_axis, read_button

LASER_OFF = 0
LASER_ON = 255


class LightDimmer:
    """
    Light level accumulator in [0, 1].

    Each sample adds ``axis * step`` (step is negative so cross key right
    brightens); an update is reported only when the level changed.
    """

    def __init__(self, step: float = -0.1):
        self.step = step
        self.level = 0.0
        self.last_emitted = 0.0

    def update(self, adjust: float) -> Optional[float]:
        """
        Args:
            adjust: Dimmer axis value

        Returns:
            New light level if it changed since the last emission, else None
        """
        self.level = float(np.clip(self.level + adjust * self.step, 0.0, 1.0))

        if self.level != self.last_emitted:
            self.last_emitted = self.level
            return self.level
        return None


class LaserToggle:
    """
    Laser on/off (0 or 255), toggled once per button press.

    Holding the button does not re-toggle; it has to be released first.
    """

    def __init__(self):
        self.state = LASER_OFF
        self.last_emitted = LASER_OFF
        self._held = False

    def update(self, pressed: bool) -> Optional[int]:
        """
        Args:
            pressed: Current button state

        Returns:
            New laser state on a toggle, else None
        """
        toggled = None
        if pressed and not self._held and self.state == self.last_emitted:
            self.state = LASER_ON if self.state == LASER_OFF else LASER_OFF
            self.last_emitted = self.state
            toggled = self.state
        self._held = pressed
        return toggled


class ToggleEvents(NamedTuple):
    """Outputs changed by one sample; None means nothing to publish."""
    light: Optional[float]
    laser: Optional[int]


class ToggleController:
    """Runs the light dimmer and laser toggle on each joystick sample."""

    def __init__(self, config: TeleopConfig, logger: logging.Logger = None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.light = LightDimmer()
        self.laser = LaserToggle()

    def update(self, sample: JoystickSample) -> ToggleEvents:
        """
        Raises:
            ConfigurationError: If the dimmer axis or laser button is missing
        """
        adjust = read_axis(sample, self.config.light_adjust_button, 'light_adjust_button')
        pressed = read_button(sample, self.config.laser_toggle_button, 'laser_toggle_button')

        light = self.light.update(adjust)
        laser = self.laser.update(pressed)

        if light is not None:
            self.logger.info(f"Desired lights: {light:.2f}")
        if laser is not None:
            self.logger.info(f"Laser status: {laser}")

        return ToggleEvents(light, laser)
