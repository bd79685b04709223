"""
Joystick-to-ESC pipeline.

Per joystick sample:
1. Input mapping     -> desired body wrench
2. Thrust allocation -> per-thruster force
3. Thrust curves     -> per-thruster thrust fraction
4. Saturation        -> uniform scale into [-1, 1]
5. Encoding          -> ESC pulse widths

The light/laser toggles run on the same sample. The latest motor command is
kept for a periodic publisher, which reads it without recomputing.
"""
import logging
import threading
from typing import NamedTuple, Optional

from openrov_teleop.command_encoder import NEUTRAL_COMMAND, MotorCommand, encode_command
from openrov_teleop.config import ConfigurationError, TeleopConfig
from openrov_teleop.input_mapper import JoystickSample, map_to_wrench, validate_sample
from openrov_teleop.saturation import limit_saturation
from openrov_teleop.thrust_allocator import BodyWrench, ThrustAllocator, ThrusterForces
from openrov_teleop.thrust_curve import GRAUPNER_2303_57, GRAUPNER_2308_60
from openrov_teleop.toggle_controller import ToggleController


class PipelineResult(NamedTuple):
    """Intermediate and final values for one processed sample."""
    wrench: BodyWrench
    forces: ThrusterForces
    fractions: tuple
    scale: float
    command: MotorCommand
    light: Optional[float]
    laser: Optional[int]


class AllocationPipeline:
    """
    Turns joystick samples into motor, light and laser commands.

    ``process`` is called from the input path and ``latest_command`` from the
    periodic publisher; the command slot is the only state they share.
    """

    def __init__(self, config: TeleopConfig = None, logger: logging.Logger = None):
        """
        Args:
            config: Teleop configuration (defaults if None)
            logger: Optional logger

        Raises:
            AllocationError: If config.thruster_offset makes the allocation singular
        """
        self.config = config or TeleopConfig()
        self.logger = logger or logging.getLogger(__name__)

        self.allocator = ThrustAllocator(thruster_offset=self.config.thruster_offset)
        self.port_curve = GRAUPNER_2308_60
        self.vertical_curve = GRAUPNER_2303_57
        self.starboard_curve = GRAUPNER_2308_60
        self.toggles = ToggleController(self.config, logger=self.logger)

        self._command = NEUTRAL_COMMAND
        self._command_lock = threading.Lock()

    def process(self, sample: JoystickSample) -> Optional[PipelineResult]:
        """
        Process one joystick sample.

        A sample that does not fit the configured channels is logged and
        dropped: the latest command and toggle states stay unchanged.

        Returns:
            PipelineResult, or None if the sample was dropped
        """
        try:
            validate_sample(sample, self.config)
            wrench = map_to_wrench(sample, self.config)
        except ConfigurationError as e:
            self.logger.warning(f"Dropping joystick sample: {e}")
            return None

        forces = self.allocator.allocate(wrench)
        fractions = (
            self.port_curve(forces.port),
            self.vertical_curve(forces.vertical),
            self.starboard_curve(forces.starboard),
        )

        scaled, scale = limit_saturation(fractions)
        if scale < 1.0:
            self.logger.debug(f"Thrusters saturated, scale factor: {scale:.3f}")

        command = encode_command(scaled)
        self.logger.debug(
            f"ESC vals: [{command.port}, {command.vertical}, {command.starboard}]"
        )

        with self._command_lock:
            self._command = command

        events = self.toggles.update(sample)

        return PipelineResult(
            wrench=wrench,
            forces=forces,
            fractions=fractions,
            scale=scale,
            command=command,
            light=events.light,
            laser=events.laser,
        )

    def latest_command(self) -> MotorCommand:
        """Most recent motor command (neutral until the first sample)."""
        with self._command_lock:
            return self._command
