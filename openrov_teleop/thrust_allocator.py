"""
Thrust allocator for the three-thruster OpenROV.
Maps surge force, heave force and yaw torque to port/vertical/starboard thrust.
"""
from typing import NamedTuple

import numpy as np


class AllocationError(ValueError):
    """Raised when the allocation matrix is singular."""


class BodyWrench(NamedTuple):
    """Desired forces/torque in the body frame [N, N, N⋅m]."""
    fx: float
    fz: float
    mz: float


class ThrusterForces(NamedTuple):
    """Per-thruster force [N]."""
    port: float
    vertical: float
    starboard: float


class ThrustAllocator:
    """
    Allocates a body wrench to the port, vertical and starboard thrusters.

    Port and starboard sit a lateral offset d either side of the centre line
    and both push along surge; the vertical thruster only acts on heave:

        [fx]   [ 1  0  1] [T_port]
        [fz] = [ 0  1  0] [T_vert]
        [mz]   [-d  0  d] [T_stbd]

    Solving A·T = F in closed form:
    T_port = fx/2 - mz/(2d)
    T_vert = fz
    T_stbd = fx/2 + mz/(2d)
    """

    def __init__(self, thruster_offset: float = 0.045):
        """
        Initialize thrust allocator.

        Args:
            thruster_offset: Lateral distance of port/stbd thrusters from the centre line [m]

        Raises:
            AllocationError: If the offset makes the allocation matrix singular
        """
        if not np.isfinite(thruster_offset) or thruster_offset == 0:
            raise AllocationError(
                f"Allocation matrix is singular for thruster_offset={thruster_offset}"
            )

        self.d = float(thruster_offset)
        self.A = np.array([
            [1.0, 0.0, 1.0],
            [0.0, 1.0, 0.0],
            [-self.d, 0.0, self.d],
        ])

    def allocate(self, wrench: BodyWrench) -> ThrusterForces:
        """
        Allocate a body wrench to thruster forces.

        Args:
            wrench: Desired (fx, fz, mz) in body frame

        Returns:
            (T_port, T_vert, T_stbd): Thruster forces [N]
        """
        fx, fz, mz = wrench
        half_yaw = mz / (2.0 * self.d)

        return ThrusterForces(
            port=fx / 2.0 - half_yaw,
            vertical=float(fz),
            starboard=fx / 2.0 + half_yaw,
        )

    def wrench_from_forces(self, forces: ThrusterForces) -> BodyWrench:
        """Body wrench produced by a set of thruster forces (A·T)."""
        fx, fz, mz = self.A @ np.asarray(forces, dtype=float)
        return BodyWrench(float(fx), float(fz), float(mz))
