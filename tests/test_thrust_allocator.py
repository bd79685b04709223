"""
Tests for ThrustAllocator - three-thruster OpenROV allocation.
"""
import pytest
import numpy as np
from openrov_teleop.thrust_allocator import (
    AllocationError,
    BodyWrench,
    ThrustAllocator,
    ThrusterForces,
)


class TestThrustAllocatorInitialization:
    """Test ThrustAllocator initialization and parameter validation."""

    def test_default_initialization(self):
        """Test ThrustAllocator initializes with the OpenROV offset."""
        allocator = ThrustAllocator()
        assert allocator.d == 0.045

    def test_matrix_layout(self):
        """Test allocation matrix structure."""
        allocator = ThrustAllocator(thruster_offset=0.1)
        expected = np.array([
            [1.0, 0.0, 1.0],
            [0.0, 1.0, 0.0],
            [-0.1, 0.0, 0.1],
        ])
        assert np.allclose(allocator.A, expected)

    def test_matrix_full_rank(self):
        """Test matrix is invertible for nonzero offset."""
        allocator = ThrustAllocator(thruster_offset=0.045)
        assert np.linalg.matrix_rank(allocator.A) == 3

    def test_zero_offset_is_singular(self):
        """Test that a zero offset raises AllocationError."""
        with pytest.raises(AllocationError, match="singular"):
            ThrustAllocator(thruster_offset=0.0)

    def test_non_finite_offset(self):
        """Test that NaN/inf offsets are rejected."""
        with pytest.raises(AllocationError):
            ThrustAllocator(thruster_offset=float('nan'))
        with pytest.raises(AllocationError):
            ThrustAllocator(thruster_offset=float('inf'))

    def test_allocation_error_is_value_error(self):
        """Test AllocationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            ThrustAllocator(thruster_offset=0.0)


class TestThrustAllocation:
    """Test thrust allocation computation."""

    @pytest.fixture
    def allocator(self):
        """Create allocator for testing."""
        return ThrustAllocator(thruster_offset=0.045)

    def test_zero_input(self, allocator):
        """Test with zero wrench."""
        forces = allocator.allocate(BodyWrench(0.0, 0.0, 0.0))

        assert forces == ThrusterForces(0.0, 0.0, 0.0)

    def test_pure_surge(self, allocator):
        """Test pure surge splits evenly between port and starboard."""
        forces = allocator.allocate(BodyWrench(4.0, 0.0, 0.0))

        assert np.isclose(forces.port, 2.0)
        assert np.isclose(forces.starboard, 2.0)
        assert forces.vertical == 0.0

    def test_pure_heave(self, allocator):
        """Test heave goes only to the vertical thruster."""
        forces = allocator.allocate(BodyWrench(0.0, 3.0, 0.0))

        assert forces.port == 0.0
        assert forces.starboard == 0.0
        assert np.isclose(forces.vertical, 3.0)

    def test_pure_yaw_positive(self, allocator):
        """Test positive yaw torque drives starboard forward, port reverse."""
        forces = allocator.allocate(BodyWrench(0.0, 0.0, 0.3))

        assert forces.starboard > 0.0
        assert forces.port < 0.0
        assert np.isclose(forces.port, -forces.starboard)
        # mz = d * (T_stbd - T_port)
        assert np.isclose(0.045 * (forces.starboard - forces.port), 0.3)

    def test_pure_yaw_negative(self, allocator):
        """Test negative yaw torque drives port forward."""
        forces = allocator.allocate(BodyWrench(0.0, 0.0, -0.3))

        assert forces.port > forces.starboard

    def test_allocation_formulas(self, allocator):
        """Test explicit closed-form solution."""
        fx, fz, mz = 3.0, -1.5, 0.2
        d = allocator.d

        forces = allocator.allocate(BodyWrench(fx, fz, mz))

        assert np.isclose(forces.port, fx / 2.0 - mz / (2.0 * d))
        assert np.isclose(forces.vertical, fz)
        assert np.isclose(forces.starboard, fx / 2.0 + mz / (2.0 * d))

    def test_matches_matrix_inverse(self, allocator):
        """Test closed form agrees with numerical inversion."""
        wrench = BodyWrench(1.2, -0.7, 0.05)

        forces = allocator.allocate(wrench)
        expected = np.linalg.inv(allocator.A) @ np.array(wrench)

        assert np.allclose(forces, expected)


class TestPhysicalConsistency:
    """Test that allocated forces reproduce the requested wrench."""

    @pytest.mark.parametrize("offset", [0.045, 0.1, -0.2])
    @pytest.mark.parametrize("wrench", [
        (0.0, 0.0, 0.0),
        (4.0, 0.0, 0.0),
        (-4.0, 3.0, 0.3),
        (2.5, -3.0, -0.3),
        (100.0, 50.0, 10.0),
    ])
    def test_round_trip(self, offset, wrench):
        """Test A·T == F within floating tolerance."""
        allocator = ThrustAllocator(thruster_offset=offset)

        forces = allocator.allocate(BodyWrench(*wrench))
        reproduced = allocator.wrench_from_forces(forces)

        assert np.allclose(reproduced, wrench)

    def test_symmetry(self):
        """Test reversing yaw torque swaps port and starboard."""
        allocator = ThrustAllocator()

        f1 = allocator.allocate(BodyWrench(2.0, 0.0, 0.1))
        f2 = allocator.allocate(BodyWrench(2.0, 0.0, -0.1))

        assert np.isclose(f1.port, f2.starboard)
        assert np.isclose(f1.starboard, f2.port)

    def test_zero_torque_equal_thrusters(self):
        """Test zero torque gives equal port/starboard forces."""
        allocator = ThrustAllocator()

        for fx in [-4.0, -1.0, 0.0, 1.0, 4.0]:
            forces = allocator.allocate(BodyWrench(fx, 0.0, 0.0))
            assert np.isclose(forces.port, forces.starboard)
            assert np.isclose(forces.port, fx / 2.0)
