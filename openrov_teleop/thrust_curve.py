"""
Thrust curves for the OpenROV thrusters.
Maps a desired thruster force to a normalized thrust fraction.
"""


class ThrustCurve:
    """
    Sign-asymmetric piecewise-linear thrust curve.

    Real propellers push harder forward than in reverse, so the curve uses a
    separate bollard pull for each direction:
    pct = f / forward_bollard_pull   for f > 0
    pct = f / reverse_bollard_pull   for f < 0
    pct = 0                          for f == 0

    No saturation is applied; values may exceed [-1, 1].
    """

    def __init__(self, forward_bollard_pull: float, reverse_bollard_pull: float):
        """
        Args:
            forward_bollard_pull: Maximum forward static thrust [N]
            reverse_bollard_pull: Maximum reverse static thrust [N] (positive)

        Raises:
            ValueError: If either bollard pull is not positive
        """
        if forward_bollard_pull <= 0 or reverse_bollard_pull <= 0:
            raise ValueError("Bollard pull must be positive")

        self.forward_bollard_pull = float(forward_bollard_pull)
        self.reverse_bollard_pull = float(reverse_bollard_pull)

    def __call__(self, force: float) -> float:
        """
        Args:
            force: Desired thruster force [N]

        Returns:
            Normalized thrust fraction
        """
        if force > 0:
            return force / self.forward_bollard_pull
        if force < 0:
            return force / self.reverse_bollard_pull
        return 0.0


# Graupner 2308.60, port and starboard: 1.5 kg forward, ~11 N reverse
GRAUPNER_2308_60 = ThrustCurve(forward_bollard_pull=14.7, reverse_bollard_pull=11.0)

# Graupner 2303.57, vertical: no test stand data, assumed symmetric
GRAUPNER_2303_57 = ThrustCurve(forward_bollard_pull=14.7, reverse_bollard_pull=14.7)
