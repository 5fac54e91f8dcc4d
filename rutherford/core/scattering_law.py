"""Rutherford scattering law — deflection angle and cross-section.

Classical Coulomb scattering of a point projectile off a fixed nucleus.
All energies in J, lengths in m, angles in radians (core units).
"""

import math

from rutherford.constants import PROJECTILE_Z, TARGET_Z
from rutherford.core.units import COULOMB_CONSTANT, ELEMENTARY_CHARGE


class ScatteringLaw:
    """Analytical Rutherford scattering calculations.

    Args:
        projectile_z: Projectile charge number (2 for an alpha particle).
        target_z: Target nucleus charge number (79 for gold).
    """

    def __init__(self, projectile_z: int = PROJECTILE_Z, target_z: int = TARGET_Z) -> None:
        self.projectile_z = projectile_z
        self.target_z = target_z

    @property
    def coupling(self) -> float:
        """k·q₁·q₂ [J·m]."""
        q1 = self.projectile_z * ELEMENTARY_CHARGE
        q2 = self.target_z * ELEMENTARY_CHARGE
        return COULOMB_CONSTANT * q1 * q2

    def collision_diameter(self, energy_J: float) -> float:
        """Distance of closest approach in a head-on collision.

        d = k·q₁·q₂ / E

        Args:
            energy_J: Projectile kinetic energy [J].

        Returns:
            d [m].
        """
        return self.coupling / energy_J

    def deflection_angle(self, b_m: float, energy_J: float) -> float:
        """Unsigned deflection angle for a given impact parameter.

        θ = 2·atan(k·q₁·q₂ / (2·E·b))

        A zero impact parameter, or any input driving θ to a non-finite
        value, yields θ = π (head-on backscatter).

        Args:
            b_m: Impact parameter [m].
            energy_J: Projectile kinetic energy [J].

        Returns:
            θ [radian, 0..π].
        """
        denominator = 2.0 * energy_J * b_m
        if denominator == 0.0:
            return math.pi
        theta = 2.0 * math.atan(self.coupling / denominator)
        if not math.isfinite(theta):
            return math.pi
        return theta

    @staticmethod
    def signed_angle(theta_rad: float, sign: int) -> float:
        """Attach the transverse side to an unsigned angle."""
        return theta_rad if sign > 0 else -theta_rad

    def impact_parameter_for_angle(self, theta_rad: float, energy_J: float) -> float:
        """Inverse of the scattering law.

        b = (k·q₁·q₂ / (2·E)) · cot(θ/2)

        Args:
            theta_rad: Deflection angle [radian, 0..π].
            energy_J: Projectile kinetic energy [J].

        Returns:
            b [m]. ``math.inf`` at θ = 0.
        """
        tan_half = math.tan(theta_rad / 2.0)
        if tan_half == 0.0:
            return math.inf
        return self.coupling / (2.0 * energy_J) / tan_half

    @staticmethod
    def relative_cross_section(theta_rad: float) -> float:
        """Angular shape of dσ/dΩ, 1 / sin⁴(θ/2). 0.0 where sin(θ/2) <= 0."""
        sin_half = math.sin(theta_rad / 2.0)
        if sin_half <= 0.0:
            return 0.0
        quartic = sin_half ** 4
        if quartic == 0.0:
            return math.inf
        return 1.0 / quartic

    def differential_cross_section(self, theta_rad: float, energy_J: float) -> float:
        """Rutherford differential cross-section.

        dσ/dΩ = (k·q₁·q₂ / (4·E))² / sin⁴(θ/2)

        Args:
            theta_rad: Scattering angle [radian].
            energy_J: Projectile kinetic energy [J].

        Returns:
            dσ/dΩ [m²/sr]. 0.0 where sin(θ/2) <= 0; saturates to
            ``math.inf`` instead of raising at vanishing energy.
        """
        shape = self.relative_cross_section(theta_rad)
        if shape == 0.0:
            return 0.0
        root = self.coupling / (4.0 * energy_J)
        return root * root * shape
