"""Unit conversion module — single conversion point between UI and Core layers.

CRITICAL: All unit conversions MUST go through this module.

Internal (core) units:
    Length   : m
    Energy   : J
    Mass     : kg
    Time     : s
    Angle    : radian

UI units:
    Length   : Å
    Energy   : MeV
    Angle    : degree
    Scale    : px/m
"""

import math
from typing import NewType

from scipy import constants as sc

from rutherford.constants import RENDER_FILL_FRACTION, RENDER_HEIGHT_PX

# Type aliases for unit annotations
Joule = NewType('Joule', float)
Meter = NewType('Meter', float)
Kilogram = NewType('Kilogram', float)
Radian = NewType('Radian', float)

ELEMENTARY_CHARGE: float = sc.elementary_charge  # e [C]
VACUUM_PERMITTIVITY: float = sc.epsilon_0  # ε₀ [F/m]
ATOMIC_MASS_UNIT: float = sc.atomic_mass  # u [kg]
COULOMB_CONSTANT: float = 1.0 / (4.0 * math.pi * VACUUM_PERMITTIVITY)  # k [N·m²/C²]


# ---------------------------------------------------------------------------
# Energy conversions
# ---------------------------------------------------------------------------

def MeV_to_J(mev: float) -> Joule:
    """UI (MeV) → Core (J)."""
    return Joule(mev * 1e6 * ELEMENTARY_CHARGE)


def J_to_MeV(joule: float) -> float:
    """Core (J) → UI (MeV)."""
    return joule / (1e6 * ELEMENTARY_CHARGE)


# ---------------------------------------------------------------------------
# Length conversions
# ---------------------------------------------------------------------------

def angstrom_to_m(angstrom: float) -> Meter:
    """UI (Å) → Core (m)."""
    return Meter(angstrom * 1e-10)


def m_to_angstrom(m: float) -> float:
    """Core (m) → UI (Å)."""
    return m * 1e10


def to_si(energy_MeV: float, length_angstrom: float) -> tuple[Joule, Meter]:
    """Convert a (MeV, Å) pair from the UI to (J, m).

    NaN inputs propagate unchanged; this function never raises.
    """
    return MeV_to_J(energy_MeV), angstrom_to_m(length_angstrom)


# ---------------------------------------------------------------------------
# Mass conversions
# ---------------------------------------------------------------------------

def amu_to_kg(amu: float) -> Kilogram:
    """Atomic mass units → kg."""
    return Kilogram(amu * ATOMIC_MASS_UNIT)


# ---------------------------------------------------------------------------
# Angle conversions
# ---------------------------------------------------------------------------

def deg_to_rad(deg: float) -> Radian:
    """Degree → Radian."""
    return Radian(deg * (math.pi / 180.0))


def rad_to_deg(rad: float) -> float:
    """Radian → Degree."""
    return rad * (180.0 / math.pi)


# ---------------------------------------------------------------------------
# Render scale
# ---------------------------------------------------------------------------

def compute_scale(
    max_impact_parameter_m: float,
    render_height_px: float = RENDER_HEIGHT_PX,
    fill_fraction: float = RENDER_FILL_FRACTION,
) -> float:
    """Pixels per meter so that 2·b_max fills ``fill_fraction`` of the height.

    Args:
        max_impact_parameter_m: Maximum impact parameter [m].
        render_height_px: Vertical extent of the render surface [px].
        fill_fraction: Share of the height covered by the beam span.

    Returns:
        Scale [px/m]. ``math.inf`` for a zero span.
    """
    span_m = 2.0 * max_impact_parameter_m
    if span_m == 0.0:
        return math.inf
    return (render_height_px * fill_fraction) / span_m
