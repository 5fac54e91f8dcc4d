"""Unit conversion chain validation."""

import math

import pytest

from rutherford.core.units import (
    ATOMIC_MASS_UNIT, COULOMB_CONSTANT, ELEMENTARY_CHARGE,
    MeV_to_J, J_to_MeV,
    angstrom_to_m, m_to_angstrom,
    amu_to_kg, compute_scale,
    deg_to_rad, rad_to_deg,
    to_si,
)


class TestPhysicalConstants:
    def test_elementary_charge(self):
        assert ELEMENTARY_CHARGE == pytest.approx(1.602176634e-19)

    def test_coulomb_constant(self):
        assert COULOMB_CONSTANT == pytest.approx(8.98755e9, rel=1e-5)

    def test_atomic_mass_unit(self):
        assert ATOMIC_MASS_UNIT == pytest.approx(1.66053906660e-27, rel=1e-8)


class TestEnergyConversion:
    def test_MeV_to_J(self):
        assert MeV_to_J(1.0) == pytest.approx(1.602176634e-13)
        assert MeV_to_J(5.0) == pytest.approx(8.01088317e-13)
        assert MeV_to_J(0.0) == pytest.approx(0.0)

    def test_J_to_MeV(self):
        assert J_to_MeV(1.602176634e-13) == pytest.approx(1.0)

    def test_roundtrip(self):
        assert J_to_MeV(MeV_to_J(7.7)) == pytest.approx(7.7)


class TestLengthConversion:
    def test_angstrom_to_m(self):
        assert angstrom_to_m(1.0) == pytest.approx(1e-10)
        assert angstrom_to_m(0.0) == 0.0

    def test_m_to_angstrom(self):
        assert m_to_angstrom(2.5e-10) == pytest.approx(2.5)


class TestToSI:
    def test_pair(self):
        energy_J, length_m = to_si(5.0, 1.0)
        assert energy_J == pytest.approx(5.0 * 1e6 * 1.602176634e-19)
        assert length_m == pytest.approx(1e-10)

    def test_nan_propagates(self):
        energy_J, length_m = to_si(float("nan"), float("nan"))
        assert math.isnan(energy_J)
        assert math.isnan(length_m)


class TestMassAndAngle:
    def test_alpha_mass(self):
        assert amu_to_kg(4.0) == pytest.approx(6.6421562664e-27, rel=1e-8)

    def test_deg_rad(self):
        assert deg_to_rad(180.0) == pytest.approx(math.pi)
        assert rad_to_deg(math.pi / 2) == pytest.approx(90.0)


class TestComputeScale:
    def test_span_fills_ninety_percent(self):
        b_max = 1e-10
        ppm = compute_scale(b_max, render_height_px=520)
        assert 2 * b_max * ppm == pytest.approx(0.9 * 520)

    def test_inverse_in_b_max(self):
        assert compute_scale(2e-10) == pytest.approx(compute_scale(1e-10) / 2)

    def test_zero_span_is_infinite(self):
        assert compute_scale(0.0) == math.inf
