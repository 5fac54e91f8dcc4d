"""Trajectory generation tests."""

import math

import pytest

from rutherford.core.trajectory import (
    TrajectoryGenerator,
    initial_speed,
    start_position_x,
)
from rutherford.core.units import MeV_to_J, amu_to_kg

V0_5MEV = initial_speed(MeV_to_J(5.0), amu_to_kg(4.0))


@pytest.fixture(scope="module")
def gen() -> TrajectoryGenerator:
    return TrajectoryGenerator()


class TestInitialSpeed:
    def test_alpha_5MeV(self):
        """5 MeV alpha: v₀ ≈ 1.55e7 m/s."""
        assert V0_5MEV == pytest.approx(1.553e7, rel=0.005)

    def test_kinetic_energy_roundtrip(self):
        mass = amu_to_kg(4.0)
        assert 0.5 * mass * V0_5MEV ** 2 == pytest.approx(MeV_to_J(5.0))


class TestStartPosition:
    def test_left_of_target(self):
        assert start_position_x(2.34e12, render_width_px=900) == pytest.approx(
            -(450.0 / 2.34e12) * 0.8,
        )

    def test_infinite_scale(self):
        assert start_position_x(math.inf) == 0.0


class TestLength:
    @pytest.mark.parametrize("theta", [0.0, 0.1, -0.1, math.pi, -math.pi, 2.0])
    @pytest.mark.parametrize("sign", [1, -1])
    def test_fixed_length(self, gen: TrajectoryGenerator, theta: float, sign: int):
        traj = gen.generate(1e-11, sign, theta, -1e-10, V0_5MEV)
        assert len(traj) == 24 + 120
        assert gen.length == 144

    def test_custom_counts(self):
        traj = TrajectoryGenerator(5, 7, 1e-17).generate(1e-11, 1, 0.2, -1e-10, V0_5MEV)
        assert len(traj) == 12


class TestIncomingSegment:
    def test_constant_height(self, gen: TrajectoryGenerator):
        traj = gen.generate(3e-11, -1, -0.4, -1e-10, V0_5MEV)
        for pos in traj[:24]:
            assert pos.y == pytest.approx(-3e-11)

    def test_equal_steps_toward_target(self, gen: TrajectoryGenerator):
        traj = gen.generate(3e-11, 1, 0.4, -1.2e-10, V0_5MEV)
        xs = [p.x for p in traj[:24]]
        assert xs[0] == pytest.approx(-1.2e-10)
        for a, b in zip(xs, xs[1:]):
            assert b - a == pytest.approx(1.2e-10 / 24)
        assert xs[-1] < 0.0


class TestOutgoingSegment:
    def test_direction_and_step(self, gen: TrajectoryGenerator):
        theta = 0.7
        b = 2e-11
        traj = gen.generate(b, 1, theta, -1e-10, V0_5MEV)
        step = V0_5MEV * 1e-17
        first = traj[24]
        assert first.x == pytest.approx(step * math.cos(theta))
        assert first.y == pytest.approx(b + step * math.sin(theta))
        last = traj[-1]
        assert last.x == pytest.approx(120 * step * math.cos(theta))
        assert last.y == pytest.approx(b + 120 * step * math.sin(theta))

    def test_negative_side_deflects_down(self, gen: TrajectoryGenerator):
        traj = gen.generate(2e-11, -1, -0.7, -1e-10, V0_5MEV)
        assert traj[-1].y < traj[24].y < -2e-11

    def test_backscatter_moves_left(self, gen: TrajectoryGenerator):
        traj = gen.generate(0.0, 1, math.pi, -1e-10, V0_5MEV)
        assert traj[-1].x < 0.0
        assert traj[-1].y == pytest.approx(0.0, abs=1e-20)
