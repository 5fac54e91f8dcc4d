"""Simulation engine end-to-end tests.

Scenario A: 1000 alphas, 5 MeV, b_max = 1 Å, 18 bins, forward peaked.
Scenario B: b_max = 0, every particle backscattered into the last bin.
"""

import math

import numpy as np
import pytest

from rutherford.core.impact_sampler import ImpactSampler
from rutherford.core.simulation_engine import (
    InvalidParameterError,
    SimulationEngine,
    parse_parameters,
)
from rutherford.core.units import MeV_to_J, compute_scale
from rutherford.models.simulation import (
    DisplayTag,
    EngineConfig,
    SimulationParameters,
    SimulationResult,
)


def _engine(seed: int = 2024, config: EngineConfig | None = None) -> SimulationEngine:
    return SimulationEngine(config, ImpactSampler(np.random.default_rng(seed)))


def _params(
    n: int = 1000, energy_MeV: float = 5.0, b_max_m: float = 1e-10, bins: int = 18,
) -> SimulationParameters:
    return SimulationParameters(
        particle_count=n,
        beam_energy_J=MeV_to_J(energy_MeV),
        max_impact_parameter_m=b_max_m,
        bin_count=bins,
    )


@pytest.fixture(scope="module")
def scenario_a() -> SimulationResult:
    return _engine().run(_params())


@pytest.fixture(scope="module")
def scenario_b() -> SimulationResult:
    return _engine().run(_params(b_max_m=0.0))


class TestScenarioA:
    def test_particle_count(self, scenario_a: SimulationResult):
        assert scenario_a.particle_count == 1000
        assert scenario_a.parameters.particle_count == 1000

    def test_all_bins_present(self, scenario_a: SimulationResult):
        assert len(scenario_a.bins) == 18
        assert scenario_a.bins[0].lower_deg == 0.0
        assert scenario_a.bins[0].upper_deg == pytest.approx(10.0)
        assert scenario_a.bins[-1].upper_deg == pytest.approx(180.0)

    def test_simulated_counts_sum_exactly(self, scenario_a: SimulationResult):
        assert sum(b.simulated_count for b in scenario_a.bins) == 1000

    def test_expected_counts_sum(self, scenario_a: SimulationResult):
        total = sum(b.expected_count for b in scenario_a.bins)
        assert total == pytest.approx(1000.0, rel=1e-6)

    def test_forward_peaked(self, scenario_a: SimulationResult):
        assert scenario_a.bins[0].simulated_count > 500

    def test_backscatter_is_rare(self, scenario_a: SimulationResult):
        large = [p for p in scenario_a.particles if p.deflection_angle_rad > math.pi / 2]
        assert len(large) < 10

    def test_impact_parameters_in_range(self, scenario_a: SimulationResult):
        for p in scenario_a.particles:
            assert 0.0 <= p.impact_parameter_m <= 1e-10
            assert p.sign in (1, -1)

    def test_trajectory_lengths(self, scenario_a: SimulationResult):
        assert all(len(p.trajectory) == 144 for p in scenario_a.particles)

    def test_trajectory_starts_at_signed_height(self, scenario_a: SimulationResult):
        for p in scenario_a.particles[:50]:
            assert p.trajectory[0].y == pytest.approx(p.sign * p.impact_parameter_m)

    def test_display_tags(self, scenario_a: SimulationResult):
        for p in scenario_a.particles:
            large = abs(p.signed_deflection_rad) > 0.2
            assert (p.display_tag is DisplayTag.LARGE_ANGLE) == large

    def test_scale(self, scenario_a: SimulationResult):
        assert scenario_a.pixels_per_meter == pytest.approx(compute_scale(1e-10))

    def test_initial_speed(self, scenario_a: SimulationResult):
        assert scenario_a.initial_speed_m_s == pytest.approx(1.553e7, rel=0.005)


class TestScenarioB:
    def test_every_angle_is_pi(self, scenario_b: SimulationResult):
        for p in scenario_b.particles:
            assert p.impact_parameter_m == 0.0
            assert p.deflection_angle_rad == math.pi

    def test_all_counts_in_last_bin(self, scenario_b: SimulationResult):
        assert scenario_b.bins[-1].simulated_count == 1000
        assert all(b.simulated_count == 0 for b in scenario_b.bins[:-1])

    def test_all_tagged_large(self, scenario_b: SimulationResult):
        assert all(p.display_tag is DisplayTag.LARGE_ANGLE for p in scenario_b.particles)

    def test_infinite_scale(self, scenario_b: SimulationResult):
        assert scenario_b.pixels_per_meter == math.inf
        assert all(len(p.trajectory) == 144 for p in scenario_b.particles)


class TestDeterminism:
    def test_same_seed_same_result(self):
        r1 = _engine(seed=5).run(_params(n=300))
        r2 = _engine(seed=5).run(_params(n=300))
        assert [b.simulated_count for b in r1.bins] == [b.simulated_count for b in r2.bins]
        assert [p.deflection_angle_rad for p in r1.particles] == \
            [p.deflection_angle_rad for p in r2.particles]

    def test_each_run_is_a_new_result(self):
        engine = _engine(seed=5)
        r1 = engine.run(_params(n=200))
        r2 = engine.run(_params(n=200))
        assert r1 is not r2
        assert r1.particle_count == r2.particle_count == 200


class TestParticleCountFloor:
    @pytest.mark.parametrize("requested", [0, 1, 50, 99])
    def test_clamped_to_100(self, requested: int):
        result = _engine().run(_params(n=requested))
        assert result.particle_count == 100
        assert result.parameters.particle_count == 100
        assert sum(b.simulated_count for b in result.bins) == 100

    def test_custom_floor(self):
        result = _engine(config=EngineConfig(min_particle_count=10)).run(_params(n=12))
        assert result.particle_count == 12


class TestValidation:
    @pytest.mark.parametrize("energy", [0.0, -1.0, float("nan"), float("inf")])
    def test_bad_energy(self, energy: float):
        params = SimulationParameters(1000, energy, 1e-10, 18)
        with pytest.raises(InvalidParameterError):
            _engine().run(params)

    @pytest.mark.parametrize("b_max", [-1e-10, float("nan"), float("inf")])
    def test_bad_b_max(self, b_max: float):
        with pytest.raises(InvalidParameterError):
            _engine().run(_params(b_max_m=b_max))

    @pytest.mark.parametrize("bins", [0, -3])
    def test_bad_bin_count(self, bins: int):
        with pytest.raises(InvalidParameterError):
            _engine().run(_params(bins=bins))

    @pytest.mark.parametrize("count", [float("nan"), 150.0, "150", True])
    def test_non_integer_particle_count(self, count):
        with pytest.raises(InvalidParameterError):
            _engine().run(_params(n=count))

    @pytest.mark.parametrize("bins", [18.0, float("nan"), "18"])
    def test_non_integer_bin_count(self, bins):
        with pytest.raises(InvalidParameterError):
            _engine().run(_params(bins=bins))

    def test_numpy_integer_counts_accepted(self):
        result = _engine().run(_params(n=np.int64(120), bins=np.int32(9)))
        assert result.particle_count == 120
        assert len(result.bins) == 9

    def test_is_value_error(self):
        assert issubclass(InvalidParameterError, ValueError)


class TestExtremeEnergies:
    @pytest.mark.parametrize("energy_MeV", [1e-280, 1e280])
    def test_expected_counts_sum_to_n(self, energy_MeV: float):
        result = _engine().run(_params(n=100, energy_MeV=energy_MeV))
        assert sum(b.expected_count for b in result.bins) == pytest.approx(100.0, rel=1e-6)
        assert sum(b.simulated_count for b in result.bins) == 100


class TestConfigOverrides:
    def test_frame_counts(self):
        cfg = EngineConfig(pre_frame_count=4, post_frame_count=6)
        result = _engine(config=cfg).run(_params(n=100))
        assert all(len(p.trajectory) == 10 for p in result.particles)
        assert cfg.trajectory_length == 10

    def test_threshold(self):
        cfg = EngineConfig(large_angle_threshold_rad=10.0)
        result = _engine(config=cfg).run(_params(n=100, b_max_m=0.0))
        assert all(p.display_tag is DisplayTag.SMALL_ANGLE for p in result.particles)


class TestProgress:
    def test_reports_up_to_100(self):
        seen: list[int] = []
        _engine().run(_params(n=250), progress_callback=seen.append)
        assert seen[-1] == 100
        assert seen == sorted(seen)
        assert all(0 <= pct <= 100 for pct in seen)


class TestParseParameters:
    def test_valid_fields(self):
        params = parse_parameters("1000", "5", "1", "18")
        assert params.particle_count == 1000
        assert params.beam_energy_J == pytest.approx(MeV_to_J(5.0))
        assert params.max_impact_parameter_m == pytest.approx(1e-10)
        assert params.bin_count == 18

    def test_whitespace_and_exponent(self):
        params = parse_parameters(" 1e3 ", "5.0", "0.5", "36")
        assert params.particle_count == 1000
        assert params.max_impact_parameter_m == pytest.approx(5e-11)

    def test_count_not_clamped_at_parse(self):
        assert parse_parameters("20", "5", "1", "18").particle_count == 20

    @pytest.mark.parametrize("fields", [
        ("abc", "5", "1", "18"),
        ("", "5", "1", "18"),
        ("1000", "five", "1", "18"),
        ("1000", "5", "nan", "18"),
        ("1000", "5", "1", "eighteen"),
        ("12.5", "5", "1", "18"),
        ("1000", "5", "1", "2.5"),
    ])
    def test_malformed_input_fails_fast(self, fields):
        with pytest.raises(InvalidParameterError):
            parse_parameters(*fields)
