"""Tests for the time-to-speed integrator."""

import pytest

from traction_engine.core.acceleration import (
    SENTINEL_HIGH_SPEED,
    SENTINEL_LOW_SPEED,
    TIME_HORIZON,
    AccelerationResult,
    aerodynamic_drag_force,
    available_tractive_force,
    compute_time_to_speed,
    rolling_resistance_force,
    sentinel_time,
    simulate_acceleration,
    traction_ceiling,
)
from traction_engine.core.parameters import ParameterSet
from traction_engine.core.sweep import horsepower_grid

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _sample_params() -> ParameterSet:
    """1800 kg EV, dry performance asphalt, asphalt rolling resistance."""
    return ParameterSet(
        mass_kg=1800.0,
        friction_coefficient=1.0,
        rolling_resistance_coefficient=0.013,
    )


def _field_params() -> ParameterSet:
    """Same car on dry performance grip but field rolling resistance."""
    return ParameterSet(
        mass_kg=1800.0,
        friction_coefficient=1.0,
        rolling_resistance_coefficient=0.225,
    )


# ---------------------------------------------------------------------------
# Force terms
# ---------------------------------------------------------------------------


def test_rolling_resistance_force() -> None:
    """Rolling resistance = Cr * m * g."""
    assert rolling_resistance_force(_sample_params()) == pytest.approx(
        0.013 * 1800.0 * 9.81
    )


def test_drag_grows_with_square_of_speed() -> None:
    """Doubling speed must quadruple drag."""
    params = _sample_params()
    assert aerodynamic_drag_force(params, 0.0) == 0.0
    assert aerodynamic_drag_force(params, 20.0) == pytest.approx(
        4.0 * aerodynamic_drag_force(params, 10.0)
    )
    assert aerodynamic_drag_force(params, 10.0) == pytest.approx(
        0.5 * 1.225 * 0.23 * 2.2 * 100.0
    )


def test_tractive_force_floors_low_speed_denominator() -> None:
    """Below 5 m/s the source force is P / 5, never P / v."""
    power = 100_000.0
    assert available_tractive_force(power, 0.01) == pytest.approx(power / 5.0)
    assert available_tractive_force(power, 4.99) == pytest.approx(power / 5.0)
    assert available_tractive_force(power, 10.0) == pytest.approx(power / 10.0)


def test_tractive_force_constant_power_region() -> None:
    """At and above 15 m/s the source force is P / v."""
    power = 100_000.0
    assert available_tractive_force(power, 15.0) == pytest.approx(power / 15.0)
    assert available_tractive_force(power, 40.0) == pytest.approx(power / 40.0)


def test_traction_ceiling_launch_and_cruise() -> None:
    """Launch ceiling uses half mass with boosts; cruise uses full m*g*mu."""
    params = _sample_params()
    launch = traction_ceiling(params, 1.0)
    cruise = traction_ceiling(params, 5.0)
    assert launch == pytest.approx(1800.0 * 0.5 * 9.81 * 1.0 * 1.3 * 1.2)
    assert cruise == pytest.approx(1800.0 * 9.81 * 1.0)
    assert cruise > launch


def test_sentinel_time_by_target() -> None:
    """Targets of 200 km/h and above get 100 s; others get 30 s."""
    assert sentinel_time(100.0) == SENTINEL_LOW_SPEED == 30.0
    assert sentinel_time(199.9) == 30.0
    assert sentinel_time(200.0) == SENTINEL_HIGH_SPEED == 100.0
    assert sentinel_time(250.0) == 100.0


# ---------------------------------------------------------------------------
# Integrator scenarios
# ---------------------------------------------------------------------------


def test_performance_ev_0_100() -> None:
    """A 780 HP, 1800 kg EV must reach 100 km/h in 2.0-3.5 s."""
    t = compute_time_to_speed(_sample_params(), 780.0, 100.0)
    assert 2.0 <= t <= 3.5


def test_more_power_never_slower_at_high_output() -> None:
    """1020 HP must not be slower than 780 HP."""
    params = _sample_params()
    t_780 = compute_time_to_speed(params, 780.0, 100.0)
    t_1020 = compute_time_to_speed(params, 1020.0, 100.0)
    assert t_1020 <= t_780


def test_grip_limited_runs_flatten() -> None:
    """Once traction-limited over the whole run, extra power changes nothing."""
    params = _sample_params()
    assert compute_time_to_speed(params, 1500.0, 100.0) == compute_time_to_speed(
        params, 780.0, 100.0
    )


def test_power_limited_runs_improve_strictly() -> None:
    """In the power-limited regime more horsepower must be strictly faster."""
    params = _sample_params()
    t_200 = compute_time_to_speed(params, 200.0, 100.0)
    t_300 = compute_time_to_speed(params, 300.0, 100.0)
    assert t_300 < t_200


def test_result_rounded_to_tenth() -> None:
    """Achievable times must be rounded to one decimal place."""
    t = compute_time_to_speed(_sample_params(), 450.0, 100.0)
    assert t == round(t, 1)


@pytest.mark.parametrize("target", [100.0, 200.0])
def test_monotone_in_horsepower(target: float) -> None:
    """Time-to-speed must be non-increasing in horsepower on asphalt."""
    params = _sample_params()
    times = [
        compute_time_to_speed(params, float(hp), target) for hp in horsepower_grid()
    ]
    assert all(b <= a for a, b in zip(times, times[1:]))


@pytest.mark.parametrize("target", [100.0, 200.0])
def test_achievable_times_monotone_on_field(target: float) -> None:
    """Among runs that reach the target, more power is never slower."""
    params = _field_params()
    results = [
        simulate_acceleration(params, float(hp), target) for hp in horsepower_grid()
    ]
    times = [r.time_s for r in results if r.achievable]
    assert times, "expected at least one achievable run"
    assert all(b <= a for a, b in zip(times, times[1:]))


@pytest.mark.parametrize("params_fn", [_sample_params, _field_params])
def test_200_never_faster_than_100(params_fn) -> None:
    """Reaching 200 km/h can never take less time than reaching 100 km/h."""
    params = params_fn()
    for hp in horsepower_grid():
        t_100 = compute_time_to_speed(params, float(hp), 100.0)
        t_200 = compute_time_to_speed(params, float(hp), 200.0)
        assert t_200 >= t_100, f"hp={hp}: {t_200} < {t_100}"


def test_ice_is_very_slow() -> None:
    """On ice the collapsed grip ceiling must make any car very slow."""
    params = ParameterSet(1800.0, 0.1, 0.013)
    for hp in (300.0, 780.0, 1600.0):
        assert compute_time_to_speed(params, hp, 100.0) >= 20.0


def test_stall_returns_low_speed_sentinel() -> None:
    """A car that cannot overcome field resistance stalls at the 30 s sentinel."""
    result = simulate_acceleration(_field_params(), 50.0, 100.0)
    assert result.time_s == SENTINEL_LOW_SPEED
    assert result.achievable is False


def test_stall_returns_high_speed_sentinel() -> None:
    """The same stall against a 200 km/h target reports 100 s."""
    result = simulate_acceleration(_field_params(), 50.0, 200.0)
    assert result.time_s == SENTINEL_HIGH_SPEED
    assert result.achievable is False


def test_zero_power_is_not_achievable() -> None:
    """Zero horsepower must give the sentinel, not raise."""
    assert compute_time_to_speed(_sample_params(), 0.0, 100.0) == 30.0


def test_horizon_caps_slow_runs() -> None:
    """A run still accelerating after 100 s must return the horizon."""
    params = ParameterSet(1800.0, 0.03, 0.013)
    result = simulate_acceleration(params, 1000.0, 100.0)
    assert result.time_s == TIME_HORIZON
    assert result.achievable is False


def test_invalid_inputs_rejected() -> None:
    """Negative horsepower or a non-positive target must raise ValueError."""
    with pytest.raises(ValueError, match="horsepower"):
        compute_time_to_speed(_sample_params(), -1.0, 100.0)
    with pytest.raises(ValueError, match="target_speed_kmh"):
        compute_time_to_speed(_sample_params(), 500.0, 0.0)


def test_nan_inputs_rejected() -> None:
    """NaN horsepower or target must raise instead of returning 0.0 s."""
    nan = float("nan")
    with pytest.raises(ValueError, match="horsepower"):
        compute_time_to_speed(_sample_params(), nan, 100.0)
    with pytest.raises(ValueError, match="target_speed_kmh"):
        compute_time_to_speed(_sample_params(), 500.0, nan)
    with pytest.raises(ValueError, match="horsepower"):
        simulate_acceleration(_sample_params(), nan, 200.0)


def test_simulate_acceleration_matches_time() -> None:
    """simulate_acceleration must agree with compute_time_to_speed."""
    params = _sample_params()
    result = simulate_acceleration(params, 600.0, 200.0)
    assert isinstance(result, AccelerationResult)
    assert result.horsepower == 600.0
    assert result.target_speed_kmh == 200.0
    assert result.time_s == compute_time_to_speed(params, 600.0, 200.0)
    assert result.achievable is True


def test_time_to_speed_deterministic() -> None:
    """Identical inputs must produce bit-identical times."""
    params = _sample_params()
    assert compute_time_to_speed(params, 700.0, 200.0) == compute_time_to_speed(
        params, 700.0, 200.0
    )
