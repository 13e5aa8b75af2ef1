"""Time-to-speed integrator for the traction engine.

Integrates the longitudinal force balance from rest with an explicit
forward-Euler scheme at a fixed step:

    a = (min(F_source, F_grip) - F_rolling - F_drag) / mass

The power source is electric: constant torque below ``CONSTANT_POWER_SPEED``
(with the speed denominator floored at ``TORQUE_FLOOR_SPEED``), constant
power above.  Below ``LAUNCH_SPEED`` the grip ceiling uses the launch
model (half the mass, AWD and launch-control boosts); above it the plain
static-friction ceiling applies.

A run that stalls (acceleration at or below ``STALL_ACCELERATION``) or
exceeds ``TIME_HORIZON`` returns a sentinel time instead of raising, so
charts can plot it as an off-scale value.
"""

from __future__ import annotations

from dataclasses import dataclass

from traction_engine.core.parameters import G, WATTS_PER_HP, ParameterSet, kmh_to_ms

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TIME_STEP: float = 0.01  # s
INITIAL_SPEED: float = 0.01  # m/s, keeps P / v finite on the first step
TIME_HORIZON: float = 100.0  # s

LAUNCH_SPEED: float = 5.0  # m/s, upper bound of the launch phase
TORQUE_FLOOR_SPEED: float = 5.0  # m/s, denominator floor in the torque region
CONSTANT_POWER_SPEED: float = 15.0  # m/s, about 54 km/h
LAUNCH_WEIGHT_FRACTION: float = 0.5

STALL_ACCELERATION: float = 0.01  # m/s^2
HIGH_SPEED_TARGET_KMH: float = 200.0
SENTINEL_HIGH_SPEED: float = 100.0  # s, targets >= HIGH_SPEED_TARGET_KMH
SENTINEL_LOW_SPEED: float = 30.0  # s, all other targets


@dataclass(frozen=True)
class AccelerationResult:
    """Outcome of one time-to-speed run.

    Attributes:
        horsepower: Source rating in mechanical horsepower.
        target_speed_kmh: Target speed in km/h.
        time_s: Elapsed time rounded to 0.1 s, or a sentinel.
        achievable: ``False`` when ``time_s`` is a sentinel.
    """

    horsepower: float
    target_speed_kmh: float
    time_s: float
    achievable: bool


# ---------------------------------------------------------------------------
# Force terms
# ---------------------------------------------------------------------------


def rolling_resistance_force(params: ParameterSet) -> float:
    """Speed-independent rolling resistance in newtons."""
    return params.rolling_resistance_coefficient * params.mass_kg * G


def aerodynamic_drag_force(params: ParameterSet, speed_ms: float) -> float:
    """Aerodynamic drag in newtons at *speed_ms*."""
    return (
        0.5
        * params.air_density_kgm3
        * params.drag_coefficient
        * params.frontal_area_m2
        * speed_ms
        * speed_ms
    )


def available_tractive_force(power_watts: float, speed_ms: float) -> float:
    """Force the electric source can deliver at *speed_ms*, ignoring grip."""
    if speed_ms < CONSTANT_POWER_SPEED:
        return power_watts / max(speed_ms, TORQUE_FLOOR_SPEED)
    return power_watts / speed_ms


def traction_ceiling(params: ParameterSet, speed_ms: float) -> float:
    """Largest tractive force the tyres can transmit at *speed_ms*."""
    if speed_ms < LAUNCH_SPEED:
        return (
            params.mass_kg
            * LAUNCH_WEIGHT_FRACTION
            * G
            * params.friction_coefficient
            * params.awd_traction_boost
            * params.launch_boost_factor
        )
    return params.mass_kg * G * params.friction_coefficient


def sentinel_time(target_speed_kmh: float) -> float:
    """Return the "not achievable" time reported for *target_speed_kmh*."""
    if target_speed_kmh >= HIGH_SPEED_TARGET_KMH:
        return SENTINEL_HIGH_SPEED
    return SENTINEL_LOW_SPEED


# ---------------------------------------------------------------------------
# Integrator
# ---------------------------------------------------------------------------


def _integrate(
    params: ParameterSet,
    horsepower: float,
    target_speed_kmh: float,
) -> tuple[float, bool]:
    if not horsepower >= 0.0:
        raise ValueError("horsepower must be >= 0.")
    if not target_speed_kmh > 0.0:
        raise ValueError("target_speed_kmh must be > 0.")

    target_speed: float = kmh_to_ms(target_speed_kmh)
    power_watts: float = horsepower * WATTS_PER_HP * params.drivetrain_efficiency
    rolling: float = rolling_resistance_force(params)

    speed: float = INITIAL_SPEED
    time: float = 0.0

    while speed < target_speed:
        resistance: float = rolling + aerodynamic_drag_force(params, speed)
        tractive: float = min(
            available_tractive_force(power_watts, speed),
            traction_ceiling(params, speed),
        )
        acceleration: float = (tractive - resistance) / params.mass_kg

        if acceleration <= STALL_ACCELERATION:
            return sentinel_time(target_speed_kmh), False

        speed += acceleration * TIME_STEP
        time += TIME_STEP

        if time > TIME_HORIZON:
            return TIME_HORIZON, False

    return round(time, 1), True


def compute_time_to_speed(
    params: ParameterSet,
    horsepower: float,
    target_speed_kmh: float,
) -> float:
    """Time in seconds to reach *target_speed_kmh* from rest.

    Args:
        params: Vehicle and surface parameters.
        horsepower: Source rating in mechanical horsepower (>= 0).
        target_speed_kmh: Target speed in km/h (> 0).

    Returns:
        Elapsed time rounded to 0.1 s.  If the car stalls below the
        target the sentinel from :func:`sentinel_time` is returned; if the
        run exceeds ``TIME_HORIZON`` seconds, ``TIME_HORIZON`` is returned.

    Raises:
        ValueError: If horsepower < 0 or target_speed_kmh <= 0.
    """
    time_s, _ = _integrate(params, horsepower, target_speed_kmh)
    return time_s


def simulate_acceleration(
    params: ParameterSet,
    horsepower: float,
    target_speed_kmh: float,
) -> AccelerationResult:
    """Run :func:`compute_time_to_speed` and keep the achievability flag."""
    time_s, achievable = _integrate(params, horsepower, target_speed_kmh)
    return AccelerationResult(
        horsepower=float(horsepower),
        target_speed_kmh=float(target_speed_kmh),
        time_s=time_s,
        achievable=achievable,
    )
