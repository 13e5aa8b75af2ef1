"""Traction power curve for the traction engine.

The maximum tractive force is a constant grip ceiling (not a torque
curve), so the power needed to stay at that ceiling grows linearly with
speed:

    F_max = mass * g * friction_coefficient * launch_boost_factor
    hp(v) = F_max * v / WATTS_PER_HP / drivetrain_efficiency

Below the curve a car is power-limited; above it, grip-limited.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from traction_engine.core.parameters import G, WATTS_PER_HP, ParameterSet, kmh_to_ms

SPEED_MAX_KMH: float = 200.0
SPEED_STEP_KMH: float = 5.0


@dataclass(frozen=True)
class PowerCurvePoint:
    """Horsepower needed to hold the traction limit at one speed.

    Attributes:
        speed_kmh: Road speed in km/h.
        horsepower_required: Source horsepower, rounded to the nearest
            integer.
    """

    speed_kmh: float
    horsepower_required: int


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def max_tractive_force(params: ParameterSet) -> float:
    """Return the grip-limited tractive force in newtons."""
    return (
        params.mass_kg
        * G
        * params.friction_coefficient
        * params.launch_boost_factor
    )


def compute_power_curve(
    params: ParameterSet,
    speed_max_kmh: float = SPEED_MAX_KMH,
    speed_step_kmh: float = SPEED_STEP_KMH,
) -> list[PowerCurvePoint]:
    """Compute the horsepower required to stay traction-limited.

    Speeds are sampled at ``speed_step_kmh, 2 * speed_step_kmh, ...`` up
    to and including ``speed_max_kmh``.

    Args:
        params: Vehicle and surface parameters.
        speed_max_kmh: Highest sampled speed in km/h.
        speed_step_kmh: Sampling interval in km/h (> 0).

    Returns:
        Points ordered by ascending speed.

    Raises:
        ValueError: If speed_step_kmh <= 0.
    """
    if not speed_step_kmh > 0.0:
        raise ValueError("speed_step_kmh must be > 0.")

    force: float = max_tractive_force(params)
    n_points: int = int(math.floor(speed_max_kmh / speed_step_kmh + 1e-9))

    curve: list[PowerCurvePoint] = []
    for i in range(1, n_points + 1):
        speed_kmh: float = i * speed_step_kmh
        power_watts: float = force * kmh_to_ms(speed_kmh)
        horsepower: float = power_watts / WATTS_PER_HP / params.drivetrain_efficiency
        curve.append(
            PowerCurvePoint(
                speed_kmh=speed_kmh,
                horsepower_required=_round_half_up(horsepower),
            )
        )
    return curve


def find_power_limited_speed(
    curve: list[PowerCurvePoint],
    horsepower: float,
) -> float | None:
    """Return the first speed at which *horsepower* no longer holds traction.

    Below the returned speed a car with this rating can spin its tyres;
    from it onward acceleration is limited by power.

    Returns:
        Speed in km/h, or ``None`` if the rating covers the whole curve.
    """
    for point in curve:
        if point.horsepower_required > horsepower:
            return point.speed_kmh
    return None
