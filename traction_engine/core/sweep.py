"""Horsepower sweeps and summary insights for the traction engine.

Each sweep point is an independent call to the integrator, so the
results for a grid depend only on the parameter set and the grid.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from traction_engine.core.acceleration import AccelerationResult, simulate_acceleration
from traction_engine.core.parameters import G, ParameterSet
from traction_engine.core.power_curve import max_tractive_force

HP_MIN: float = 100.0
HP_MAX: float = 1600.0
HP_STEP: float = 50.0

TARGET_SPEEDS_KMH: tuple[float, float] = (100.0, 200.0)
HYPERCAR_TIME_S: float = 2.0

# ---------------------------------------------------------------------------
# Reference vehicles
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ReferenceVehicle:
    """Production car used as a comparison marker on the 0-100 chart.

    Attributes:
        name: Display name.
        horsepower: Approximate system output in horsepower.
        advertised_0_100_s: Manufacturer-quoted 0-100 km/h time.
    """

    name: str
    horsepower: float
    advertised_0_100_s: float

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Reference vehicle name must be non-empty.")
        if not self.horsepower > 0.0:
            raise ValueError("horsepower must be > 0.")
        if not self.advertised_0_100_s > 0.0:
            raise ValueError("advertised_0_100_s must be > 0.")


@dataclass(frozen=True)
class PerformanceInsights:
    """Headline figures for one parameter set.

    Attributes:
        max_tractive_force_n: Grip-limited tractive force in newtons.
        max_acceleration_ms2: ``max_tractive_force_n / mass``.
        max_acceleration_g: Same, in multiples of g.
        reference_times: Modelled 0-100 km/h time per reference vehicle.
        horsepower_for_hypercar_time: Lowest sweep horsepower reaching
            100 km/h within ``HYPERCAR_TIME_S``, or ``None``.
    """

    max_tractive_force_n: float
    max_acceleration_ms2: float
    max_acceleration_g: float
    reference_times: dict[str, float]
    horsepower_for_hypercar_time: float | None


# ---------------------------------------------------------------------------
# Sweeps
# ---------------------------------------------------------------------------


def horsepower_grid(
    start: float = HP_MIN,
    stop: float = HP_MAX,
    step: float = HP_STEP,
) -> NDArray[np.float64]:
    """Return horsepower levels from *start* to *stop* inclusive.

    Raises:
        ValueError: If step <= 0 or stop < start.
    """
    if not step > 0.0:
        raise ValueError("step must be > 0.")
    if not stop >= start:
        raise ValueError("stop must be >= start.")
    n_points: int = int(np.floor((stop - start) / step + 1e-9)) + 1
    return start + step * np.arange(n_points, dtype=np.float64)


def compute_acceleration_sweep(
    params: ParameterSet,
    target_speed_kmh: float,
    horsepower: NDArray[np.float64] | list[float] | None = None,
) -> list[AccelerationResult]:
    """Time-to-speed for every horsepower level in *horsepower*.

    Args:
        params: Vehicle and surface parameters.
        target_speed_kmh: Target speed in km/h.
        horsepower: Levels to evaluate.  Defaults to
            :func:`horsepower_grid`.

    Returns:
        One result per level, in the order given.
    """
    levels = horsepower_grid() if horsepower is None else horsepower
    return [
        simulate_acceleration(params, float(hp), target_speed_kmh) for hp in levels
    ]


def find_horsepower_for_time(
    results: list[AccelerationResult],
    max_time_s: float,
) -> float | None:
    """Return the first horsepower whose time is within *max_time_s*."""
    for result in results:
        if result.achievable and result.time_s <= max_time_s:
            return result.horsepower
    return None


def compute_insights(
    params: ParameterSet,
    reference_vehicles: tuple[ReferenceVehicle, ...],
) -> PerformanceInsights:
    """Summarise grip and 0-100 km/h performance for *params*."""
    force: float = max_tractive_force(params)
    accel: float = force / params.mass_kg

    reference_times: dict[str, float] = {
        vehicle.name: simulate_acceleration(
            params, vehicle.horsepower, TARGET_SPEEDS_KMH[0]
        ).time_s
        for vehicle in reference_vehicles
    }

    sweep_100 = compute_acceleration_sweep(params, TARGET_SPEEDS_KMH[0])

    return PerformanceInsights(
        max_tractive_force_n=force,
        max_acceleration_ms2=accel,
        max_acceleration_g=accel / G,
        reference_times=reference_times,
        horsepower_for_hypercar_time=find_horsepower_for_time(
            sweep_100, HYPERCAR_TIME_S
        ),
    )
