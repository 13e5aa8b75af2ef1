"""Core physics modules for the traction engine."""

from traction_engine.core.acceleration import (
    AccelerationResult,
    aerodynamic_drag_force,
    available_tractive_force,
    compute_time_to_speed,
    rolling_resistance_force,
    sentinel_time,
    simulate_acceleration,
    traction_ceiling,
)
from traction_engine.core.parameters import G, WATTS_PER_HP, ParameterSet
from traction_engine.core.power_curve import (
    PowerCurvePoint,
    compute_power_curve,
    find_power_limited_speed,
    max_tractive_force,
)
from traction_engine.core.surface import (
    RoadCondition,
    RollingSurface,
)
from traction_engine.core.sweep import (
    PerformanceInsights,
    ReferenceVehicle,
    compute_acceleration_sweep,
    compute_insights,
    find_horsepower_for_time,
    horsepower_grid,
)

__all__ = [
    "AccelerationResult",
    "G",
    "ParameterSet",
    "PerformanceInsights",
    "PowerCurvePoint",
    "ReferenceVehicle",
    "RoadCondition",
    "RollingSurface",
    "WATTS_PER_HP",
    "aerodynamic_drag_force",
    "available_tractive_force",
    "compute_acceleration_sweep",
    "compute_insights",
    "compute_power_curve",
    "compute_time_to_speed",
    "find_horsepower_for_time",
    "find_power_limited_speed",
    "horsepower_grid",
    "max_tractive_force",
    "rolling_resistance_force",
    "sentinel_time",
    "simulate_acceleration",
    "traction_ceiling",
]
