"""CLI entrypoint for the traction-limited acceleration engine."""

from __future__ import annotations

import sys

from traction_engine import __version__
from traction_engine.config import (
    DEFAULT_ROAD_CONDITION,
    DEFAULT_ROLLING_SURFACE,
    build_parameters,
    load_presets,
)
from traction_engine.core.parameters import DEFAULT_MASS_KG
from traction_engine.core.power_curve import compute_power_curve, find_power_limited_speed
from traction_engine.core.sweep import compute_insights
from traction_engine.reporting.tables import performance_table

_REFERENCE_CAR_HP: float = 300.0


def main() -> None:
    """Print the power curve, acceleration sweep and insights."""
    print(f"Traction-Limited Acceleration Engine v{__version__}")
    print("=" * 56)

    # -- Presets --------------------------------------------------------------
    presets = load_presets()
    print(f"\nRoad conditions: {len(presets.road_conditions)} loaded")
    for rc in presets.road_conditions.values():
        print(f"  {rc.name:<28s} mu={rc.friction_coefficient:.2f}")
    print(f"Rolling surfaces: {len(presets.rolling_surfaces)} loaded")
    for rs in presets.rolling_surfaces.values():
        print(f"  {rs.name:<28s} Cr={rs.rolling_resistance_coefficient:.3f}")

    params = build_parameters(
        DEFAULT_MASS_KG, DEFAULT_ROAD_CONDITION, DEFAULT_ROLLING_SURFACE, presets
    )
    print(f"\nMass    : {params.mass_kg:.0f} kg")
    print(f"Road    : {DEFAULT_ROAD_CONDITION}")
    print(f"Surface : {DEFAULT_ROLLING_SURFACE}")
    print("-" * 56)

    # -- Power curve ----------------------------------------------------------
    curve = compute_power_curve(params)
    print("\nHorsepower required to stay traction-limited:\n")
    print(f"  {'Speed (km/h)':>12}  {'HP required':>11}")
    print(f"  {'------------':>12}  {'-----------':>11}")
    for point in curve[::4]:
        print(f"  {point.speed_kmh:12.0f}  {point.horsepower_required:11d}")

    limit = find_power_limited_speed(curve, _REFERENCE_CAR_HP)
    if limit is not None:
        print(f"\nA {_REFERENCE_CAR_HP:.0f} HP car is power-limited from {limit:.0f} km/h.")

    # -- Acceleration sweep ---------------------------------------------------
    table = performance_table(params)
    print("\nAcceleration times:\n")
    print(f"  {'HP':>6}  {'0-100 (s)':>9}  {'0-200 (s)':>9}")
    print(f"  {'------':>6}  {'---------':>9}  {'---------':>9}")
    for hp, row in table.iloc[::3].iterrows():
        mark_100 = "" if row["achievable_100"] else "*"
        mark_200 = "" if row["achievable_200"] else "*"
        print(
            f"  {hp:6.0f}  {row['time_0_100_s']:8.1f}{mark_100:1s}"
            f"  {row['time_0_200_s']:8.1f}{mark_200:1s}"
        )
    print("  (* not achievable)")

    # -- Insights -------------------------------------------------------------
    insights = compute_insights(params, presets.reference_vehicles)
    print("\nKey physics insights:")
    rows: list[tuple[str, str]] = [
        ("Maximum tractive force", f"{insights.max_tractive_force_n:.0f} N"),
        (
            "Maximum possible acceleration",
            f"{insights.max_acceleration_ms2:.2f} m/s^2 "
            f"({insights.max_acceleration_g:.2f} g)",
        ),
    ]
    for vehicle in presets.reference_vehicles:
        modelled = insights.reference_times[vehicle.name]
        rows.append(
            (
                vehicle.name,
                f"{modelled:.1f} s (advertised {vehicle.advertised_0_100_s:.1f} s)",
            )
        )
    needed = insights.horsepower_for_hypercar_time
    needed_str = f"~{needed:.0f} HP" if needed is not None else "over 1600 HP"
    rows.append(("For 2.0 s to 100 km/h", needed_str))

    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        print(f"  {label:<{width}s} : {value}")


if __name__ == "__main__":
    sys.exit(main() or 0)
