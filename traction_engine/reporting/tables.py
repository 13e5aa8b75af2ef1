"""Tabular views of traction-engine results.

Converts power curves and horsepower sweeps into :class:`pandas.DataFrame`
objects for the dashboard, the console demo and the export script.
"""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from traction_engine.core.acceleration import AccelerationResult
from traction_engine.core.parameters import ParameterSet
from traction_engine.core.power_curve import PowerCurvePoint, compute_power_curve
from traction_engine.core.sweep import compute_acceleration_sweep, horsepower_grid

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frames
# ---------------------------------------------------------------------------


def power_curve_frame(curve: list[PowerCurvePoint]) -> pd.DataFrame:
    """Return the power curve as columns ``speed_kmh, horsepower_required``."""
    return pd.DataFrame(
        {
            "speed_kmh": [p.speed_kmh for p in curve],
            "horsepower_required": [p.horsepower_required for p in curve],
        }
    )


def acceleration_frame(results: list[AccelerationResult]) -> pd.DataFrame:
    """Return sweep results as columns ``horsepower, time_s, achievable``."""
    return pd.DataFrame(
        {
            "horsepower": [r.horsepower for r in results],
            "time_s": [r.time_s for r in results],
            "achievable": [r.achievable for r in results],
        }
    )


def performance_table(
    params: ParameterSet,
    horsepower: Any = None,
) -> pd.DataFrame:
    """Side-by-side 0-100 and 0-200 km/h times for a horsepower grid.

    Args:
        params: Vehicle and surface parameters.
        horsepower: Levels to evaluate.  Defaults to the standard grid.

    Returns:
        DataFrame indexed by ``horsepower`` with columns ``time_0_100_s``,
        ``time_0_200_s``, ``achievable_100`` and ``achievable_200``.
    """
    levels = horsepower_grid() if horsepower is None else horsepower
    sweep_100 = acceleration_frame(compute_acceleration_sweep(params, 100.0, levels))
    sweep_200 = acceleration_frame(compute_acceleration_sweep(params, 200.0, levels))

    table = pd.DataFrame(
        {
            "horsepower": sweep_100["horsepower"],
            "time_0_100_s": sweep_100["time_s"],
            "time_0_200_s": sweep_200["time_s"],
            "achievable_100": sweep_100["achievable"],
            "achievable_200": sweep_200["achievable"],
        }
    )
    return table.set_index("horsepower")


def performance_record(params: ParameterSet) -> dict[str, object]:
    """JSON-serialisable summary of the curve and sweeps for *params*."""
    curve = power_curve_frame(compute_power_curve(params))
    table = performance_table(params).reset_index()
    logger.debug(
        "Built performance record: mass=%.0f kg, mu=%.2f, Cr=%.3f",
        params.mass_kg,
        params.friction_coefficient,
        params.rolling_resistance_coefficient,
    )
    return {
        "parameters": {
            "mass_kg": params.mass_kg,
            "friction_coefficient": params.friction_coefficient,
            "rolling_resistance_coefficient": params.rolling_resistance_coefficient,
        },
        "power_curve": curve.to_dict(orient="records"),
        "acceleration": table.to_dict(orient="records"),
    }
