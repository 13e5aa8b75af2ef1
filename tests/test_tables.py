"""Tests for the pandas reporting tables."""

from __future__ import annotations

import json

import pandas as pd

from traction_engine.core.acceleration import compute_time_to_speed
from traction_engine.core.parameters import ParameterSet
from traction_engine.core.power_curve import compute_power_curve
from traction_engine.core.sweep import compute_acceleration_sweep
from traction_engine.reporting.tables import (
    acceleration_frame,
    performance_record,
    performance_table,
    power_curve_frame,
)


def _sample_params() -> ParameterSet:
    return ParameterSet(
        mass_kg=1800.0,
        friction_coefficient=0.85,
        rolling_resistance_coefficient=0.013,
    )


def test_power_curve_frame_columns() -> None:
    """The power-curve frame must have one row per point."""
    frame = power_curve_frame(compute_power_curve(_sample_params()))
    assert list(frame.columns) == ["speed_kmh", "horsepower_required"]
    assert len(frame) == 40
    assert frame["speed_kmh"].is_monotonic_increasing


def test_acceleration_frame_columns() -> None:
    """The sweep frame must carry time and achievability."""
    results = compute_acceleration_sweep(_sample_params(), 100.0, [200.0, 800.0])
    frame = acceleration_frame(results)
    assert list(frame.columns) == ["horsepower", "time_s", "achievable"]
    assert frame["achievable"].all()


def test_performance_table_values() -> None:
    """Table cells must equal direct integrator calls."""
    params = _sample_params()
    table = performance_table(params, [300.0, 900.0])
    assert isinstance(table, pd.DataFrame)
    assert table.index.name == "horsepower"
    assert list(table.index) == [300.0, 900.0]
    assert table.loc[300.0, "time_0_100_s"] == compute_time_to_speed(
        params, 300.0, 100.0
    )
    assert table.loc[900.0, "time_0_200_s"] == compute_time_to_speed(
        params, 900.0, 200.0
    )
    assert (table["time_0_200_s"] >= table["time_0_100_s"]).all()


def test_performance_record_is_json_serialisable() -> None:
    """The export record must survive a JSON dump."""
    record = performance_record(_sample_params())
    text = json.dumps(record)
    loaded = json.loads(text)
    assert loaded["parameters"]["friction_coefficient"] == 0.85
    assert len(loaded["power_curve"]) == 40
    assert len(loaded["acceleration"]) == 31
    assert set(loaded["acceleration"][0]) == {
        "horsepower",
        "time_0_100_s",
        "time_0_200_s",
        "achievable_100",
        "achievable_200",
    }
