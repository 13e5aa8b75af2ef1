"""Tabular reporting helpers for the traction engine."""

from traction_engine.reporting.tables import (
    acceleration_frame,
    performance_record,
    performance_table,
    power_curve_frame,
)

__all__ = [
    "acceleration_frame",
    "performance_record",
    "performance_table",
    "power_curve_frame",
]
