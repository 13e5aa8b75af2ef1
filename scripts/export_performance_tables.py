#!/usr/bin/env python
"""Export power curves and acceleration tables for every surface pair.

For each (road condition, rolling surface) combination in the presets
file, the power curve and the 0-100 / 0-200 km/h sweep are computed at
the default vehicle mass and written to
``results/performance_tables.json``.

Usage
-----
::

    python scripts/export_performance_tables.py
"""

from __future__ import annotations

import json
import logging
import os
import sys

# Ensure the project root is on the import path when running as a script.
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from traction_engine.config import load_presets  # noqa: E402
from traction_engine.core.parameters import DEFAULT_MASS_KG, ParameterSet  # noqa: E402
from traction_engine.reporting.tables import performance_record  # noqa: E402

RESULTS_DIR: str = os.path.join(_project_root, "results")
OUTPUT_PATH: str = os.path.join(RESULTS_DIR, "performance_tables.json")

logger = logging.getLogger("export_performance_tables")


def main() -> None:
    """Compute and save tables for every surface combination."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    presets = load_presets()
    records: list[dict[str, object]] = []

    for road in presets.road_conditions.values():
        for surface in presets.rolling_surfaces.values():
            params = ParameterSet(
                mass_kg=DEFAULT_MASS_KG,
                friction_coefficient=road.friction_coefficient,
                rolling_resistance_coefficient=surface.rolling_resistance_coefficient,
            )
            record = performance_record(params)
            record["road_condition"] = road.name
            record["rolling_surface"] = surface.name
            records.append(record)
            logger.info("Computed %s on %s", road.name, surface.name)

    os.makedirs(RESULTS_DIR, exist_ok=True)
    with open(OUTPUT_PATH, "w", encoding="utf-8") as fh:
        json.dump({"mass_kg": DEFAULT_MASS_KG, "combinations": records}, fh, indent=2)
    logger.info("Saved %d combinations to %s", len(records), OUTPUT_PATH)


if __name__ == "__main__":
    main()
