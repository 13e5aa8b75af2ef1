"""Preset loader for the traction engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from traction_engine.core.parameters import ParameterSet
from traction_engine.core.surface import RoadCondition, RollingSurface
from traction_engine.core.sweep import ReferenceVehicle

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent / "data"
PRESETS_PATH: Path = DATA_DIR / "presets.yaml"

DEFAULT_ROAD_CONDITION: str = "Dry Asphalt (Performance)"
DEFAULT_ROLLING_SURFACE: str = "Asphalt/Concrete"

# section -> required fields (all but "name" are numeric)
_SECTIONS: dict[str, tuple[str, ...]] = {
    "road_conditions": ("name", "friction_coefficient"),
    "rolling_surfaces": ("name", "rolling_resistance_coefficient"),
    "reference_vehicles": ("name", "horsepower", "advertised_0_100_s"),
}


@dataclass(frozen=True)
class Presets:
    """Named surfaces and reference vehicles loaded from YAML.

    Attributes:
        road_conditions: Road conditions keyed by name, in file order.
        rolling_surfaces: Rolling surfaces keyed by name, in file order.
        reference_vehicles: Comparison vehicles, in file order.
    """

    road_conditions: dict[str, RoadCondition]
    rolling_surfaces: dict[str, RollingSurface]
    reference_vehicles: tuple[ReferenceVehicle, ...]

    def road_condition(self, name: str) -> RoadCondition:
        """Return the road condition called *name*.

        Raises:
            KeyError: If *name* is not a known road condition.
        """
        try:
            return self.road_conditions[name]
        except KeyError:
            raise KeyError(
                f"Unknown road condition '{name}'. "
                f"Valid options: {', '.join(self.road_conditions)}"
            ) from None

    def rolling_surface(self, name: str) -> RollingSurface:
        """Return the rolling surface called *name*.

        Raises:
            KeyError: If *name* is not a known rolling surface.
        """
        try:
            return self.rolling_surfaces[name]
        except KeyError:
            raise KeyError(
                f"Unknown rolling surface '{name}'. "
                f"Valid options: {', '.join(self.rolling_surfaces)}"
            ) from None


def _validate_entries(section: str, entries: list[dict]) -> None:
    fields = _SECTIONS[section]
    names: set[str] = set()

    for idx, entry in enumerate(entries):
        # --- Validate required fields ---
        for field in fields:
            if field not in entry:
                raise ValueError(
                    f"{section} entry {idx} ({entry.get('name', '<unknown>')}) "
                    f"is missing required field '{field}'"
                )

        # --- Validate numeric values > 0 ---
        for field in fields[1:]:
            val = entry[field]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(
                    f"{section} entry {idx} ({entry['name']}): "
                    f"'{field}' must be numeric, got {type(val).__name__}"
                )
            if not float(val) > 0.0:
                raise ValueError(
                    f"{section} entry {idx} ({entry['name']}): "
                    f"'{field}' must be > 0, got {val}"
                )

        if entry["name"] in names:
            raise ValueError(
                f"{section} entry {idx}: duplicate name '{entry['name']}'"
            )
        names.add(entry["name"])


def load_presets(path: Path | None = None) -> Presets:
    """Load road conditions, rolling surfaces and reference vehicles.

    Args:
        path: Optional override for the presets file path.

    Returns:
        A :class:`Presets` instance.

    Raises:
        FileNotFoundError: If the presets file does not exist.
        ValueError: If a section is missing, or an entry is missing fields
            or has out-of-range values.
    """
    presets_path = path or PRESETS_PATH
    if not presets_path.exists():
        raise FileNotFoundError(f"Presets file not found: {presets_path}")

    with open(presets_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    for section in _SECTIONS:
        if not isinstance(data.get(section), list):
            raise ValueError(f"Presets file is missing the '{section}' list")
        _validate_entries(section, data[section])

    road_conditions: dict[str, RoadCondition] = {}
    for entry in data["road_conditions"]:
        friction = float(entry["friction_coefficient"])
        if friction > 1.0:
            raise ValueError(
                f"road_conditions ({entry['name']}): "
                f"'friction_coefficient' must be <= 1, got {friction}"
            )
        road_conditions[str(entry["name"])] = RoadCondition(
            name=str(entry["name"]),
            friction_coefficient=friction,
        )

    rolling_surfaces: dict[str, RollingSurface] = {
        str(entry["name"]): RollingSurface(
            name=str(entry["name"]),
            rolling_resistance_coefficient=float(
                entry["rolling_resistance_coefficient"]
            ),
        )
        for entry in data["rolling_surfaces"]
    }

    reference_vehicles: tuple[ReferenceVehicle, ...] = tuple(
        ReferenceVehicle(
            name=str(entry["name"]),
            horsepower=float(entry["horsepower"]),
            advertised_0_100_s=float(entry["advertised_0_100_s"]),
        )
        for entry in data["reference_vehicles"]
    )

    logger.debug(
        "Loaded %d road conditions, %d rolling surfaces, %d reference vehicles "
        "from %s",
        len(road_conditions),
        len(rolling_surfaces),
        len(reference_vehicles),
        presets_path,
    )

    return Presets(
        road_conditions=road_conditions,
        rolling_surfaces=rolling_surfaces,
        reference_vehicles=reference_vehicles,
    )


def build_parameters(
    mass_kg: float,
    road_condition: str = DEFAULT_ROAD_CONDITION,
    rolling_surface: str = DEFAULT_ROLLING_SURFACE,
    presets: Presets | None = None,
) -> ParameterSet:
    """Build a parameter set from a named road condition and surface.

    Args:
        mass_kg: Vehicle mass in kilograms.
        road_condition: Name of a road condition in the presets.
        rolling_surface: Name of a rolling surface in the presets.
        presets: Loaded presets.  Defaults to the bundled file.

    Raises:
        KeyError: If either name is unknown.
    """
    presets = presets or load_presets()
    return ParameterSet(
        mass_kg=mass_kg,
        friction_coefficient=presets.road_condition(
            road_condition
        ).friction_coefficient,
        rolling_resistance_coefficient=presets.rolling_surface(
            rolling_surface
        ).rolling_resistance_coefficient,
    )
