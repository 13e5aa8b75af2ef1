"""Vehicle parameter set and physical constants for the traction engine."""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Physical constants
# ---------------------------------------------------------------------------

G: float = 9.81  # m/s^2
WATTS_PER_HP: float = 745.7  # mechanical horsepower
KMH_PER_MS: float = 3.6

# Mass slider bounds used by the presentation layer (kg).
MASS_MIN_KG: float = 1000.0
MASS_MAX_KG: float = 2500.0
MASS_STEP_KG: float = 50.0
DEFAULT_MASS_KG: float = 1800.0


@dataclass(frozen=True)
class ParameterSet:
    """Inputs to the power-curve and acceleration computations.

    The three tunable inputs come from the user; the remaining fields
    describe a modern performance EV and default to fixed values.

    Attributes:
        mass_kg: Vehicle mass in kilograms (> 0).
        friction_coefficient: Tyre/road friction coefficient (> 0).
        rolling_resistance_coefficient: Rolling-resistance coefficient Cr (> 0).
        drag_coefficient: Aerodynamic drag coefficient Cd (> 0).
        frontal_area_m2: Frontal area in square metres (> 0).
        air_density_kgm3: Air density in kg/m^3 (> 0).
        drivetrain_efficiency: Fraction of source power reaching the
            wheels (0.0-1.0].
        launch_boost_factor: Launch-control allowance over static
            friction (>= 1.0).
        awd_traction_boost: Extra usable grip from all-wheel drive during
            launch (>= 1.0).
    """

    mass_kg: float
    friction_coefficient: float
    rolling_resistance_coefficient: float
    drag_coefficient: float = 0.23
    frontal_area_m2: float = 2.2
    air_density_kgm3: float = 1.225
    drivetrain_efficiency: float = 0.95
    launch_boost_factor: float = 1.2
    awd_traction_boost: float = 1.3

    def __post_init__(self) -> None:
        """Validate parameter values."""
        if not self.mass_kg > 0.0:
            raise ValueError("mass_kg must be > 0.")
        if not self.friction_coefficient > 0.0:
            raise ValueError("friction_coefficient must be > 0.")
        if not self.rolling_resistance_coefficient > 0.0:
            raise ValueError("rolling_resistance_coefficient must be > 0.")
        if not self.drag_coefficient > 0.0:
            raise ValueError("drag_coefficient must be > 0.")
        if not self.frontal_area_m2 > 0.0:
            raise ValueError("frontal_area_m2 must be > 0.")
        if not self.air_density_kgm3 > 0.0:
            raise ValueError("air_density_kgm3 must be > 0.")
        if not 0.0 < self.drivetrain_efficiency <= 1.0:
            raise ValueError("drivetrain_efficiency must be in (0.0, 1.0].")
        if not self.launch_boost_factor >= 1.0:
            raise ValueError("launch_boost_factor must be >= 1.0.")
        if not self.awd_traction_boost >= 1.0:
            raise ValueError("awd_traction_boost must be >= 1.0.")


def kmh_to_ms(speed_kmh: float) -> float:
    """Convert km/h to m/s."""
    return speed_kmh / KMH_PER_MS
