"""Road-condition and rolling-surface models for the traction engine.

Friction coefficients set the grip ceiling; rolling-resistance
coefficients set the speed-independent drag of the tyre on the surface.
The named instances live in ``data/presets.yaml``; see
:func:`traction_engine.config.load_presets`.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Surface models
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RoadCondition:
    """Named tyre/road friction level.

    Attributes:
        name: Human-readable label (e.g. "Wet Asphalt").
        friction_coefficient: Peak friction coefficient (0.0-1.0].
    """

    name: str
    friction_coefficient: float

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Road condition name must be non-empty.")
        if not 0.0 < self.friction_coefficient <= 1.0:
            raise ValueError("friction_coefficient must be in (0.0, 1.0].")


@dataclass(frozen=True)
class RollingSurface:
    """Named rolling-resistance surface.

    Attributes:
        name: Human-readable label (e.g. "Rolled Gravel").
        rolling_resistance_coefficient: Cr (> 0).
    """

    name: str
    rolling_resistance_coefficient: float

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Rolling surface name must be non-empty.")
        if not self.rolling_resistance_coefficient > 0.0:
            raise ValueError("rolling_resistance_coefficient must be > 0.")

