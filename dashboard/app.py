"""Car Performance Visualization dashboard.

Interactive charts built with Streamlit and Plotly.  Shows the
horsepower needed to stay traction-limited across speed, and modelled
0-100 / 0-200 km/h times across a horsepower range, for a chosen vehicle
mass, road condition and rolling surface.

Launch with::

    streamlit run dashboard/app.py
"""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from traction_engine.config import Presets, build_parameters, load_presets
from traction_engine.core.acceleration import AccelerationResult
from traction_engine.core.parameters import (
    DEFAULT_MASS_KG,
    MASS_MAX_KG,
    MASS_MIN_KG,
    MASS_STEP_KG,
    ParameterSet,
)
from traction_engine.core.power_curve import (
    PowerCurvePoint,
    compute_power_curve,
    find_power_limited_speed,
)
from traction_engine.core.sweep import (
    PerformanceInsights,
    compute_acceleration_sweep,
    compute_insights,
)

_REFERENCE_CAR_HP: float = 300.0
_CHART_HEIGHT: int = 420


# ---------------------------------------------------------------------------
# Cached computations
# ---------------------------------------------------------------------------


@st.cache_resource
def _presets() -> Presets:
    return load_presets()


@st.cache_data
def _power_curve(params: ParameterSet) -> list[PowerCurvePoint]:
    return compute_power_curve(params)


@st.cache_data
def _sweep(params: ParameterSet, target_speed_kmh: float) -> list[AccelerationResult]:
    return compute_acceleration_sweep(params, target_speed_kmh)


@st.cache_data
def _insights(params: ParameterSet) -> PerformanceInsights:
    return compute_insights(params, _presets().reference_vehicles)


# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------


def _power_curve_figure(curve: list[PowerCurvePoint]) -> go.Figure:
    """Required horsepower vs speed with the reference-car lines."""
    fig = go.Figure(
        go.Scatter(
            x=[p.speed_kmh for p in curve],
            y=[p.horsepower_required for p in curve],
            mode="lines",
            line=dict(color="#8884d8", width=2),
            name="Required Horsepower",
            hovertemplate="%{y} HP<extra>Required Power</extra>",
        )
    )
    fig.add_hline(
        y=_REFERENCE_CAR_HP,
        line=dict(color="red", dash="dash"),
        annotation_text=f"{_REFERENCE_CAR_HP:.0f} HP Car",
    )
    limit_speed = find_power_limited_speed(curve, _REFERENCE_CAR_HP)
    if limit_speed is not None:
        fig.add_vline(
            x=limit_speed,
            line=dict(color="green", dash="dash"),
            annotation_text="Power-Limited Point",
        )
    fig.update_layout(
        xaxis_title="Speed (km/h)",
        yaxis_title="Horsepower Required",
        height=_CHART_HEIGHT,
    )
    return fig


def _acceleration_figure(
    results: list[AccelerationResult],
    title: str,
    color: str,
) -> go.Figure:
    """Time-to-speed vs horsepower line chart."""
    fig = go.Figure(
        go.Scatter(
            x=[r.horsepower for r in results],
            y=[r.time_s for r in results],
            mode="lines+markers",
            line=dict(color=color, width=2),
            name=title,
            hovertemplate="%{y} seconds<extra>Acceleration Time</extra>",
        )
    )
    fig.update_layout(
        xaxis_title="Horsepower",
        yaxis_title=f"{title} (seconds)",
        height=_CHART_HEIGHT,
    )
    return fig


# ---------------------------------------------------------------------------
# Streamlit app
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the Streamlit dashboard."""
    st.set_page_config(page_title="Car Performance Visualization", layout="wide")
    st.title("Car Performance Visualization")

    presets = _presets()

    # ── Controls ─────────────────────────────────────────────────────────
    col_mass, col_road, col_surface = st.columns(3)

    mass_kg: int = col_mass.slider(
        "Car Weight (kg)",
        min_value=int(MASS_MIN_KG),
        max_value=int(MASS_MAX_KG),
        value=int(DEFAULT_MASS_KG),
        step=int(MASS_STEP_KG),
    )
    road_name: str = col_road.selectbox(
        "Road Condition",
        options=list(presets.road_conditions),
        format_func=lambda n: (
            f"{n} (μ={presets.road_conditions[n].friction_coefficient})"
        ),
    )
    surface_name: str = col_surface.selectbox(
        "Surface Type (Rolling Resistance)",
        options=list(presets.rolling_surfaces),
        format_func=lambda n: (
            f"{n} (Cr={presets.rolling_surfaces[n].rolling_resistance_coefficient})"
        ),
    )

    params = build_parameters(float(mass_kg), road_name, surface_name, presets)

    curve = _power_curve(params)
    sweep_100 = _sweep(params, 100.0)
    sweep_200 = _sweep(params, 200.0)
    insights = _insights(params)

    # ── Charts ───────────────────────────────────────────────────────────
    tab_power, tab_100, tab_200 = st.tabs(
        ["Power vs Speed", "0-100 km/h Time", "0-200 km/h Time"]
    )

    with tab_power:
        st.caption(
            "Horsepower needed to maintain maximum acceleration (traction-limited) "
            "at each speed. Below the curve, acceleration is limited by power; "
            "above it, by tyre grip."
        )
        st.plotly_chart(_power_curve_figure(curve), use_container_width=True)

    with tab_100:
        st.caption(
            "0-100 km/h time falls with horsepower, then flattens as tyre grip "
            "becomes the limiting factor."
        )
        fig_100 = _acceleration_figure(sweep_100, "0-100 km/h Time", "#ff7300")
        fig_100.add_hline(
            y=2.0,
            line=dict(color="green", dash="dash"),
            annotation_text="2.0s (hypercar)",
        )
        fig_100.add_hline(
            y=10.0,
            line=dict(color="blue", dash="dash"),
            annotation_text="10s (average car)",
        )
        for vehicle in presets.reference_vehicles:
            fig_100.add_trace(
                go.Scatter(
                    x=[vehicle.horsepower],
                    y=[insights.reference_times[vehicle.name]],
                    mode="markers+text",
                    text=[vehicle.name],
                    textposition="top center",
                    marker=dict(size=10, symbol="diamond"),
                    name=vehicle.name,
                )
            )
        st.plotly_chart(fig_100, use_container_width=True)

    with tab_200:
        st.caption(
            "0-200 km/h time vs power. At these speeds aerodynamic drag becomes "
            "a major factor limiting acceleration."
        )
        fig_200 = _acceleration_figure(sweep_200, "0-200 km/h Time", "#82ca9d")
        fig_200.add_hline(
            y=10.0,
            line=dict(color="green", dash="dash"),
            annotation_text="10 seconds (hypercar)",
        )
        st.plotly_chart(fig_200, use_container_width=True)

    # ── Insights ─────────────────────────────────────────────────────────
    st.subheader("Key Physics Insights")
    col_f, col_a = st.columns(2)
    col_f.metric("Maximum tractive force", f"{insights.max_tractive_force_n:.0f} N")
    col_a.metric(
        "Maximum possible acceleration",
        f"{insights.max_acceleration_ms2:.2f} m/s²",
        f"{insights.max_acceleration_g:.2f} g",
        delta_color="off",
    )

    lines: list[str] = []
    for vehicle in presets.reference_vehicles:
        lines.append(
            f"- {vehicle.name} (~{vehicle.horsepower:.0f}HP): "
            f"{insights.reference_times[vehicle.name]}s "
            f"(vs. advertised {vehicle.advertised_0_100_s}s)"
        )
    needed = insights.horsepower_for_hypercar_time
    needed_str = f"{needed:.0f}" if needed is not None else "over 1600"
    lines.append(f"- For 2.0s acceleration, a {mass_kg}kg car would need ~{needed_str}HP")
    st.markdown("\n".join(lines))


if __name__ == "__main__":
    main()
