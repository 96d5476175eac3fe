"""Reusable Plotly chart components."""

import pandas as pd
import plotly.graph_objects as go


def rate_curve_chart(
    df: pd.DataFrame,
    current_utilization: float | None = None,
    kink: float | None = None,
    title: str = "Interest Rate Curve",
) -> go.Figure:
    """Create an interactive rate curve chart.

    Args:
        df: DataFrame with columns: utilization, debt_rate, supply_rate.
        current_utilization: If provided, marks current utilization on chart.
        kink: If provided, marks the kink of a two-segment curve.
        title: Chart title.
    """
    fig = go.Figure()

    fig.add_trace(
        go.Scatter(
            x=df["utilization"] * 100,
            y=df["debt_rate"] * 100,
            name="Debt Rate",
            line=dict(color="#ef4444", width=2),
            hovertemplate="Utilization: %{x:.1f}%<br>Debt Rate: %{y:.4f}%<extra></extra>",
        )
    )

    fig.add_trace(
        go.Scatter(
            x=df["utilization"] * 100,
            y=df["supply_rate"] * 100,
            name="Supply Rate",
            line=dict(color="#22c55e", width=2),
            hovertemplate="Utilization: %{x:.1f}%<br>Supply Rate: %{y:.4f}%<extra></extra>",
        )
    )

    if current_utilization is not None:
        fig.add_vline(
            x=current_utilization * 100,
            line_dash="dash",
            line_color="#6b7280",
            annotation_text=f"Current: {current_utilization*100:.1f}%",
        )

    if kink is not None:
        fig.add_vline(
            x=kink * 100,
            line_dash="dot",
            line_color="#f59e0b",
            annotation_text=f"Kink: {kink*100:.2f}%",
        )

    fig.update_layout(
        title=title,
        xaxis_title="Utilization (%)",
        yaxis_title="Rate per period (%)",
        hovermode="x unified",
        template="plotly_dark",
        height=450,
    )

    return fig


def index_growth_chart(
    df: pd.DataFrame,
    title: str = "Compounding Index Growth",
) -> go.Figure:
    """Plot supply and debt indices from ``simulate_accrual`` output."""
    fig = go.Figure()

    fig.add_trace(
        go.Scatter(
            x=df["height"],
            y=df["total_supply_index"],
            name="Supply Index",
            mode="lines+markers",
            line=dict(color="#22c55e", width=2),
        )
    )
    fig.add_trace(
        go.Scatter(
            x=df["height"],
            y=df["total_debt_index"],
            name="Debt Index",
            mode="lines+markers",
            line=dict(color="#ef4444", width=2),
        )
    )

    fig.update_layout(
        title=title,
        xaxis_title="Height",
        yaxis_title="Index",
        hovermode="x unified",
        template="plotly_dark",
        height=400,
    )

    return fig
