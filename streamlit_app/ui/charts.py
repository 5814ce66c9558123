"""
Chart builders for the overview dashboard.

All charts share the same quiet theme with the admin palette.
"""

from typing import Dict
import pandas as pd
import altair as alt


COLORS = {
    "primary": "#4318FF",      # Brand indigo
    "secondary": "#A3AED0",    # Muted gray-blue
    "text": "#2B3674",         # Navy
    "background": "#ffffff",
    "grid": "#F4F7FE",
}


def apply_modern_theme(chart: alt.Chart) -> alt.Chart:
    """
    Apply the unified theme to an Altair chart.

    Args:
        chart: Altair chart to theme

    Returns:
        Themed chart
    """
    return chart.configure_view(
        strokeWidth=0,
        fill=COLORS["background"],
    ).configure_axis(
        grid=True,
        gridColor=COLORS["grid"],
        domain=False,
        labelColor=COLORS["text"],
        labelFontSize=11,
        titleColor=COLORS["text"],
        titleFontSize=12,
        titleFontWeight="normal",
        ticks=False,
    ).configure(
        background=COLORS["background"],
    )


def counts_to_frame(counts: Dict[str, int], label: str) -> pd.DataFrame:
    """
    Turn a {value: count} mapping into a two-column DataFrame.

    Args:
        counts: Mapping such as metrics.count_by(recipes, "region")
        label: Name of the value column (e.g. "Region")
    """
    return pd.DataFrame(
        [{label: key, "Recipes": value} for key, value in counts.items()],
        columns=[label, "Recipes"],
    )


def build_count_bar_chart(counts: Dict[str, int], label: str) -> alt.Chart:
    """
    Build a horizontal bar chart of recipe counts per value.

    Args:
        counts: Mapping of value to number of recipes
        label: Axis title for the values

    Returns:
        Themed bar chart, sorted by count
    """
    df = counts_to_frame(counts, label)
    chart = alt.Chart(df).mark_bar(
        cornerRadiusEnd=6,
        color=COLORS["primary"],
    ).encode(
        x=alt.X("Recipes:Q", title="Recipes", axis=alt.Axis(tickMinStep=1)),
        y=alt.Y(f"{label}:N", sort="-x", title=None),
        tooltip=[alt.Tooltip(f"{label}:N"), alt.Tooltip("Recipes:Q")],
    ).properties(
        height=max(120, 32 * len(df)),
    )
    return apply_modern_theme(chart)
