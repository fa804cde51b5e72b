"""
UI components and visualization helpers.
"""

import pandas as pd
import plotly.express as px
import streamlit as st

from config import COLOR_MAP
from models import BagLimits, CubeColor


def print_bag_limits(limits: BagLimits) -> None:
    """Display the bag capacities the games are checked against."""
    st.markdown("### Bag contents")
    for color in CubeColor:
        st.write(f"- {color.label}: {limits[color]} cubes")
    st.info(
        "A game is possible only if no round ever shows more cubes of a color "
        "than the bag holds."
    )


def render_games_table(summary: pd.DataFrame) -> None:
    """Render the per-game peaks and validity."""
    st.markdown("#### Games")
    if summary.empty:
        st.info("No games in the input.")
        return
    st.dataframe(summary, use_container_width=True, hide_index=True)


def render_peak_chart(summary: pd.DataFrame, limits: BagLimits) -> None:
    """Grouped bars of each game's per-color peak, with the capacity as a dashed line."""
    if summary.empty:
        return

    labels = [c.label for c in CubeColor]
    df = summary.melt(id_vars=["Game", "Valid"], value_vars=labels, var_name="Color", value_name="Peak")

    fig = px.bar(
        df,
        x="Game",
        y="Peak",
        color="Color",
        barmode="group",
        color_discrete_map=COLOR_MAP,
        hover_data=["Valid"],
    )
    for color in CubeColor:
        fig.add_hline(
            y=limits[color],
            line_dash="dash",
            line_color=COLOR_MAP[color.label],
            annotation_text=f"{color.label} capacity",
        )
    fig.update_layout(
        xaxis=dict(dtick=1, title="Game"),
        yaxis=dict(title="Most cubes shown in one round"),
        height=400,
        margin=dict(l=10, r=10, t=30, b=10),
        legend_title_text="Color",
    )
    st.plotly_chart(fig, use_container_width=True)
