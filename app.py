"""
Main Streamlit application.
"""

import streamlit as st

from analytics import format_answer, sum_valid_game_ids, summarize_games
from game_logic import parse_games
from loader import extract_input_lines
from models import BagLimits
from ui import print_bag_limits, render_games_table, render_peak_chart


def run_app() -> None:
    """Run the main Streamlit application."""
    st.set_page_config(page_title="Cube Conundrum", layout="wide")
    st.title("Cube Conundrum")

    limits = BagLimits.default()
    games = parse_games(extract_input_lines())
    total = sum_valid_game_ids(games, limits)
    summary = summarize_games(games, limits)

    with st.expander("Bag contents", expanded=False):
        print_bag_limits(limits)

    col_total, col_games, col_valid = st.columns([1, 1, 1])
    with col_total:
        st.metric("Sum of possible game ids", total)
    with col_games:
        st.metric("Games", len(games))
    with col_valid:
        st.metric("Possible games", int(summary["Valid"].sum()))

    st.markdown(format_answer(total))

    table_col, chart_col = st.columns([1, 1.5])
    with table_col:
        render_games_table(summary)
    with chart_col:
        render_peak_chart(summary, limits)


if __name__ == "__main__":
    run_app()
