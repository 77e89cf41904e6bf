"""Streamlit expedition planner UI.

Run with: PYTHONPATH=. streamlit run ui/app.py
"""

from __future__ import annotations

import streamlit as st

from expedition.data import SECTORS, format_sector_name
from expedition.estimator import estimate
from expedition.modifiers import EFFECTS
from expedition.records import ExpeditionReport
from expedition.renderers import CATEGORY_LABELS, RESOURCE_LABELS, TextRenderer, format_number
from expedition.validation import sector_availability, sector_usage_stats, validate_add_sector

ITEMS = ("defensive_signal", "navigation_aid", "scanning_aid")
ABILITIES = ("pilot", "diplomacy", "tracker")
PROJECTS = ("antigrav_propeller",)
SEVERITY_COLORS = {
    "danger": "red",
    "warning": "orange",
    "neutral": "gray",
    "positive": "green",
}


def effect_label(name: str) -> str:
    """Display name for an effect, e.g. Navigation Aid."""
    return name.replace("_", " ").title()


def build_loadout(items: list[str], abilities: list[str], projects: list[str]) -> list[str]:
    """Combine the chosen effects into one ordered loadout.

    Abilities apply first, then items, then projects. Raises ValueError
    for a name the effect registry doesn't know.
    """
    loadout = [*abilities, *items, *projects]
    for name in loadout:
        if name not in EFFECTS:
            raise ValueError(f"unknown effect: {name!r}")
    return loadout


def add_sector(selection: list[str], sector: str) -> tuple[list[str], str | None]:
    """Return the selection with sector appended if the limits allow it,
    along with the validation message when they don't."""
    result = validate_add_sector(sector, selection)
    if not result.is_valid:
        return selection, result.message
    return [*selection, sector], None


def remove_sector(selection: list[str], index: int) -> list[str]:
    """Return the selection without the sector at index; out of range is a no-op."""
    if not 0 <= index < len(selection):
        return selection
    return selection[:index] + selection[index + 1:]


def _init_selection() -> None:
    """Every expedition starts from the landing site."""
    if "selection" not in st.session_state:
        st.session_state["selection"] = ["LANDING"]


def sector_picker() -> None:
    """Render the sector grid with per-type usage and add buttons."""
    st.sidebar.subheader("Sectors")
    selection = st.session_state["selection"]
    cols = st.sidebar.columns(2)
    for i, name in enumerate(SECTORS):
        availability = sector_availability(name, selection)
        clicked = cols[i % 2].button(
            format_sector_name(name),
            key=f"add_{name}",
            disabled=availability.should_disable,
            help=availability.tooltip,
        )
        if clicked:
            selection, message = add_sector(selection, name)
            if message:
                st.sidebar.warning(message)
            st.session_state["selection"] = selection
            st.rerun()

    if st.sidebar.button("Clear"):
        st.session_state["selection"] = ["LANDING"]
        st.rerun()


def loadout_config() -> list[str]:
    """Render effect checkboxes and return the ordered loadout."""
    st.sidebar.divider()
    chosen: dict[str, list[str]] = {}
    for title, names in (("Abilities", ABILITIES), ("Items", ITEMS), ("Projects", PROJECTS)):
        with st.sidebar.expander(title):
            chosen[title] = [n for n in names if st.checkbox(effect_label(n), key=f"effect_{n}")]
    return build_loadout(chosen["Items"], chosen["Abilities"], chosen["Projects"])


def show_selection(selection: list[str]) -> None:
    st.subheader("Selected Expedition")
    cols = st.columns(5)
    for i, name in enumerate(selection):
        if cols[i % 5].button(f"✕ {format_sector_name(name)}", key=f"remove_{i}"):
            st.session_state["selection"] = remove_sector(selection, i)
            st.rerun()
    with st.expander("Sector usage"):
        st.code("\n".join(TextRenderer().render_usage(sector_usage_stats(selection))))


def show_report(report: ExpeditionReport) -> None:
    """Display one row of metrics per event category and per resource found."""
    st.subheader("Expected events")
    for outcome in report.outcomes.values():
        color = SEVERITY_COLORS[outcome.severity]
        label = CATEGORY_LABELS.get(outcome.category, outcome.category)
        st.markdown(f":{color}[**{label}**] · {outcome.trials} sectors")
        cols = st.columns(4)
        cols[0].metric("Optimist", format_number(outcome.scenarios.optimist))
        cols[1].metric("Average", format_number(outcome.scenarios.average))
        cols[2].metric("Pessimist", format_number(outcome.scenarios.pessimist))
        cols[3].metric("Worst case", format_number(outcome.scenarios.worst_case))

    st.subheader("Expected resources")
    for found in report.resources.values():
        if not found.maximum:
            continue
        st.markdown(f"**{RESOURCE_LABELS.get(found.resource, found.resource)}**")
        cols = st.columns(4)
        cols[0].metric("Pessimist", format_number(found.pessimist))
        cols[1].metric("Average", format_number(found.average))
        cols[2].metric("Optimist", format_number(found.optimist))
        cols[3].metric("Best case", format_number(found.maximum))
    if report.unknown_events:
        st.warning("Unclassified events: " + ", ".join(report.unknown_events))


def main() -> None:
    st.set_page_config(page_title="Expedition Planner", layout="wide")
    st.title("Expedition Planner")

    _init_selection()
    sector_picker()
    loadout = loadout_config()

    selection = st.session_state["selection"]
    show_selection(selection)
    st.divider()
    show_report(estimate(selection, loadout))


if __name__ == "__main__":
    main()
