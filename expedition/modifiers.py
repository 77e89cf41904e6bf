"""
Effects that reshape a sector's exploration weight table.

Equipped items, player abilities and ship projects change which events a
sector can produce. Each effect is a function ``(table, sector) -> table``
built from a few mutation primitives: drop events by prefix, drop events by
name, or scale one event's weight.

Effects run in the order the caller lists them (equipment slot order), and
each one sees the result of the previous ones. Two scanning aids double
ARTEFACT twice, i.e. x4, so the order and multiplicity of the effect list
matter.

The primitives and effects mutate the table they are handed and return it.
apply_effects() takes ownership of its table for the duration of the call;
anyone starting from a shared baseline table should go through
modified_table(), which clones first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Callable

from expedition.types import EffectName, EventName, SectorName

logger = logging.getLogger(__name__)

WeightTable = dict[EventName, float]
Effect = Callable[[WeightTable, SectorName], WeightTable]


# -----------------------------------------------------------
# Primitives
# -----------------------------------------------------------


def clone(table: WeightTable) -> WeightTable:
    """Copy a table so effects can run without touching the original.
    Weights are plain numbers, so a shallow copy is enough."""
    return dict(table)


def remove_events(table: WeightTable, events: Iterable[EventName]) -> WeightTable:
    """Delete the named events; names that aren't present are ignored."""
    for event in events:
        table.pop(event, None)
    return table


def remove_by_prefix(table: WeightTable, prefix: str) -> WeightTable:
    """Delete every event whose identifier starts with prefix."""
    return remove_events(table, [e for e in table if e.startswith(prefix)])


def scale_entry(table: WeightTable, event: EventName, factor: float) -> WeightTable:
    """Multiply one event's weight by factor, if the event is present."""
    if event in table:
        table[event] *= factor
    return table


# -----------------------------------------------------------
# Items
# -----------------------------------------------------------


def defensive_signal(table: WeightTable, sector: SectorName) -> WeightTable:
    """Intelligent natives won't attack a party signalling peaceful intent:
    no FIGHT_* events in INTELLIGENT sectors."""
    if sector != "INTELLIGENT":
        return table
    return remove_by_prefix(table, "FIGHT_")


def navigation_aid(table: WeightTable, sector: SectorName) -> WeightTable:
    """The party never loses its bearings: no AGAIN in any sector."""
    return remove_by_prefix(table, "AGAIN")


def scanning_aid(table: WeightTable, sector: SectorName) -> WeightTable:
    """Doubles the ARTEFACT weight in INTELLIGENT sectors."""
    if sector != "INTELLIGENT":
        return table
    return scale_entry(table, "ARTEFACT", 2)


# -----------------------------------------------------------
# Abilities
# -----------------------------------------------------------


def pilot(table: WeightTable, sector: SectorName) -> WeightTable:
    """A skilled pilot lands cleanly: the LANDING sector loses its
    damaging events."""
    if sector != "LANDING":
        return table
    return remove_events(table, ["TIRED_2", "ACCIDENT_3_5", "DISASTER_3_5"])


def diplomacy(table: WeightTable, sector: SectorName) -> WeightTable:
    """No FIGHT_* events in any sector."""
    return remove_by_prefix(table, "FIGHT_")


def tracker(table: WeightTable, sector: SectorName) -> WeightTable:
    """Lost players are always found alive: no KILL_LOST in LOST sectors."""
    if sector != "LOST":
        return table
    return remove_events(table, ["KILL_LOST"])


# -----------------------------------------------------------
# Projects
# -----------------------------------------------------------


def antigrav_propeller(table: WeightTable, sector: SectorName) -> WeightTable:
    """Doubles NOTHING_TO_REPORT on LANDING."""
    if sector != "LANDING":
        return table
    return scale_entry(table, "NOTHING_TO_REPORT", 2)


EFFECTS: dict[EffectName, Effect] = {
    "defensive_signal": defensive_signal,
    "navigation_aid": navigation_aid,
    "scanning_aid": scanning_aid,
    "pilot": pilot,
    "diplomacy": diplomacy,
    "tracker": tracker,
    "antigrav_propeller": antigrav_propeller,
}
"""The default effect registry. Callers may pass their own mapping to
apply_effects() to add or replace effects."""


# -----------------------------------------------------------
# Pipeline
# -----------------------------------------------------------


def apply_effects(
    table: WeightTable,
    sector: SectorName,
    effects: Iterable[str],
    registry: dict[str, Effect] | None = None,
) -> WeightTable:
    """Run the named effects over table, in order, in place.

    Names missing from the registry are skipped. Returns the same table
    object, which is the only authoritative copy afterwards.
    """
    registry = EFFECTS if registry is None else registry
    for name in effects:
        effect = registry.get(name)
        if effect is None:
            logger.debug("skipping unregistered effect %r", name)
            continue
        table = effect(table, sector)
    return table


def modified_table(
    baseline: WeightTable,
    sector: SectorName,
    effects: Iterable[str],
    registry: dict[str, Effect] | None = None,
) -> WeightTable:
    """Clone baseline, then apply_effects() to the clone."""
    return apply_effects(clone(baseline), sector, effects, registry)
