"""
Event classification: map a raw event identifier to a category and severity.

Exploration events have identifiers like FIGHT_12, ACCIDENT_3_5 or
NOTHING_TO_REPORT. The numeric suffixes encode magnitudes (fight strength,
damage range, resource quantity) that don't matter when counting how often
something happens, so events are grouped into categories by prefix or exact
name. Each category carries a severity used for color-coding.

Rules are checked in order and the first match wins. Anything unmatched is
("unknown", "neutral") so that new event types added to the catalog degrade
gracefully instead of crashing the estimator.
"""

from __future__ import annotations

from expedition.records import Classification
from expedition.types import Category, EventName, Severity

# (prefixes, exact names, category, severity)
RULES: list[tuple[tuple[str, ...], tuple[EventName, ...], Category, Severity]] = [
    (("FIGHT_",), (), "fight", "danger"),
    (("TIRED_",), (), "tired", "warning"),
    (("ACCIDENT_",), (), "accident", "warning"),
    (("DISASTER_",), (), "disaster", "danger"),
    ((), ("KILL_ALL",), "killAll", "danger"),
    ((), ("KILL_RANDOM", "KILL_LOST"), "killOne", "danger"),
    ((), ("DISEASE",), "disease", "warning"),
    ((), ("PLAYER_LOST",), "playerLost", "danger"),
    ((), ("ITEM_LOST",), "itemLost", "warning"),
    ((), ("MUSH_TRAP",), "mushTrap", "danger"),
    ((), ("AGAIN",), "again", "neutral"),
    ((), ("NOTHING_TO_REPORT",), "nothing", "neutral"),
    (
        ("HARVEST_", "PROVISION_", "FUEL_", "OXYGEN_"),
        ("ARTEFACT", "STARMAP", "FIND_LOST"),
        "resource",
        "positive",
    ),
    ((), ("BACK",), "back", "neutral"),
]

UNKNOWN = Classification("unknown", "neutral")

CATEGORIES: tuple[Category, ...] = tuple(rule[2] for rule in RULES) + ("unknown",)
"""Every category in display order: dangers first, resources near the end."""


def classify(event: EventName) -> Classification:
    """Return the category and severity for an event identifier."""
    for prefixes, names, category, severity in RULES:
        if event in names or event.startswith(prefixes):
            return Classification(category, severity)
    return UNKNOWN


def category(event: EventName) -> Category:
    return classify(event).category


def severity(event: EventName) -> Severity:
    return classify(event).severity


def category_severity(cat: Category) -> Severity:
    """Severity shared by every event in a category."""
    for _, _, rule_category, rule_severity in RULES:
        if rule_category == cat:
            return rule_severity
    return UNKNOWN.severity
