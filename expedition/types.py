"""
Vocabulary shared across the estimator.

Catalogs, effect loadouts and reports all pass around short identifier
strings: sector types, event ids, category keys. The aliases below give
those strings names so a signature like ``dict[Category, CategoryOutcome]``
says what the keys are. Closed sets are Literals; sector and event names
stay plain str because callers may bring their own catalog.
"""

from typing import Literal, TypeAlias

# Sector identifiers as they appear in the planet catalog. Kept as a plain
# str alias rather than a Literal because the catalog is open: a caller may
# pass its own catalog with sector types we have never heard of.
SectorName: TypeAlias = str

# Raw exploration event identifiers, e.g. "FIGHT_12" or "ACCIDENT_3_5".
# Also open-ended; unknown ones classify to the "unknown" category.
EventName: TypeAlias = str

# The grouping an event identifier is classified into. One outcome band
# summary is produced per category present in an expedition.
Category: TypeAlias = Literal[
    "fight",
    "tired",
    "accident",
    "disaster",
    "killAll",
    "killOne",
    "disease",
    "playerLost",
    "itemLost",
    "mushTrap",
    "again",
    "nothing",
    "resource",
    "back",
    "unknown",
]

# Display severity used for color-coding an event or category.
Severity: TypeAlias = Literal[
    "danger",
    "warning",
    "neutral",
    "positive",
]

# Names of the weight-table effects in the default registry. Equipment,
# abilities and ship projects all share this namespace:
EffectName: TypeAlias = Literal[
    # Items:
    "defensive_signal",
    "navigation_aid",
    "scanning_aid",
    # Abilities:
    "pilot",
    "diplomacy",
    "tracker",
    # Projects:
    "antigrav_propeller",
]

# Which limit a ValidationResult was produced by.
LimitKind: TypeAlias = Literal["total", "sector"]

# Resource totals reported alongside the event counts.
Resource: TypeAlias = Literal[
    "fruits",
    "steaks",
    "fuel",
    "oxygen",
    "artefacts",
    "map_fragments",
]
