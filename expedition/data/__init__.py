"""
The planet sector catalog.

Every sector type a planet can contain is listed here with its baseline
exploration weight table, i.e. the relative likelihood of each event when
that sector is explored. The weights are relative, not probabilities: a
FOREST with

    {"HARVEST_2": 4, "AGAIN": 3, "DISEASE": 2, "PLAYER_LOST": 1}

produces HARVEST_2 four times out of ten explorations. The estimator
normalizes each table after running the active effects over it, so a table
whose entries have all been removed simply contributes nothing.

Two sectors are special: LANDING (where every expedition starts) and LOST
(added when a player goes missing). Neither counts towards the MAX_SECTORS
limit on regular sectors, though each still has its own max_per_planet.

This allows lookups like:

SECTORS["INTELLIGENT"].events["ARTEFACT"]
# returns the baseline ARTEFACT weight in an INTELLIGENT sector

SECTORS["CRISTAL_FIELD"].max_per_planet
# returns 1, since a planet holds at most one crystal field

The tables must never be mutated in place. They are shared by every caller
in the process; clone them first (see expedition.modifiers.modified_table).
"""

from expedition.records import Sector
from expedition.types import EventName, SectorName

MAX_SECTORS = 20
"""Maximum number of regular (non-special) sectors in one expedition."""

SPECIAL_SECTORS: tuple[SectorName, ...] = ("LANDING", "LOST")

DEFAULT_MAX_PER_PLANET = 4
"""Per-planet limit assumed for sector types missing from the catalog."""


def _sector(name: SectorName, max_per_planet: int, events: dict[EventName, float]) -> Sector:
    return Sector(
        name=name,
        max_per_planet=max_per_planet,
        events=events,
        is_special=name in SPECIAL_SECTORS,
    )


SECTORS: dict[SectorName, Sector] = {
    s.name: s
    for s in [
        _sector("FOREST", 4, {"HARVEST_2": 4, "AGAIN": 3, "DISEASE": 2, "PLAYER_LOST": 1}),
        _sector("MOUNTAIN", 4, {"ACCIDENT_3_5": 4, "FUEL_1": 3, "TIRED_2": 2, "HARVEST_1": 1}),
        _sector("SWAMP", 4, {"DISEASE": 4, "HARVEST_2": 3, "TIRED_2": 2, "NOTHING_TO_REPORT": 1}),
        _sector("DESERT", 4, {"NOTHING_TO_REPORT": 5, "TIRED_2": 4, "AGAIN": 1}),
        _sector("OCEAN", 4, {"NOTHING_TO_REPORT": 7, "PROVISION_3": 2, "PLAYER_LOST": 1}),
        _sector("CAVE", 4, {"FUEL_2": 4, "ACCIDENT_3_5": 3, "AGAIN": 2, "ARTEFACT": 1}),
        _sector("RUINS", 4, {"ARTEFACT": 4, "NOTHING_TO_REPORT": 3, "FIGHT_15": 2, "ACCIDENT_3_5": 1}),
        _sector("WRECK", 4, {"ARTEFACT": 4, "FUEL_3": 3, "NOTHING_TO_REPORT": 2, "FIGHT_8_10_12_15_18_32": 1}),
        _sector("FRUIT_TREES", 4, {"HARVEST_3": 4, "HARVEST_1": 3, "NOTHING_TO_REPORT": 3}),
        _sector("CRISTAL_FIELD", 1, {"MUSH_TRAP": 4, "STARMAP": 3, "FIGHT_18": 2, "PLAYER_LOST": 1}),
        _sector("RUMINANT", 4, {"PROVISION_4": 4, "PROVISION_2": 3, "ACCIDENT_3_5": 2, "FIGHT_8": 1}),
        _sector("PREDATOR", 4, {"FIGHT_12": 4, "ACCIDENT_3_5": 3, "NOTHING_TO_REPORT": 2, "PROVISION_3": 1}),
        _sector("INTELLIGENT", 4, {"FIGHT_12": 4, "PROVISION_2": 3, "ARTEFACT": 2, "ITEM_LOST": 1}),
        _sector("INSECT", 4, {"ACCIDENT_3_5": 4, "DISEASE": 3, "PROVISION_1": 2, "FIGHT_10": 1}),
        _sector("MANKAROG", 1, {"KILL_RANDOM": 4, "FIGHT_32": 3, "BACK": 2, "ARTEFACT": 1}),
        _sector("COLD", 4, {"NOTHING_TO_REPORT": 4, "TIRED_2": 3, "PLAYER_LOST": 2, "ACCIDENT_3_5": 1}),
        _sector("HOT", 4, {"TIRED_2": 4, "NOTHING_TO_REPORT": 3, "HARVEST_2": 2, "ACCIDENT_3_5": 1}),
        _sector("STRONG_WIND", 4, {"NOTHING_TO_REPORT": 6, "TIRED_2": 3, "ITEM_LOST": 1}),
        _sector("SEISMIC_ACTIVITY", 4, {"NOTHING_TO_REPORT": 4, "BACK": 3, "ACCIDENT_3_5": 2, "KILL_RANDOM": 1}),
        _sector("VOLCANIC_ACTIVITY", 4, {"NOTHING_TO_REPORT": 7, "BACK": 2, "KILL_ALL": 1}),
        _sector("HYDROCARBON", 2, {"FUEL_3": 4, "FUEL_4": 3, "FUEL_5": 2, "FUEL_6": 1}),
        _sector("OXYGEN", 1, {"OXYGEN_24": 4, "OXYGEN_16": 3, "OXYGEN_8": 2, "NOTHING_TO_REPORT": 1}),
        _sector("LANDING", 1, {"NOTHING_TO_REPORT": 4, "TIRED_2": 3, "ACCIDENT_3_5": 2, "DISASTER_3_5": 1}),
        _sector("LOST", 15, {"FIND_LOST": 7, "AGAIN": 2, "KILL_LOST": 1}),
    ]
}

EVENT_DESCRIPTIONS: dict[EventName, str] = {
    "NOTHING_TO_REPORT": "Nothing to Report",
    "TIRED_2": "Tired (-2 HP to all players)",
    "ACCIDENT_3_5": "Accident (3-5 damage to one player)",
    "DISASTER_3_5": "Disaster (3-5 damage to all players)",
    "HARVEST_1": "Harvest +1 Alien Fruit",
    "HARVEST_2": "Harvest +2 Alien Fruits",
    "HARVEST_3": "Harvest +3 Alien Fruits",
    "AGAIN": "Sector Unexplored (reroll needed)",
    "DISEASE": "Disease",
    "PLAYER_LOST": "Player Lost (adds Lost event)",
    "FUEL_1": "Fuel +1",
    "FUEL_2": "Fuel +2",
    "FUEL_3": "Fuel +3",
    "FUEL_4": "Fuel +4",
    "FUEL_5": "Fuel +5",
    "FUEL_6": "Fuel +6",
    "PROVISION_1": "Provision +1 Steak",
    "PROVISION_2": "Provision +2 Steaks",
    "PROVISION_3": "Provision +3 Steaks",
    "PROVISION_4": "Provision +4 Steaks",
    "ARTEFACT": "Artefact Found",
    "FIGHT_8": "Fight (8 damage split among players)",
    "FIGHT_10": "Fight (10 damage split among players)",
    "FIGHT_12": "Fight (12 damage split among players)",
    "FIGHT_15": "Fight (15 damage split among players)",
    "FIGHT_18": "Fight (18 damage split among players)",
    "FIGHT_32": "Fight (32 damage split among players)",
    "FIGHT_8_10_12_15_18_32": "Fight (8-32 damage split among players)",
    "ITEM_LOST": "Item Lost",
    "KILL_RANDOM": "Kill Random Player",
    "BACK": "Go Back (forced retreat)",
    "KILL_ALL": "Kill All Players",
    "FIND_LOST": "Find Lost Player",
    "KILL_LOST": "Kill Lost Player",
    "MUSH_TRAP": "Mush Trap",
    "STARMAP": "Starmap Found",
    "OXYGEN_8": "Oxygen +8",
    "OXYGEN_16": "Oxygen +16",
    "OXYGEN_24": "Oxygen +24",
}


def describe(event: EventName) -> str:
    """Human-readable label for an event, falling back to the raw id."""
    return EVENT_DESCRIPTIONS.get(event, event)


def format_sector_name(name: SectorName) -> str:
    """Turn a catalog id like STRONG_WIND into "Strong Wind"."""
    return name.replace("_", " ").title()
