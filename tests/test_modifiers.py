"""Tests for weight-table primitives, shipped effects and the pipeline."""

from copy import deepcopy

from expedition.data import SECTORS
from expedition.modifiers import (
    EFFECTS,
    antigrav_propeller,
    apply_effects,
    clone,
    defensive_signal,
    diplomacy,
    modified_table,
    navigation_aid,
    pilot,
    remove_by_prefix,
    remove_events,
    scale_entry,
    scanning_aid,
    tracker,
)


def landing() -> dict[str, float]:
    return {
        "NOTHING_TO_REPORT": 10,
        "TIRED_2": 5,
        "ACCIDENT_3_5": 3,
        "DISASTER_3_5": 2,
        "FIGHT_12": 4,
        "AGAIN": 6,
    }


def intelligent() -> dict[str, float]:
    return {
        "ARTEFACT": 5,
        "FIGHT_12": 8,
        "FIGHT_8": 3,
        "HARVEST_1": 10,
        "AGAIN": 4,
    }


class TestPrimitives:
    def test_remove_by_prefix(self) -> None:
        table = {"FIGHT_1": 2, "FIGHT_2": 3, "AGAIN": 1}
        assert remove_by_prefix(table, "FIGHT_") == {"AGAIN": 1}

    def test_remove_by_prefix_mutates_in_place(self) -> None:
        table = {"FIGHT_1": 2, "AGAIN": 1}
        result = remove_by_prefix(table, "FIGHT_")
        assert result is table
        assert "FIGHT_1" not in table

    def test_remove_by_prefix_no_match(self) -> None:
        assert remove_by_prefix({"AGAIN": 1}, "FIGHT_") == {"AGAIN": 1}

    def test_remove_events_ignores_missing(self) -> None:
        table = {"TIRED_2": 3, "AGAIN": 1}
        assert remove_events(table, ["TIRED_2", "DISASTER_3_5"]) == {"AGAIN": 1}

    def test_scale_entry(self) -> None:
        assert scale_entry({"ARTEFACT": 3}, "ARTEFACT", 2) == {"ARTEFACT": 6}

    def test_scale_entry_compounds(self) -> None:
        table = {"ARTEFACT": 3, "AGAIN": 1}
        scale_entry(table, "ARTEFACT", 2)
        scale_entry(table, "ARTEFACT", 2)
        assert table == {"ARTEFACT": 12, "AGAIN": 1}

    def test_scale_entry_missing_is_noop(self) -> None:
        assert scale_entry({"AGAIN": 1}, "ARTEFACT", 2) == {"AGAIN": 1}

    def test_clone_is_independent(self) -> None:
        table = {"AGAIN": 1}
        copy = clone(table)
        copy["AGAIN"] = 5
        assert table == {"AGAIN": 1}


class TestItems:
    def test_defensive_signal_in_intelligent(self) -> None:
        result = defensive_signal(intelligent(), "INTELLIGENT")
        assert not any(e.startswith("FIGHT_") for e in result)
        assert result["ARTEFACT"] == 5

    def test_defensive_signal_elsewhere(self) -> None:
        assert defensive_signal(landing(), "PREDATOR") == landing()

    def test_navigation_aid_everywhere(self) -> None:
        assert "AGAIN" not in navigation_aid(landing(), "LANDING")
        assert "AGAIN" not in navigation_aid(intelligent(), "INTELLIGENT")

    def test_scanning_aid_in_intelligent(self) -> None:
        assert scanning_aid(intelligent(), "INTELLIGENT")["ARTEFACT"] == 10

    def test_scanning_aid_elsewhere(self) -> None:
        assert scanning_aid(intelligent(), "RUINS")["ARTEFACT"] == 5


class TestAbilities:
    def test_pilot_on_landing(self) -> None:
        result = pilot(landing(), "LANDING")
        assert result == {"NOTHING_TO_REPORT": 10, "FIGHT_12": 4, "AGAIN": 6}

    def test_pilot_elsewhere(self) -> None:
        assert pilot(landing(), "DESERT") == landing()

    def test_diplomacy_everywhere(self) -> None:
        assert "FIGHT_12" not in diplomacy(landing(), "LANDING")
        result = diplomacy(intelligent(), "INTELLIGENT")
        assert set(result) == {"ARTEFACT", "HARVEST_1", "AGAIN"}

    def test_tracker_on_lost(self) -> None:
        table = {"KILL_LOST": 5, "PLAYER_LOST": 3, "NOTHING_TO_REPORT": 10}
        assert tracker(table, "LOST") == {"PLAYER_LOST": 3, "NOTHING_TO_REPORT": 10}

    def test_tracker_elsewhere(self) -> None:
        table = {"KILL_LOST": 5}
        assert tracker(table, "FOREST") == {"KILL_LOST": 5}


class TestProjects:
    def test_antigrav_propeller_on_landing(self) -> None:
        assert antigrav_propeller(landing(), "LANDING")["NOTHING_TO_REPORT"] == 20

    def test_antigrav_propeller_elsewhere(self) -> None:
        assert antigrav_propeller(landing(), "OCEAN")["NOTHING_TO_REPORT"] == 10


class TestApplyEffects:
    def test_registry_has_shipped_effects(self) -> None:
        assert {"defensive_signal", "navigation_aid", "scanning_aid"} <= set(EFFECTS)

    def test_no_effects(self) -> None:
        assert apply_effects(landing(), "LANDING", []) == landing()

    def test_applies_in_place(self) -> None:
        table = landing()
        result = apply_effects(table, "LANDING", ["pilot"])
        assert result is table
        assert "TIRED_2" not in table

    def test_effects_stack(self) -> None:
        result = apply_effects(intelligent(), "INTELLIGENT", ["defensive_signal", "navigation_aid", "scanning_aid"])
        assert result == {"ARTEFACT": 10, "HARVEST_1": 10}

    def test_repeated_effect_compounds(self) -> None:
        result = apply_effects(intelligent(), "INTELLIGENT", ["scanning_aid", "scanning_aid"])
        assert result["ARTEFACT"] == 20

    def test_order_matters(self) -> None:
        """Later effects see earlier effects' results."""
        def add_one(table: dict[str, float], sector: str) -> dict[str, float]:
            table["ARTEFACT"] = table.get("ARTEFACT", 0) + 1
            return table

        registry = {"add_one": add_one, "scanning_aid": scanning_aid}
        first = apply_effects({"ARTEFACT": 2}, "INTELLIGENT", ["add_one", "scanning_aid"], registry)
        second = apply_effects({"ARTEFACT": 2}, "INTELLIGENT", ["scanning_aid", "add_one"], registry)
        assert first == {"ARTEFACT": 6}
        assert second == {"ARTEFACT": 5}

    def test_unknown_effect_skipped(self) -> None:
        assert apply_effects(landing(), "LANDING", ["teleporter"]) == landing()

    def test_custom_registry_replaces_default(self) -> None:
        """Only effects in the given registry are applied."""
        result = apply_effects(landing(), "LANDING", ["pilot"], {"navigation_aid": navigation_aid})
        assert result == landing()

    def test_all_effects_can_empty_a_table(self) -> None:
        table = {"FIGHT_12": 4, "AGAIN": 1}
        assert apply_effects(table, "INTELLIGENT", ["defensive_signal", "navigation_aid"]) == {}


class TestModifiedTable:
    def test_baseline_untouched(self) -> None:
        before = deepcopy(SECTORS["INTELLIGENT"].events)
        result = modified_table(SECTORS["INTELLIGENT"].events, "INTELLIGENT", ["defensive_signal", "scanning_aid"])
        assert SECTORS["INTELLIGENT"].events == before
        assert result == {"PROVISION_2": 3, "ARTEFACT": 4, "ITEM_LOST": 1}

    def test_returns_new_object(self) -> None:
        baseline = landing()
        assert modified_table(baseline, "LANDING", []) is not baseline
