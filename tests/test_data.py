"""Sanity checks on the sector catalog."""

from math import inf, isfinite, nan

import pytest

from expedition.data import EVENT_DESCRIPTIONS, SECTORS, SPECIAL_SECTORS, describe, format_sector_name
from expedition.records import Sector


class TestCatalog:
    """Tests for the shipped sector catalog."""

    def test_keys_match_names(self) -> None:
        for name, sector in SECTORS.items():
            assert sector.name == name

    def test_weights_are_finite_and_nonnegative(self) -> None:
        for sector in SECTORS.values():
            for weight in sector.events.values():
                assert isfinite(weight)
                assert weight >= 0

    def test_every_table_has_weight(self) -> None:
        """No sector starts out with nothing that can happen."""
        for sector in SECTORS.values():
            assert sum(sector.events.values()) > 0

    def test_special_flags(self) -> None:
        """Only LANDING and LOST are flagged special."""
        assert {s.name for s in SECTORS.values() if s.is_special} == set(SPECIAL_SECTORS)

    def test_every_event_described(self) -> None:
        for sector in SECTORS.values():
            for event in sector.events:
                assert event in EVENT_DESCRIPTIONS


class TestSectorChecks:
    """Tests for the checks a Sector runs on construction."""

    def test_valid_sector(self) -> None:
        sector = Sector("VOID", 1, {"NOTHING_TO_REPORT": 0, "AGAIN": 2.5})
        assert sector.max_per_planet == 1

    def test_empty_table_allowed(self) -> None:
        """Effects can empty a table, so an empty catalog entry is fine too."""
        assert Sector("VOID", 2, {}).events == {}

    def test_max_per_planet_below_one(self) -> None:
        """A zero allowance would make usage percentages divide by zero."""
        with pytest.raises(ValueError, match="max_per_planet"):
            Sector("VOID", 0, {"AGAIN": 1})
        with pytest.raises(ValueError, match="max_per_planet"):
            Sector("VOID", -3, {"AGAIN": 1})

    def test_negative_weight(self) -> None:
        """A negative weight would push another event's probability past 1."""
        with pytest.raises(ValueError, match="AGAIN"):
            Sector("X", 4, {"ARTEFACT": 2, "AGAIN": -1})

    def test_non_finite_weight(self) -> None:
        for weight in (nan, inf):
            with pytest.raises(ValueError, match="finite"):
                Sector("X", 4, {"ARTEFACT": weight})


class TestHelpers:
    """Tests for the display helpers."""

    def test_describe(self) -> None:
        assert describe("TIRED_2") == "Tired (-2 HP to all players)"
        assert describe("SPACE_WHALE") == "SPACE_WHALE"

    def test_format_sector_name(self) -> None:
        assert format_sector_name("FOREST") == "Forest"
        assert format_sector_name("VOLCANIC_ACTIVITY") == "Volcanic Activity"
