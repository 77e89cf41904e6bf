"""Renderers that convert estimator results into text output.

The TextRenderer produces terminal-friendly lines for the demo tool and the
Streamlit report panel. Other renderers can consume the same record types.
"""

from __future__ import annotations

from expedition.data import MAX_SECTORS, format_sector_name
from expedition.records import CategoryOutcome, ExpeditionReport, ResourceYield, ScenarioResult, SectorUsage
from expedition.types import SectorName

CATEGORY_LABELS = {
    "fight": "Fights",
    "tired": "Tired",
    "accident": "Accidents",
    "disaster": "Disasters",
    "killAll": "Kill all",
    "killOne": "Kill one",
    "disease": "Disease",
    "playerLost": "Player lost",
    "itemLost": "Item lost",
    "mushTrap": "Mush trap",
    "again": "Unexplored",
    "nothing": "Nothing to report",
    "resource": "Resources",
    "back": "Forced retreat",
    "unknown": "Unknown",
}

RESOURCE_LABELS = {
    "fruits": "Alien fruits",
    "steaks": "Steaks",
    "fuel": "Fuel",
    "oxygen": "Oxygen",
    "artefacts": "Artefacts",
    "map_fragments": "Map fragments",
}


def format_number(value: float) -> str:
    """Whole numbers without a decimal point, everything else to 2 places."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


class TextRenderer:
    """Renders ExpeditionReport and friends to lists of text lines."""

    def render_report(self, report: ExpeditionReport) -> list[str]:
        lines: list[str] = []
        lines.append(f"Expedition: {len(report.sectors)} sectors ({report.regular_sectors}/{MAX_SECTORS} regular)")
        if report.effects:
            lines.append("Effects: " + ", ".join(report.effects))
        if report.validation and not report.validation.is_valid:
            lines.append(f"Warning: {report.validation.message}")
        for outcome in report.outcomes.values():
            lines.append(self.render_outcome(outcome))
        for found in report.resources.values():
            if found.maximum:
                lines.append(self.render_resource(found))
        if report.unknown_events:
            lines.append("Unclassified events: " + ", ".join(report.unknown_events))
        return lines

    def render_outcome(self, outcome: CategoryOutcome) -> str:
        label = CATEGORY_LABELS.get(outcome.category, outcome.category)
        return f"{label} [{outcome.severity}]: {self.render_scenarios(outcome.scenarios)} over {outcome.trials} sectors"

    def render_resource(self, found: ResourceYield) -> str:
        """e.g. "Fuel: pessimist 7, average 8, optimist 9, best 12"."""
        label = RESOURCE_LABELS.get(found.resource, found.resource)
        return (
            f"{label}: pessimist {format_number(found.pessimist)}, "
            f"average {format_number(found.average)}, "
            f"optimist {format_number(found.optimist)}, "
            f"best {format_number(found.maximum)}"
        )

    def render_scenarios(self, scenarios: ScenarioResult) -> str:
        return (
            f"optimist {format_number(scenarios.optimist)}, "
            f"average {format_number(scenarios.average)}, "
            f"pessimist {format_number(scenarios.pessimist)}, "
            f"worst {format_number(scenarios.worst_case)}"
        )

    def render_usage(self, stats: dict[SectorName, SectorUsage]) -> list[str]:
        """One line per sector type in use, e.g. "Forest: 2/4 (50%)"."""
        return [
            f"{format_sector_name(name)}: {usage.current}/{usage.max} ({usage.percentage}%)"
            for name, usage in stats.items()
            if usage.current
        ]
