"""
Expedition outcome estimation: ties the catalog, effects, classifier and
probability math together.

For each sector in the selection we take its baseline weight table, run the
active effects over a clone of it, and normalize the weights into per-event
probabilities. Those are summed by category, so each sector instance ends
up with one probability per category: its chance of producing a fight, an
accident, a resource find, and so on. Each sector is explored once, so a
sector is a single Bernoulli trial for each category.

Per category, the contributing sectors are the trials. When they all share
the same probability (e.g. four FOREST sectors) the count is Binomial(n, p)
and the bands come from expedition.binomial. When they differ (a FOREST and
a SWAMP both produce disease, at 20% and 40%) we convolve the per-sector
trials exactly with expedition.distributions instead of forcing a single
representative p onto them. For identical probabilities both paths give the
same answer.

Resource finds are also summed by quantity (fruits, fuel and so on) in
expedition.resources, so the report carries both how often and how much.
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Iterable

from expedition import binomial, distributions, resources
from expedition.classifier import CATEGORIES, category_severity, classify
from expedition.data import SECTORS
from expedition.modifiers import Effect, modified_table
from expedition.records import CategoryOutcome, ExpeditionReport, Sector, SectorBreakdown, SectorProbability
from expedition.types import Category, EventName, SectorName
from expedition.validation import regular_count, validate_selection

logger = logging.getLogger(__name__)

HOMOGENEITY_TOLERANCE = 1e-12
"""Per-sector probabilities closer than this are treated as identical."""


def normalize(table: dict[EventName, float]) -> dict[EventName, float]:
    """Turn a weight table into probabilities summing to 1.

    A table whose weights sum to 0 (every event removed by effects) has no
    events that can happen, so it yields an empty mapping.
    """
    total = sum(table.values())
    if total <= 0:
        return {}
    return {event: weight / total for event, weight in table.items()}


def sector_probabilities(
    sector: SectorName,
    effects: Iterable[str] = (),
    catalog: dict[SectorName, Sector] = SECTORS,
    registry: dict[str, Effect] | None = None,
) -> dict[EventName, float]:
    """Per-event probabilities for one sector with effects applied.

    Sectors missing from the catalog have no events.
    """
    effects = list(effects)
    entry = catalog.get(sector)
    if entry is None:
        logger.warning("sector %r is not in the catalog; it contributes no events", sector)
        return {}
    table = modified_table(entry.events, sector, effects, registry)
    probs = normalize(table)
    logger.debug("%s with %s: %s", sector, list(effects), probs)
    return probs


def category_probabilities(probabilities: dict[EventName, float]) -> dict[Category, float]:
    """Sum per-event probabilities into per-category probabilities."""
    result: defaultdict[Category, float] = defaultdict(float)
    for event, prob in probabilities.items():
        result[classify(event).category] += prob
    return dict(result)


def is_homogeneous(probabilities: list[float]) -> bool:
    return max(probabilities) - min(probabilities) <= HOMOGENEITY_TOLERANCE


def category_outcome(cat: Category, contributions: list[SectorProbability]) -> CategoryOutcome:
    """Outcome bands for one category from its contributing sectors."""
    probs = [c.probability for c in contributions]
    n = len(probs)
    homogeneous = is_homogeneous(probs)
    if homogeneous:
        p = probs[0]
        scenarios = binomial.scenarios(n, p)
    else:
        p = sum(probs) / n
        scenarios = distributions.scenarios(probs)
    return CategoryOutcome(
        category=cat,
        severity=category_severity(cat),
        trials=n,
        probability=p,
        homogeneous=homogeneous,
        scenarios=scenarios,
        sectors=contributions,
    )


def estimate(
    selection: list[SectorName],
    effects: Iterable[str] = (),
    catalog: dict[SectorName, Sector] = SECTORS,
    registry: dict[str, Effect] | None = None,
) -> ExpeditionReport:
    """Estimate per-category outcome bands for an expedition.

    Args:
        selection: Selected sector types, in selection order. Repeats are
            separate sectors.
        effects: Active effect names, in the order they apply.
        catalog: Sector catalog providing the baseline weight tables.
        registry: Effect registry; defaults to modifiers.EFFECTS.

    Categories no sector can produce are left out of ``outcomes``, while
    ``resources`` always holds every resource (zero when none can be found).
    An invalid selection is still estimated, but the problem is logged and
    recorded on ``report.validation``.
    """
    selection = list(selection)
    effects = list(effects)
    report = ExpeditionReport(
        sectors=selection,
        regular_sectors=regular_count(selection, catalog),
        effects=effects,
    )

    report.validation = validate_selection(selection, catalog)
    if not report.validation.is_valid:
        logger.warning("estimating an invalid selection: %s", report.validation.message)

    # Sectors of the same type are identically distributed, so each type's
    # probabilities are computed once.
    counts = Counter(selection)
    per_type = {s: sector_probabilities(s, effects, catalog, registry) for s in counts}

    unknown: set[EventName] = set()
    for sector, probs in per_type.items():
        report.breakdown[sector] = SectorBreakdown(count=counts[sector], events=dict(probs))
        unknown.update(e for e in probs if classify(e).category == "unknown")
    if unknown:
        report.unknown_events = sorted(unknown)
        logger.warning("unclassified events counted as unknown: %s", ", ".join(report.unknown_events))

    per_type_categories = {s: category_probabilities(probs) for s, probs in per_type.items()}
    contributions: defaultdict[Category, list[SectorProbability]] = defaultdict(list)
    for i, sector in enumerate(selection):
        for cat, prob in per_type_categories[sector].items():
            if prob > 0:
                contributions[cat].append(SectorProbability(index=i, sector=sector, probability=prob))

    for cat in CATEGORIES:
        if cat in contributions:
            report.outcomes[cat] = category_outcome(cat, contributions[cat])

    per_type_yields = {s: resources.sector_yields(probs) for s, probs in per_type.items()}
    report.resources = resources.expedition_yields([per_type_yields[s] for s in selection])

    return report
