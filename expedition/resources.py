"""
Resource yield: how much an expedition brings back, not just how often.

The estimator counts how many sectors produce *some* resource event. That
says nothing about quantity, and quantity is what the crew eats. Resource
events carry their amount in the suffix: HARVEST_3 is three alien fruits,
PROVISION_2 two steaks, FUEL_4 four fuel, OXYGEN_16 sixteen oxygen. So for
each sector we build a small distribution over the amount it yields (0 when
some other event fires) and convolve those across the expedition, the same
way expedition.distributions does for event counts.

Artefacts are split: eight in nine ARTEFACT finds are real artefacts, the
ninth is a map fragment. STARMAP is always a map fragment.

Bonuses that depend on the crew (botanists, drillers and so on) are not
modeled; the yields here come from the weight tables alone.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from expedition.distributions import Distribution, convolve_all, expected_value, percentile
from expedition.records import ResourceYield
from expedition.types import EventName, Resource

RESOURCES: tuple[Resource, ...] = ("fruits", "steaks", "fuel", "oxygen", "artefacts", "map_fragments")
"""Every resource in display order."""

PREFIXES: dict[Resource, str] = {
    "fruits": "HARVEST_",
    "steaks": "PROVISION_",
    "fuel": "FUEL_",
    "oxygen": "OXYGEN_",
}

ARTEFACT_SHARE = 8 / 9
MAP_FRAGMENT_SHARE = 1 / 9

PESSIMIST_PERCENTILE = 0.25
OPTIMIST_PERCENTILE = 0.75


def amount(event: EventName, prefix: str) -> int:
    """Quantity encoded after the prefix, e.g. FUEL_3 -> 3.

    A suffix that isn't a number counts as 1.
    """
    suffix = event[len(prefix):].split("_")[0]
    return int(suffix) if suffix.isdigit() else 1


def yields(event: EventName) -> list[tuple[Resource, int, float]]:
    """(resource, amount, share of the event's probability) for one event.

    Most events yield nothing; ARTEFACT yields two resources.
    """
    for resource, prefix in PREFIXES.items():
        if event.startswith(prefix):
            return [(resource, amount(event, prefix), 1.0)]
    if event == "ARTEFACT":
        return [("artefacts", 1, ARTEFACT_SHARE), ("map_fragments", 1, MAP_FRAGMENT_SHARE)]
    if event == "STARMAP":
        return [("map_fragments", 1, 1.0)]
    return []


def sector_yields(probabilities: dict[EventName, float]) -> dict[Resource, Distribution]:
    """Amount distribution of every resource for one sector.

    Takes the per-event probabilities of a single sector (effects already
    applied). A sector with no events yields 0 of everything.
    """
    found: dict[Resource, defaultdict[int, float]] = {r: defaultdict(float) for r in RESOURCES}
    for event, prob in probabilities.items():
        for resource, qty, share in yields(event):
            found[resource][qty] += prob * share

    result = {}
    for resource, dist in found.items():
        nothing = 1 - sum(dist.values())
        if nothing > 0:
            dist[0] += nothing
        result[resource] = dict(dist)
    return result


def resource_yield(resource: Resource, distributions: Iterable[Distribution]) -> ResourceYield:
    """Bands for the total of one resource over independent sectors."""
    total = convolve_all(distributions)
    return ResourceYield(
        resource=resource,
        pessimist=percentile(total, PESSIMIST_PERCENTILE),
        average=expected_value(total),
        optimist=percentile(total, OPTIMIST_PERCENTILE),
        maximum=max(value for value, prob in total.items() if prob > 0),
    )


def expedition_yields(per_sector: list[dict[Resource, Distribution]]) -> dict[Resource, ResourceYield]:
    """Yield of every resource, given sector_yields() for each sector."""
    return {r: resource_yield(r, (s[r] for s in per_sector)) for r in RESOURCES}
