"""
Exact occurrence distributions for sectors with differing probabilities.

The binomial model in expedition.binomial assumes every sector has the same
chance of producing an event. A mixed expedition breaks that assumption:
an INTELLIGENT sector fights 40% of the time while a RUMINANT fights 10% of
the time. The count of fights is then a sum of independent Bernoulli
variables with different p, whose distribution we get by convolving the
per-sector distributions one at a time.

Distributions here are plain dicts mapping a value to its probability, e.g.
``{0: 0.6, 1: 0.4}`` for a single sector with a 40% chance.

With at most a few dozen sectors the convolution is tiny, so we compute it
exactly instead of sampling.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from expedition.binomial import OPTIMIST_PERCENTILE, PESSIMIST_PERCENTILE
from expedition.records import DistributionEntry, ScenarioResult

Distribution = dict[int, float]


def bernoulli(p: float) -> Distribution:
    """A single trial: 1 with probability p, otherwise 0."""
    return {0: 1 - p, 1: p}


def convolve(a: Distribution, b: Distribution) -> Distribution:
    """Distribution of the sum of two independent variables."""
    result: defaultdict[int, float] = defaultdict(float)
    for value_a, prob_a in a.items():
        for value_b, prob_b in b.items():
            result[value_a + value_b] += prob_a * prob_b
    return dict(result)


def convolve_all(distributions: Iterable[Distribution]) -> Distribution:
    """Fold convolve() over any number of distributions.

    No distributions at all means the sum is certainly 0.
    """
    result: Distribution = {0: 1.0}
    for dist in distributions:
        result = convolve(result, dist)
    return result


def expected_value(dist: Distribution) -> float:
    return sum(value * prob for value, prob in dist.items())


def as_entries(dist: Distribution) -> list[DistributionEntry]:
    """Sorted rows with a running cumulative, capped at 1 like
    binomial.distribution()."""
    entries = []
    cumulative = 0.0
    for value in sorted(dist):
        cumulative += dist[value]
        entries.append(DistributionEntry(k=value, probability=dist[value], cumulative=min(cumulative, 1.0)))
    return entries


def percentile(dist: Distribution, target: float) -> int:
    """Smallest value whose cumulative probability reaches target,
    falling back to the largest value."""
    entries = as_entries(dist)
    for entry in entries:
        if entry.cumulative >= target:
            return entry.k
    return entries[-1].k if entries else 0


def scenarios(probabilities: Iterable[float]) -> ScenarioResult:
    """Outcome bands for independent trials with the given probabilities.

    Trials with p = 0 can never fire, so they don't count towards the worst
    case. With identical probabilities this agrees with
    binomial.scenarios(n, p).
    """
    trials = [p for p in probabilities if p > 0]
    if not trials:
        return ScenarioResult()
    dist = convolve_all(bernoulli(p) for p in trials)
    return ScenarioResult(
        optimist=percentile(dist, OPTIMIST_PERCENTILE),
        average=expected_value(dist),
        pessimist=percentile(dist, PESSIMIST_PERCENTILE),
        worst_case=len(trials),
    )
