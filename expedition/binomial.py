"""
Exact binomial probabilities for counting events across sectors.

When n sectors each independently produce some category of event with the
same probability p, the number of sectors that produce it is binomially
distributed. Expeditions hold at most a few dozen sectors, so everything
here is computed exactly rather than approximated:

    P(X = k) = C(n, k) * p^k * (1 - p)^(n - k)

The outcome bands reported to players are read off this distribution: the
optimist band is the 25th percentile, the pessimist band the 75th, the
average is the expectation n*p, and the worst case assumes every sector
produces the event.

Out-of-domain inputs (k outside 0..n, p outside 0..1) are tolerated and give
degenerate results rather than exceptions. Passing them is still a bug in
the caller.
"""

from expedition.records import DistributionEntry, ScenarioResult

OPTIMIST_PERCENTILE = 0.25
PESSIMIST_PERCENTILE = 0.75


def binomial_coefficient(n: int, k: int) -> int:
    """C(n, k), computed exactly with integer arithmetic.

    Uses the symmetry C(n, k) = C(n, n - k) to keep the loop short. The
    running product after step i is C(n, i + 1), which is always an
    integer, so the floor division never truncates.
    """
    if k < 0 or k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def probability(n: int, k: int, p: float) -> float:
    """P(X = k) for X ~ Binomial(n, p).

    p = 0 and p = 1 are special-cased so we never evaluate 0 ** 0.
    """
    if k < 0 or k > n or not 0 <= p <= 1:
        return 0.0
    if p == 0:
        return 1.0 if k == 0 else 0.0
    if p == 1:
        return 1.0 if k == n else 0.0
    return binomial_coefficient(n, k) * p**k * (1 - p) ** (n - k)


def distribution(n: int, p: float) -> list[DistributionEntry]:
    """The full distribution for k = 0..n.

    The running cumulative is capped at 1 since floating point can push
    the sum a hair over.
    """
    result = []
    cumulative = 0.0
    for k in range(n + 1):
        prob = probability(n, k, p)
        cumulative += prob
        result.append(DistributionEntry(k=k, probability=prob, cumulative=min(cumulative, 1.0)))
    return result


def expected_value(n: int, p: float) -> float:
    return n * p


def percentile(n: int, p: float, target: float) -> int:
    """Smallest k whose cumulative probability reaches target.

    Falls back to n, which covers a cumulative that ends just under 1.0
    because of rounding.
    """
    for entry in distribution(n, p):
        if entry.cumulative >= target:
            return entry.k
    return n


def scenarios(n: int, p: float) -> ScenarioResult:
    """Summarize Binomial(n, p) into the four outcome bands."""
    if n <= 0 or not 0 < p <= 1:
        return ScenarioResult()
    return ScenarioResult(
        optimist=percentile(n, p, OPTIMIST_PERCENTILE),
        average=expected_value(n, p),
        pessimist=percentile(n, p, PESSIMIST_PERCENTILE),
        worst_case=n,
    )
