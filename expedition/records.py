"""Structured results for the expedition estimator.

These dataclasses capture everything the core hands back to its callers
(per-category outcome bands, validation verdicts, usage statistics) so that
the text renderer and the Streamlit UI can consume the same objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import isfinite

from expedition.types import Category, EventName, LimitKind, Resource, SectorName, Severity


@dataclass
class Sector:
    """One entry of the planet sector catalog."""

    name: SectorName

    max_per_planet: int
    """How many sectors of this type a single planet can hold. Always >= 1,
    since usage percentages divide by it."""

    events: dict[EventName, float]
    """Baseline exploration weight table. Never modified in place; the
    estimator clones it before running effects over it."""

    is_special: bool = False
    """Special sectors (LANDING, LOST) don't count towards MAX_SECTORS."""

    def __post_init__(self) -> None:
        if self.max_per_planet < 1:
            raise ValueError(f"{self.name}: max_per_planet must be at least 1, got {self.max_per_planet}")
        for event, weight in self.events.items():
            if not isfinite(weight) or weight < 0:
                raise ValueError(f"{self.name}: weight for {event} must be finite and >= 0, got {weight}")


@dataclass(frozen=True)
class Classification:
    """What the classifier says about a single event identifier."""

    category: Category
    severity: Severity


@dataclass
class DistributionEntry:
    """One row of a discrete occurrence distribution."""

    k: int
    """Number of occurrences."""

    probability: float
    """P(X = k)."""

    cumulative: float
    """P(X <= k), clamped to at most 1."""


@dataclass
class ScenarioResult:
    """Four points summarizing how often one category of event occurs."""

    optimist: float = 0
    """25th percentile of the occurrence count."""

    average: float = 0
    """Expected occurrence count."""

    pessimist: float = 0
    """75th percentile of the occurrence count."""

    worst_case: float = 0
    """Every contributing sector produces the event."""


@dataclass
class ValidationResult:
    """Verdict on a prospective selection change.

    ``current`` and ``maximum`` hold whichever counts the deciding check
    looked at: the regular sector total for ``kind == "total"``, the count
    of one sector type for ``kind == "sector"``.
    """

    is_valid: bool
    current: int = 0
    maximum: int = 0
    message: str | None = None
    kind: LimitKind | None = None

    @property
    def current_total(self) -> int:
        return self.current

    @property
    def max_total(self) -> int:
        return self.maximum

    @property
    def current_count(self) -> int:
        return self.current

    @property
    def max_allowed(self) -> int:
        return self.maximum


@dataclass
class SectorUsage:
    """How much of one sector type's per-planet allowance is used."""

    current: int
    max: int
    remaining: int
    is_at_limit: bool
    percentage: int


@dataclass
class SectorAvailability:
    """Whether the selection UI should offer a sector, and what to say."""

    should_disable: bool
    tooltip: str


@dataclass
class SectorProbability:
    """One sector instance's chance of producing a category of event."""

    index: int
    """Position of the sector in the selection."""

    sector: SectorName
    probability: float


@dataclass
class CategoryOutcome:
    """Outcome bands for one event category across an expedition."""

    category: Category
    severity: Severity

    trials: int
    """Number of sectors with a nonzero chance of this category."""

    probability: float
    """Representative per-sector probability. Exact when ``homogeneous``,
    otherwise the mean of the contributing sectors."""

    homogeneous: bool
    """True when every contributing sector has the same probability, in
    which case the bands come straight from the binomial distribution."""

    scenarios: ScenarioResult = field(default_factory=ScenarioResult)
    sectors: list[SectorProbability] = field(default_factory=list)


@dataclass
class SectorBreakdown:
    """Modified event probabilities for one sector type in the selection."""

    count: int
    events: dict[EventName, float] = field(default_factory=dict)


@dataclass
class ResourceYield:
    """How much of one resource an expedition brings back.

    More is better here, so the bands run the other way from ScenarioResult:
    the pessimist band is the 25th percentile of the total and the optimist
    band the 75th.
    """

    resource: Resource
    pessimist: float = 0
    average: float = 0
    optimist: float = 0

    maximum: float = 0
    """Largest total with a nonzero chance."""


@dataclass
class ExpeditionReport:
    """Top-level result of estimating an expedition."""

    sectors: list[SectorName] = field(default_factory=list)

    regular_sectors: int = 0
    """Sectors counting towards MAX_SECTORS, per the catalog used."""

    effects: list[str] = field(default_factory=list)
    outcomes: dict[Category, CategoryOutcome] = field(default_factory=dict)
    resources: dict[Resource, ResourceYield] = field(default_factory=dict)
    breakdown: dict[SectorName, SectorBreakdown] = field(default_factory=dict)
    unknown_events: list[EventName] = field(default_factory=list)
    validation: ValidationResult | None = None
