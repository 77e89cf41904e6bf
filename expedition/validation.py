"""
Sector selection limits.

An expedition may contain at most MAX_SECTORS regular sectors; the special
LANDING and LOST sectors don't count towards that total. Independently,
each sector type can appear at most ``max_per_planet`` times, since a
planet only has so many forests.

Breaking a limit is a normal, expected outcome of clicking around the
selection UI, so every check returns a ValidationResult instead of raising.
"""

from __future__ import annotations

from collections import Counter

from expedition.data import DEFAULT_MAX_PER_PLANET, MAX_SECTORS, SECTORS, format_sector_name
from expedition.records import Sector, SectorAvailability, SectorUsage, ValidationResult
from expedition.types import SectorName


def max_per_planet(sector: SectorName, catalog: dict[SectorName, Sector] = SECTORS) -> int:
    """Per-planet limit for a sector type, with a default for types the
    catalog doesn't know."""
    entry = catalog.get(sector)
    return entry.max_per_planet if entry else DEFAULT_MAX_PER_PLANET


def is_special(sector: SectorName, catalog: dict[SectorName, Sector] = SECTORS) -> bool:
    entry = catalog.get(sector)
    return entry.is_special if entry else False


def regular_count(selection: list[SectorName], catalog: dict[SectorName, Sector] = SECTORS) -> int:
    """Number of selected sectors that count towards MAX_SECTORS."""
    return sum(1 for s in selection if not is_special(s, catalog))


def validate_total_sector_limit(
    selection: list[SectorName],
    catalog: dict[SectorName, Sector] = SECTORS,
) -> ValidationResult:
    """Is there room for one more regular sector?"""
    current = regular_count(selection, catalog)
    is_valid = current < MAX_SECTORS
    return ValidationResult(
        is_valid=is_valid,
        current=current,
        maximum=MAX_SECTORS,
        message=None if is_valid else (
            f"Maximum {MAX_SECTORS} sectors allowed "
            f"(currently have {current}, excluding LANDING/LOST)"
        ),
        kind="total",
    )


def validate_sector_limit(
    sector: SectorName,
    selection: list[SectorName],
    catalog: dict[SectorName, Sector] = SECTORS,
) -> ValidationResult:
    """Is there room for one more sector of this type on the planet?"""
    maximum = max_per_planet(sector, catalog)
    current = selection.count(sector)
    is_valid = current < maximum
    return ValidationResult(
        is_valid=is_valid,
        current=current,
        maximum=maximum,
        message=None if is_valid else (
            f"Maximum {maximum} {sector} sectors allowed per planet "
            f"(currently have {current})"
        ),
        kind="sector",
    )


def validate_add_sector(
    sector: SectorName,
    selection: list[SectorName],
    catalog: dict[SectorName, Sector] = SECTORS,
) -> ValidationResult:
    """Check whether sector may be appended to selection.

    The total limit is checked first and short-circuits; it only applies
    to regular sectors, so LANDING and LOST can still be added to a full
    expedition (subject to their own per-planet limits).
    """
    if not is_special(sector, catalog):
        total = validate_total_sector_limit(selection, catalog)
        if not total.is_valid:
            return total

    per_type = validate_sector_limit(sector, selection, catalog)
    if not per_type.is_valid:
        return per_type

    return ValidationResult(is_valid=True)


def validate_selection(
    selection: list[SectorName],
    catalog: dict[SectorName, Sector] = SECTORS,
) -> ValidationResult:
    """Check an entire selection against both limits and the catalog.

    Unlike validate_add_sector, which asks about a prospective addition,
    this asks whether an existing selection is already legal: the limits
    are inclusive here. The first problem found is reported.
    """
    for sector in dict.fromkeys(selection):
        if sector not in catalog:
            return ValidationResult(
                is_valid=False,
                message=f"Unknown sector type {sector!r}",
                kind="sector",
            )

    current = regular_count(selection, catalog)
    if current > MAX_SECTORS:
        return ValidationResult(
            is_valid=False,
            current=current,
            maximum=MAX_SECTORS,
            message=(
                f"Maximum {MAX_SECTORS} sectors allowed "
                f"(currently have {current}, excluding LANDING/LOST)"
            ),
            kind="total",
        )

    for sector, count in Counter(selection).items():
        maximum = max_per_planet(sector, catalog)
        if count > maximum:
            return ValidationResult(
                is_valid=False,
                current=count,
                maximum=maximum,
                message=(
                    f"Maximum {maximum} {sector} sectors allowed per planet "
                    f"(currently have {count})"
                ),
                kind="sector",
            )

    return ValidationResult(is_valid=True, current=current, maximum=MAX_SECTORS)


def sector_usage_stats(
    selection: list[SectorName],
    catalog: dict[SectorName, Sector] = SECTORS,
) -> dict[SectorName, SectorUsage]:
    """Usage of every catalog sector type, for progress indicators.

    Sector rejects max_per_planet < 1, so the percentage never
    divides by zero.
    """
    counts = Counter(selection)
    stats = {}
    for name, sector in catalog.items():
        current = counts[name]
        maximum = sector.max_per_planet
        stats[name] = SectorUsage(
            current=current,
            max=maximum,
            remaining=maximum - current,
            is_at_limit=current >= maximum,
            percentage=round(current / maximum * 100),
        )
    return stats


def sector_availability(
    sector: SectorName,
    selection: list[SectorName],
    catalog: dict[SectorName, Sector] = SECTORS,
) -> SectorAvailability:
    """Whether the UI should disable adding sector, plus tooltip text
    like "Forest (2/4)"."""
    full = not is_special(sector, catalog) and regular_count(selection, catalog) >= MAX_SECTORS
    current = selection.count(sector)
    maximum = max_per_planet(sector, catalog)

    tooltip = f"{format_sector_name(sector)} ({current}/{maximum})"
    if full:
        tooltip += f" - Regular Sectors Full ({MAX_SECTORS}/{MAX_SECTORS})"

    return SectorAvailability(should_disable=full or current >= maximum, tooltip=tooltip)
