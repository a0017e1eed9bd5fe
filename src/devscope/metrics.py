"""Timeline-based calculators for the five non-authenticity metrics.

Every calculator takes the yearly contribution timeline of a user and
returns a :class:`MetricData` whose breakdown follows the component schema
declared in :mod:`devscope.catalog`. An empty timeline scores 0 at the
lowest level.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import UTC, datetime

from devscope.models import MetricData, RepositoryContribution, RepositoryFact, YearData
from devscope.numeric import ratio, round_half_up

ACTIVITY_LEVELS = ((71, "High"), (41, "Moderate"), (0, "Low"))
IMPACT_LEVELS = (
    (81, "Exceptional"), (61, "Strong"), (41, "Moderate"), (21, "Low"), (0, "Minimal"),
)
QUALITY_LEVELS = ((81, "Excellent"), (61, "Strong"), (41, "Good"), (21, "Fair"), (0, "Weak"))
CONSISTENCY_LEVELS = ((81, "Excellent"), (61, "High"), (41, "Moderate"), (0, "Low"))
COLLABORATION_LEVELS = CONSISTENCY_LEVELS

# (minimum, points) tiers, checked top-down
_STAR_TIERS = ((10_000, 35), (5_000, 30), (1_000, 25), (500, 20), (100, 15), (50, 10), (10, 5))
_FORK_TIERS = ((1_000, 20), (500, 16), (100, 12), (50, 8), (10, 4))
_STACK_TIERS = ((10, 10), (7, 8), (5, 6), (3, 4), (1, 2))
_MATURITY_TIERS = ((5, 15), (3, 12), (2, 9), (1, 6))


def level_for(score: int, levels: tuple[tuple[int, str], ...]) -> str:
    """Return the first label whose floor *score* reaches."""
    for floor, label in levels:
        if score >= floor:
            return label
    return levels[-1][1]


def _tier(value: float, tiers: tuple[tuple[float, int], ...]) -> int:
    for minimum, points in tiers:
        if value >= minimum:
            return points
    return 0


def _newest(timeline: list[YearData], count: int) -> list[YearData]:
    return sorted(timeline, key=lambda y: y.year, reverse=True)[:count]


def _unique(entries: Iterable[RepositoryContribution]) -> list[RepositoryFact]:
    seen: dict[str, RepositoryFact] = {}
    for entry in entries:
        seen.setdefault(entry.repository.name_with_owner, entry.repository)
    return list(seen.values())


def _result(
    points: dict[str, float],
    levels: tuple[tuple[int, str], ...],
    details: dict[str, float],
) -> MetricData:
    score = min(round_half_up(sum(points.values())), 100)
    return MetricData(
        score=score,
        level=level_for(score, levels),
        breakdown={name: float(round_half_up(value)) for name, value in points.items()},
        details=details,
    )


def _empty(components: tuple[str, ...], levels: tuple[tuple[int, str], ...]) -> MetricData:
    return MetricData(
        score=0,
        level=levels[-1][1],
        breakdown={name: 0.0 for name in components},
    )


def calculate_activity(timeline: list[YearData]) -> MetricData:
    """Recent commit volume, active years and repository spread.

    The timeline is yearly, so "last 3 months" is approximated by the newest
    year and "last 12 months" by the two newest years.
    """
    if not timeline:
        return _empty(("recent_commits", "consistency", "diversity"), ACTIVITY_LEVELS)

    last_quarter = _newest(timeline, 1)
    last_year = _newest(timeline, 2)

    recent_commits = sum(y.total_commits for y in last_quarter)
    recent_points = min(recent_commits / 200 * 40, 40)

    active_years = sum(1 for y in last_year if y.total_commits > 0)
    consistency_points = min(ratio(active_years, len(last_year)) * 30, 30)

    unique_repos = len(_unique(
        entry for y in last_quarter for entry in (*y.owned_repos, *y.contributions)
    ))
    if unique_repos > 15:
        diversity_points = 25  # too scattered
    elif unique_repos >= 8:
        diversity_points = 30
    elif unique_repos >= 4:
        diversity_points = 20
    elif unique_repos >= 1:
        diversity_points = 10
    else:
        diversity_points = 0

    return _result(
        {
            "recent_commits": recent_points,
            "consistency": consistency_points,
            "diversity": diversity_points,
        },
        ACTIVITY_LEVELS,
        {
            "recent_commits": recent_commits,
            "active_years": active_years,
            "unique_repos": unique_repos,
        },
    )


def calculate_impact(timeline: list[YearData]) -> MetricData:
    """Reach of the user's repositories: stars, forks, PRs and issues."""
    if not timeline:
        return _empty(("stars", "forks", "contributors", "reach", "engagement"), IMPACT_LEVELS)

    repos = _unique(
        entry for y in timeline for entry in (*y.owned_repos, *y.contributions)
    )
    total_stars = sum(r.stargazer_count for r in repos)
    total_forks = sum(r.fork_count for r in repos)
    total_watchers = sum(r.watcher_count for r in repos)
    total_prs = sum(y.total_prs for y in timeline)
    total_issues = sum(y.total_issues for y in timeline)

    return _result(
        {
            "stars": _tier(total_stars, _STAR_TIERS),
            "forks": _tier(total_forks, _FORK_TIERS),
            # forks stand in for the number of contributors attracted
            "contributors": min(total_forks / 100 * 15, 15),
            "reach": min((total_stars + total_forks) / 500 * 20, 20),
            "engagement": min((total_prs + total_issues) / 200 * 10, 10),
        },
        IMPACT_LEVELS,
        {
            "total_stars": total_stars,
            "total_forks": total_forks,
            "total_watchers": total_watchers,
            "total_prs": total_prs,
            "total_issues": total_issues,
        },
    )


def calculate_quality(
    timeline: list[YearData], now: datetime | None = None
) -> MetricData:
    """Originality, documentation, ownership, maturity and stack breadth."""
    if not timeline:
        return _empty(
            ("originality", "documentation", "ownership", "maturity", "stack"),
            QUALITY_LEVELS,
        )
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    owned = _unique(entry for y in timeline for entry in y.owned_repos)
    contributed = _unique(entry for y in timeline for entry in y.contributions)

    non_fork = sum(1 for r in owned if not r.is_fork)
    documented = sum(1 for r in owned if r.description and r.description.strip())

    ages = [
        (now - r.created_at).total_seconds() / (86400 * 365)
        for r in owned
        if r.created_at is not None
    ]
    avg_age = sum(ages) / len(ages) if ages else 0.0
    maturity_points = _tier(avg_age, _MATURITY_TIERS) or (3 if avg_age > 0 else 0)

    languages = {r.primary_language for r in owned if r.primary_language}

    return _result(
        {
            "originality": ratio(non_fork, len(owned)) * 30,
            "documentation": ratio(documented, len(owned)) * 25,
            "ownership": ratio(len(owned), len(owned) + len(contributed)) * 20,
            "maturity": maturity_points,
            "stack": _tier(len(languages), _STACK_TIERS),
        },
        QUALITY_LEVELS,
        {
            "non_fork_repos": non_fork,
            "owned_repos": len(owned),
            "documented_repos": documented,
            "contributed_repos": len(contributed),
            "avg_repo_age_years": round(avg_age, 2),
            "unique_languages": len(languages),
        },
    )


def _coefficient_of_variation(values: list[int]) -> float:
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    if mean == 0:
        return 0.0
    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return math.sqrt(variance) / mean


def _longest_streak(values: list[int]) -> int:
    longest = current = 0
    for value in values:
        current = current + 1 if value > 0 else 0
        longest = max(longest, current)
    return longest


def calculate_consistency(timeline: list[YearData]) -> MetricData:
    """Even, unbroken and recent yearly commit activity."""
    if not timeline:
        return _empty(("regularity", "streak", "recency"), CONSISTENCY_LEVELS)

    ordered = sorted(timeline, key=lambda y: y.year)
    commits = [y.total_commits for y in ordered]
    cv = _coefficient_of_variation(commits)
    streak = _longest_streak(commits)
    recent_active = sum(1 for y in ordered[-2:] if y.total_commits > 0)

    return _result(
        {
            "regularity": max(0.0, 50 - cv * 25),
            "streak": min(streak / 5 * 30, 30),
            "recency": recent_active / 2 * 20,
        },
        CONSISTENCY_LEVELS,
        {
            "active_years": sum(1 for c in commits if c > 0),
            "total_years": len(commits),
            "longest_streak": streak,
            "coefficient_of_variation": round(cv, 2),
        },
    )


def calculate_collaboration(timeline: list[YearData]) -> MetricData:
    """Work on other people's repositories relative to one's own."""
    if not timeline:
        return _empty(("contribution_ratio", "diversity", "engagement"), COLLABORATION_LEVELS)

    owned: set[str] = set()
    contributed: set[str] = set()
    orgs: set[str] = set()
    contribution_commits = 0
    for year in timeline:
        for entry in year.owned_repos:
            owned.add(entry.repository.name_with_owner)
        for entry in year.contributions:
            contributed.add(entry.repository.name_with_owner)
            orgs.add(entry.repository.owner)
            contribution_commits += entry.commit_count

    percentage = ratio(len(contributed), len(owned) + len(contributed)) * 100
    avg_commits = ratio(contribution_commits, len(contributed))

    return _result(
        {
            "contribution_ratio": min(percentage, 50),
            "diversity": min(len(contributed) / 10 * 30, 30),
            "engagement": min(avg_commits / 5 * 20, 20),
        },
        COLLABORATION_LEVELS,
        {
            "owned_repos": len(owned),
            "contributed_repos": len(contributed),
            "contribution_percentage": round_half_up(percentage),
            "unique_orgs": len(orgs),
        },
    )
