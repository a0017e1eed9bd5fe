"""Authenticity scoring: how much of a profile is genuine original work.

The composite score (0-100) is the sum of four sub-scores, each worth up
to 25 points:

- Originality: share of repositories that are neither forks nor templates.
- Activity: recent pushes and commit volume on original repositories.
- Engagement: stars, forks and watchers earned by original repositories.
- Code ownership: repositories authored by the account, their language
  breadth and code size.

Bands: High (80+), Medium (60-79), Low (40-59), Suspicious (below 40).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, NamedTuple

from pydantic import ValidationError

from devscope.config import DevscopeConfig, FlagThresholds
from devscope.models import (
    AuthenticityBreakdown,
    AuthenticityCategory,
    AuthenticityScore,
    MetricData,
    RepositoryFact,
    RepositoryTally,
)
from devscope.numeric import clamp, ratio, round_half_up

logger = logging.getLogger(__name__)

SUB_SCORE_MAX = 25

CATEGORY_BANDS: tuple[tuple[int, AuthenticityCategory], ...] = (
    (80, AuthenticityCategory.HIGH),
    (60, AuthenticityCategory.MEDIUM),
    (40, AuthenticityCategory.LOW),
)

_BADGE_TEXT: dict[AuthenticityCategory, str] = {
    AuthenticityCategory.HIGH: "Highly Authentic",
    AuthenticityCategory.MEDIUM: "Moderately Authentic",
    AuthenticityCategory.LOW: "Limited Activity",
    AuthenticityCategory.SUSPICIOUS: "Suspicious Activity",
}


def categorize_authenticity(score: int) -> AuthenticityCategory:
    """Map a composite score to its band; lower bounds are inclusive."""
    for floor, category in CATEGORY_BANDS:
        if score >= floor:
            return category
    return AuthenticityCategory.SUSPICIOUS


def badge_text(category: AuthenticityCategory | str) -> str:
    """User-facing badge label for an authenticity band."""
    return _BADGE_TEXT[AuthenticityCategory(category)]


@dataclass(frozen=True)
class AuthenticitySignals:
    """Intermediate values the flag rules are evaluated against."""
    tally: RepositoryTally
    breakdown: AuthenticityBreakdown
    recent_ratio: float
    average_commits: float
    total_stars: int
    language_count: int

    @property
    def original_ratio(self) -> float:
        return ratio(self.tally.original_repos, self.tally.total_repos)


class FlagRule(NamedTuple):
    name: str
    message: str
    predicate: Callable[[AuthenticitySignals, FlagThresholds], bool]


def _no_repositories(s: AuthenticitySignals, t: FlagThresholds) -> bool:
    return s.tally.total_repos == 0


def _majority_forks(s: AuthenticitySignals, t: FlagThresholds) -> bool:
    return s.tally.total_repos > 0 and s.tally.forked_repos > s.tally.total_repos / 2


def _low_originality(s: AuthenticitySignals, t: FlagThresholds) -> bool:
    return s.tally.total_repos > 0 and s.original_ratio < t.low_originality_ratio


def _high_fork_ratio(s: AuthenticitySignals, t: FlagThresholds) -> bool:
    return s.tally.total_repos > 0 and s.tally.forked_repos > s.tally.original_repos * 2


def _low_activity(s: AuthenticitySignals, t: FlagThresholds) -> bool:
    return s.tally.total_repos > 0 and s.breakdown.activity_score < t.low_activity_floor


def _stale_repositories(s: AuthenticitySignals, t: FlagThresholds) -> bool:
    return s.tally.total_repos > 0 and s.recent_ratio < t.stale_ratio


def _low_commits(s: AuthenticitySignals, t: FlagThresholds) -> bool:
    return s.tally.total_repos > 0 and s.average_commits < t.low_commit_average


def _very_low_engagement(s: AuthenticitySignals, t: FlagThresholds) -> bool:
    return s.tally.total_repos > 0 and s.breakdown.engagement_score < t.low_engagement_floor


def _no_stars(s: AuthenticitySignals, t: FlagThresholds) -> bool:
    return s.total_stars == 0 and s.tally.total_repos > t.no_stars_min_repos


def _limited_languages(s: AuthenticitySignals, t: FlagThresholds) -> bool:
    return s.tally.total_repos > 0 and s.language_count < t.min_languages


def _mostly_archived(s: AuthenticitySignals, t: FlagThresholds) -> bool:
    return (
        s.tally.total_repos > 0
        and s.tally.archived_repos > s.tally.total_repos * t.archived_ratio
    )


def _no_original_work(s: AuthenticitySignals, t: FlagThresholds) -> bool:
    return s.tally.total_repos > t.many_repos and s.tally.original_repos == 0


FLAG_RULES: tuple[FlagRule, ...] = (
    FlagRule("no_repositories", "No repositories found", _no_repositories),
    FlagRule("majority_forks", "Majority of repositories are forks", _majority_forks),
    FlagRule("low_originality", "Less than 30% original repositories", _low_originality),
    FlagRule(
        "high_fork_ratio", "Significantly more forks than original repos", _high_fork_ratio
    ),
    FlagRule("low_activity", "Low activity in original repositories", _low_activity),
    FlagRule(
        "stale_repositories",
        "Less than 20% repos active in last 90 days",
        _stale_repositories,
    ),
    FlagRule("low_commits", "Low average commits per repository", _low_commits),
    FlagRule(
        "very_low_engagement",
        "Very low engagement on original repositories",
        _very_low_engagement,
    ),
    FlagRule("no_stars", "No stars across all repositories", _no_stars),
    FlagRule(
        "limited_languages",
        "Limited language diversity (less than 2 languages)",
        _limited_languages,
    ),
    FlagRule("mostly_archived", "More than 50% repos are archived", _mostly_archived),
    FlagRule(
        "no_original_work",
        "No original repositories despite having many repos",
        _no_original_work,
    ),
)


def evaluate_flags(
    signals: AuthenticitySignals,
    thresholds: FlagThresholds,
    rules: Iterable[FlagRule] = FLAG_RULES,
) -> list[str]:
    """Return the message of every rule that fires, in rule order."""
    return [rule.message for rule in rules if rule.predicate(signals, thresholds)]


def tally_repositories(repositories: Iterable[RepositoryFact]) -> RepositoryTally:
    """Count total, original, forked, archived and template repositories."""
    total = original = forked = archived = template = 0
    for repo in repositories:
        total += 1
        original += repo.is_original
        forked += repo.is_fork
        archived += repo.is_archived
        template += repo.is_template
    return RepositoryTally(
        total_repos=total,
        original_repos=original,
        forked_repos=forked,
        archived_repos=archived,
        template_repos=template,
    )


def _coerce_repositories(repositories: Any) -> list[RepositoryFact]:
    """Accept models or mappings, skipping entries that cannot be validated."""
    if repositories is None:
        return []
    if isinstance(repositories, str | bytes | Mapping) or not isinstance(
        repositories, Iterable
    ):
        logger.warning(
            "Expected a sequence of repositories, got %s; scoring as empty",
            type(repositories).__name__,
        )
        return []

    accepted: list[RepositoryFact] = []
    for index, item in enumerate(repositories):
        if isinstance(item, RepositoryFact):
            accepted.append(item)
        elif isinstance(item, Mapping):
            try:
                accepted.append(RepositoryFact.model_validate(item))
            except ValidationError as exc:
                logger.warning(
                    "Skipping malformed repository at index %d (%d validation errors)",
                    index,
                    exc.error_count(),
                )
        else:
            logger.warning(
                "Skipping repository at index %d: unsupported type %s",
                index,
                type(item).__name__,
            )
    return accepted


def _bound(points: float) -> int:
    return int(clamp(round_half_up(points), 0, SUB_SCORE_MAX))


class AuthenticityScorer:
    """Compute authenticity reports from a user's repositories."""

    def __init__(self, config: DevscopeConfig) -> None:
        self.config = config

    def score(
        self, repositories: Any, now: datetime | None = None
    ) -> AuthenticityScore:
        """Score *repositories*; empty or malformed input yields a zero report."""
        if now is None:
            now = datetime.now(UTC)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=UTC)

        repos = _coerce_repositories(repositories)
        tally = tally_repositories(repos)
        originals = [r for r in repos if r.is_original]
        owned = [r for r in repos if r.is_owned]

        breakdown = AuthenticityBreakdown(
            originality_score=_bound(self._originality(tally)),
            activity_score=_bound(self._activity(originals, now)),
            engagement_score=_bound(self._engagement(originals)),
            code_ownership_score=_bound(self._code_ownership(owned, tally)),
        )
        total = breakdown.total

        signals = AuthenticitySignals(
            tally=tally,
            breakdown=breakdown,
            recent_ratio=ratio(
                sum(1 for r in repos if self._is_recent(r, now)), tally.total_repos
            ),
            average_commits=ratio(sum(r.commit_count for r in repos), tally.total_repos),
            total_stars=sum(r.stargazer_count for r in repos),
            language_count=len(self._languages(owned)),
        )
        flags = evaluate_flags(signals, self.config.flags)

        logger.debug(
            "Authenticity %d (%s) from %d repos: %s; flags=%s",
            total,
            categorize_authenticity(total).value,
            tally.total_repos,
            breakdown.model_dump(),
            flags,
        )

        return AuthenticityScore(
            score=total,
            category=categorize_authenticity(total),
            breakdown=breakdown,
            flags=flags,
            metadata=tally,
        )

    # ------------------------------------------------------------------
    # Sub-scores (unbounded; callers round and clamp)
    # ------------------------------------------------------------------

    @staticmethod
    def _originality(tally: RepositoryTally) -> float:
        return ratio(tally.original_repos, tally.total_repos) * SUB_SCORE_MAX

    def _activity(self, originals: list[RepositoryFact], now: datetime) -> float:
        """Half for recently pushed originals, half for commit volume."""
        if not originals:
            return 0.0
        half = SUB_SCORE_MAX / 2
        live = [r for r in originals if not r.is_archived]
        recent = sum(1 for r in live if self._is_recent(r, now))
        recent_points = ratio(recent, len(originals)) * half

        avg_commits = sum(r.commit_count for r in live) / len(originals)
        volume_points = min(avg_commits / self.config.authenticity.commit_target, 1.0) * half
        return recent_points + volume_points

    def _engagement(self, originals: list[RepositoryFact]) -> float:
        """Log-scaled stars, forks and watchers on original work only."""
        cfg = self.config.authenticity
        stars = sum(r.stargazer_count for r in originals)
        forks = sum(r.fork_count for r in originals)
        watchers = sum(r.watcher_count for r in originals)
        return (
            min(math.log10(stars + 1) * cfg.log_factor, cfg.star_cap)
            + min(math.log10(forks + 1) * cfg.log_factor, cfg.fork_cap)
            + min(math.log10(watchers + 1) * cfg.log_factor, cfg.watcher_cap)
        )

    def _code_ownership(
        self, owned: list[RepositoryFact], tally: RepositoryTally
    ) -> float:
        cfg = self.config.authenticity
        if not owned:
            return 0.0
        ownership = ratio(len(owned), tally.total_repos) * cfg.ownership_points
        languages = min(len(self._languages(owned)) / cfg.language_target, 1.0)
        avg_size = sum(r.language_size_bytes for r in owned) / len(owned)
        size = min(avg_size / cfg.code_size_target, 1.0)
        return ownership + languages * cfg.language_points + size * cfg.code_size_points

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _is_recent(self, repo: RepositoryFact, now: datetime) -> bool:
        last = repo.last_activity_at
        if last is None:
            return False
        age_days = (now - last).total_seconds() / 86400
        return age_days <= self.config.authenticity.recent_activity_days

    @staticmethod
    def _languages(repos: list[RepositoryFact]) -> set[str]:
        names: set[str] = set()
        for repo in repos:
            if repo.primary_language:
                names.add(repo.primary_language)
            names.update(lang for lang in repo.languages if lang)
        return names


def compute_authenticity(
    repositories: Any,
    config: DevscopeConfig | None = None,
    now: datetime | None = None,
) -> AuthenticityScore:
    """Convenience function: score *repositories* with default settings."""
    return AuthenticityScorer(config or DevscopeConfig()).score(repositories, now=now)


def authenticity_metric(report: AuthenticityScore) -> MetricData:
    """Expose an authenticity report as the ``authenticity`` metric."""
    return MetricData(
        score=report.score,
        level=report.category.value,
        breakdown={k: float(v) for k, v in report.breakdown.model_dump().items()},
        details={k: float(v) for k, v in report.metadata.model_dump().items()},
    )
