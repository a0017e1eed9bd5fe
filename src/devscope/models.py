"""Data models for devscope profile scoring."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devscope.numeric import clamp, round_half_up


class MetricKey(StrEnum):
    """The six atomic developer metrics."""
    ACTIVITY = "activity"
    IMPACT = "impact"
    QUALITY = "quality"
    CONSISTENCY = "consistency"
    AUTHENTICITY = "authenticity"
    COLLABORATION = "collaboration"


class MetricCategory(StrEnum):
    """Dashboard categories, each owning two metrics."""
    OUTPUT = "OUTPUT"
    QUALITY = "QUALITY"
    TRUST = "TRUST"


class AuthenticityCategory(StrEnum):
    """Qualitative bands of the authenticity score."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    SUSPICIOUS = "Suspicious"


def _as_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class RepositoryFact(BaseModel):
    """Facts about one repository of the scored account."""
    name_with_owner: str
    url: str = ""
    description: str | None = None
    is_fork: bool = False
    is_archived: bool = False
    is_template: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    pushed_at: datetime | None = None
    stargazer_count: int = Field(default=0, ge=0)
    fork_count: int = Field(default=0, ge=0)
    watcher_count: int = Field(default=0, ge=0)
    commit_count: int = Field(default=0, ge=0)
    primary_language: str | None = None
    languages: list[str] = []
    language_size_bytes: int = Field(default=0, ge=0)
    is_primary_contributor: bool | None = None

    @field_validator("created_at", "updated_at", "pushed_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value)

    @property
    def is_original(self) -> bool:
        """Neither a fork nor a template."""
        return not self.is_fork and not self.is_template

    @property
    def owner(self) -> str:
        return self.name_with_owner.split("/", 1)[0]

    @property
    def last_activity_at(self) -> datetime | None:
        """Most recent push, falling back to the last metadata update."""
        return self.pushed_at or self.updated_at

    @property
    def is_owned(self) -> bool:
        """Whether the account holds this repository as its primary author.

        Forks are never owned. When ownership is unknown, a non-fork
        repository is assumed to be the account's own work.
        """
        if self.is_fork:
            return False
        if self.is_primary_contributor is None:
            return True
        return self.is_primary_contributor


class RepositoryContribution(BaseModel):
    """Commits made by the account to one repository within a year."""
    commit_count: int = Field(default=0, ge=0)
    repository: RepositoryFact


class YearData(BaseModel):
    """One year of contribution activity."""
    year: int
    total_commits: int = 0
    total_issues: int = 0
    total_prs: int = 0
    total_reviews: int = 0
    owned_repos: list[RepositoryContribution] = []
    contributions: list[RepositoryContribution] = []


class MetricData(BaseModel):
    """A single 0-100 metric score with its qualitative level."""
    model_config = ConfigDict(frozen=True)

    score: int
    level: str
    breakdown: dict[str, float] | None = None
    details: dict[str, float] = {}

    @field_validator("score", mode="before")
    @classmethod
    def _clamp_score(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, int | float):
            return value
        return int(clamp(round_half_up(value), 0, 100))


class ScoredMetric(MetricData):
    """A metric tagged with the key it was computed for."""
    key: MetricKey


class CategoryScore(BaseModel):
    """Score of one category, derived from its two member metrics."""
    model_config = ConfigDict(frozen=True)

    category: MetricCategory
    score: int
    metrics: tuple[ScoredMetric, ScoredMetric]


class AuthenticityBreakdown(BaseModel):
    """The four authenticity sub-scores, each in [0, 25]."""
    model_config = ConfigDict(frozen=True)

    originality_score: int = Field(default=0, ge=0, le=25)
    activity_score: int = Field(default=0, ge=0, le=25)
    engagement_score: int = Field(default=0, ge=0, le=25)
    code_ownership_score: int = Field(default=0, ge=0, le=25)

    @property
    def total(self) -> int:
        return (
            self.originality_score
            + self.activity_score
            + self.engagement_score
            + self.code_ownership_score
        )


class RepositoryTally(BaseModel):
    """Counts over the scored repository set."""
    model_config = ConfigDict(frozen=True)

    total_repos: int = 0
    original_repos: int = 0
    forked_repos: int = 0
    archived_repos: int = 0
    template_repos: int = 0


class AuthenticityScore(BaseModel):
    """Complete authenticity report."""
    model_config = ConfigDict(frozen=True)

    score: int = 0
    category: AuthenticityCategory = AuthenticityCategory.SUSPICIOUS
    breakdown: AuthenticityBreakdown = AuthenticityBreakdown()
    flags: list[str] = []
    metadata: RepositoryTally = RepositoryTally()


class ProfileSnapshot(BaseModel):
    """Everything known about an account at scoring time."""
    login: str
    repositories: list[RepositoryFact] = []
    timeline: list[YearData] = []


class ProfileReport(BaseModel):
    """All metrics, category scores and the authenticity report for a user."""
    login: str
    metrics: dict[MetricKey, MetricData]
    categories: list[CategoryScore]
    authenticity: AuthenticityScore
