"""Shared test fixtures for devscope tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from devscope.models import (
    MetricData,
    MetricKey,
    ProfileSnapshot,
    RepositoryContribution,
    RepositoryFact,
    YearData,
)

NOW = datetime(2025, 6, 1, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def sample_metrics() -> dict[MetricKey, MetricData]:
    return {
        MetricKey.ACTIVITY: MetricData(
            score=85, level="High",
            breakdown={"recent_commits": 38, "consistency": 27, "diversity": 20},
        ),
        MetricKey.IMPACT: MetricData(
            score=65, level="Moderate",
            breakdown={"stars": 25, "forks": 15, "contributors": 10, "reach": 10, "engagement": 5},
        ),
        MetricKey.QUALITY: MetricData(
            score=78, level="Strong",
            breakdown={
                "originality": 25, "documentation": 20, "ownership": 15,
                "maturity": 10, "stack": 8,
            },
        ),
        MetricKey.CONSISTENCY: MetricData(
            score=82, level="High",
            breakdown={"regularity": 40, "streak": 25, "recency": 17},
        ),
        MetricKey.AUTHENTICITY: MetricData(
            score=45, level="Low",
            breakdown={
                "originality_score": 15, "activity_score": 10,
                "engagement_score": 10, "code_ownership_score": 10,
            },
        ),
        MetricKey.COLLABORATION: MetricData(
            score=55, level="Moderate",
            breakdown={"contribution_ratio": 25, "diversity": 18, "engagement": 12},
        ),
    }


@pytest.fixture
def app_repo() -> RepositoryFact:
    return RepositoryFact(
        name_with_owner="octo/app",
        description="App",
        stargazer_count=120,
        fork_count=15,
        watcher_count=8,
        commit_count=160,
        created_at=datetime(2021, 6, 1, tzinfo=UTC),
        pushed_at=NOW - timedelta(days=5),
        primary_language="Python",
        languages=["Python", "Shell"],
        language_size_bytes=300_000,
    )


@pytest.fixture
def cli_repo() -> RepositoryFact:
    return RepositoryFact(
        name_with_owner="octo/cli",
        stargazer_count=10,
        commit_count=40,
        created_at=datetime(2023, 6, 1, tzinfo=UTC),
        pushed_at=NOW - timedelta(days=200),
        primary_language="Go",
        languages=["Go"],
        language_size_bytes=50_000,
    )


@pytest.fixture
def lib_repo() -> RepositoryFact:
    return RepositoryFact(
        name_with_owner="other/lib",
        stargazer_count=900,
        fork_count=60,
        created_at=datetime(2018, 1, 1, tzinfo=UTC),
        primary_language="Rust",
    )


@pytest.fixture
def sample_timeline(
    app_repo: RepositoryFact, cli_repo: RepositoryFact, lib_repo: RepositoryFact
) -> list[YearData]:
    return [
        YearData(
            year=2024,
            total_commits=100,
            total_prs=5,
            total_issues=5,
            owned_repos=[
                RepositoryContribution(commit_count=60, repository=app_repo),
                RepositoryContribution(commit_count=40, repository=cli_repo),
            ],
        ),
        YearData(
            year=2025,
            total_commits=150,
            total_prs=20,
            total_issues=10,
            owned_repos=[RepositoryContribution(commit_count=100, repository=app_repo)],
            contributions=[RepositoryContribution(commit_count=50, repository=lib_repo)],
        ),
        YearData(year=2023, total_commits=0),
    ]


@pytest.fixture
def sample_snapshot(
    app_repo: RepositoryFact,
    cli_repo: RepositoryFact,
    sample_timeline: list[YearData],
) -> ProfileSnapshot:
    return ProfileSnapshot(
        login="octo",
        repositories=[
            app_repo,
            cli_repo,
            RepositoryFact(name_with_owner="octo/linux", is_fork=True, stargazer_count=3),
        ],
        timeline=sample_timeline,
    )
