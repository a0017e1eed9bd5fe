"""Example: score a developer profile with devscope."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from devscope import ProfileSnapshot, RepositoryFact, compute_authenticity, score_profile
from devscope.models import RepositoryContribution, YearData


def main() -> None:
    now = datetime.now(UTC)
    repos = [
        RepositoryFact(
            name_with_owner="octocat/hello-world",
            stargazer_count=120,
            fork_count=30,
            commit_count=80,
            pushed_at=now - timedelta(days=12),
            created_at=now - timedelta(days=900),
            primary_language="Python",
            languages=["Python", "Shell"],
            language_size_bytes=250_000,
        ),
        RepositoryFact(name_with_owner="octocat/linux", is_fork=True),
    ]

    report = compute_authenticity(repos)
    print(f"Authenticity: {report.score} ({report.category})")
    for flag in report.flags:
        print(f"  - {flag}")

    snapshot = ProfileSnapshot(
        login="octocat",
        repositories=repos,
        timeline=[
            YearData(
                year=now.year,
                total_commits=140,
                total_prs=12,
                owned_repos=[RepositoryContribution(commit_count=80, repository=repos[0])],
            ),
        ],
    )
    profile = score_profile(snapshot)
    for category in profile.categories:
        print(f"{category.category}: {category.score}")


if __name__ == "__main__":
    main()
