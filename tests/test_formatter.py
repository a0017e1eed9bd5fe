"""Tests for output formatting."""

from __future__ import annotations

import json
from datetime import datetime

import click

from devscope.formatter import (
    format_authenticity_cli,
    format_cli_output,
    format_json,
    format_markdown,
)
from devscope.models import (
    AuthenticityBreakdown,
    AuthenticityCategory,
    AuthenticityScore,
    ProfileSnapshot,
    RepositoryTally,
)
from devscope.scorer import score_profile


def _make_score(**kwargs) -> AuthenticityScore:
    """Helper to build an AuthenticityScore with sensible defaults."""
    defaults = {
        "score": 75,
        "category": AuthenticityCategory.MEDIUM,
        "breakdown": AuthenticityBreakdown(
            originality_score=20, activity_score=18,
            engagement_score=15, code_ownership_score=22,
        ),
        "flags": [],
        "metadata": RepositoryTally(
            total_repos=10, original_repos=8, forked_repos=2,
            archived_repos=1, template_repos=0,
        ),
    }
    defaults.update(kwargs)
    return AuthenticityScore(**defaults)


class TestFormatAuthenticityCli:
    def test_header(self) -> None:
        out = click.unstyle(format_authenticity_cli(_make_score()))
        assert "Authenticity: Medium (75/100)" in out
        assert "Moderately Authentic" in out

    def test_verbose_breakdown(self) -> None:
        out = click.unstyle(format_authenticity_cli(_make_score(), verbose=True))
        assert "Originality: 20/25" in out
        assert "Code Ownership: 22/25" in out
        assert "Repos: 10 | Original: 8 | Forked: 2" in out

    def test_non_verbose_hides_breakdown(self) -> None:
        out = click.unstyle(format_authenticity_cli(_make_score()))
        assert "Originality" not in out

    def test_flags(self) -> None:
        score = _make_score(flags=["Majority of repositories are forks"])
        out = format_authenticity_cli(score)
        assert "Flags:" in out
        assert "- Majority of repositories are forks" in out

    def test_no_flags_section_when_clean(self) -> None:
        assert "Flags:" not in format_authenticity_cli(_make_score())


class TestFormatMarkdown:
    def test_header(self) -> None:
        md = format_markdown(_make_score(category=AuthenticityCategory.HIGH, score=85))
        assert "## Authenticity: **High** (85/100)" in md
        assert "_Highly Authentic_" in md

    def test_breakdown_table(self) -> None:
        md = format_markdown(_make_score())
        assert "| Component | Score |" in md
        assert "| Engagement | 15/25 |" in md

    def test_metadata_line(self) -> None:
        md = format_markdown(_make_score())
        assert "10 total, 8 original, 2 forked, 1 archived, 0 templates" in md

    def test_flags(self) -> None:
        md = format_markdown(_make_score(flags=["No repositories found"]))
        assert "### Flags" in md
        assert "No repositories found" in md


class TestFormatCliOutput:
    def test_categories_and_metrics(
        self, sample_snapshot: ProfileSnapshot, now: datetime
    ) -> None:
        report = score_profile(sample_snapshot, now=now)
        out = click.unstyle(format_cli_output(report))
        assert "Profile: octo" in out
        assert "Output: 68" in out
        assert "Quality: 67" in out
        assert "Trust: 59" in out
        assert "Activity: 70 (Moderate)" in out
        assert "Authenticity: Medium (62/100)" in out

    def test_verbose_shows_breakdown(
        self, sample_snapshot: ProfileSnapshot, now: datetime
    ) -> None:
        report = score_profile(sample_snapshot, now=now)
        out = click.unstyle(format_cli_output(report, verbose=True))
        assert "recent_commits: 30" in out


class TestFormatJson:
    def test_authenticity(self) -> None:
        data = json.loads(format_json(_make_score()))
        assert data["score"] == 75
        assert data["category"] == "Medium"
        assert data["breakdown"]["originality_score"] == 20
        assert data["metadata"]["total_repos"] == 10

    def test_profile_report(
        self, sample_snapshot: ProfileSnapshot, now: datetime
    ) -> None:
        data = json.loads(format_json(score_profile(sample_snapshot, now=now)))
        assert [c["category"] for c in data["categories"]] == ["OUTPUT", "QUALITY", "TRUST"]
        assert data["metrics"]["authenticity"]["score"] == 62
