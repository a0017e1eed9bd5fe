"""Output formatting for devscope reports."""

from __future__ import annotations

import click
from pydantic import BaseModel

from devscope.authenticity import badge_text
from devscope.catalog import CATEGORY_CONFIGS, METRIC_CONFIGS
from devscope.models import AuthenticityCategory, AuthenticityScore, ProfileReport

_CATEGORY_COLORS: dict[AuthenticityCategory, str] = {
    AuthenticityCategory.HIGH: "green",
    AuthenticityCategory.MEDIUM: "yellow",
    AuthenticityCategory.LOW: "magenta",
    AuthenticityCategory.SUSPICIOUS: "red",
}

_BREAKDOWN_LABELS: dict[str, str] = {
    "originality_score": "Originality",
    "activity_score": "Activity",
    "engagement_score": "Engagement",
    "code_ownership_score": "Code Ownership",
}


def _score_color(score: int) -> str:
    if score >= 70:
        return "green"
    if score >= 40:
        return "yellow"
    return "red"


def format_authenticity_cli(score: AuthenticityScore, verbose: bool = False) -> str:
    """Format an authenticity report for terminal display with color."""
    color = _CATEGORY_COLORS.get(score.category, "white")
    category_styled = click.style(score.category.value, fg=color, bold=True)
    score_styled = click.style(f"{score.score}/100", bold=True)

    lines: list[str] = [
        f"Authenticity: {category_styled} ({score_styled}) - {badge_text(score.category)}",
    ]

    if verbose:
        lines.append("")
        for name, value in score.breakdown.model_dump().items():
            lines.append(f"  {_BREAKDOWN_LABELS[name]}: {value}/25")
        meta = score.metadata
        lines.append("")
        lines.append(
            f"Repos: {meta.total_repos} | Original: {meta.original_repos} | "
            f"Forked: {meta.forked_repos} | Archived: {meta.archived_repos} | "
            f"Templates: {meta.template_repos}"
        )

    if score.flags:
        lines.append("")
        lines.append("Flags:")
        for flag in score.flags:
            lines.append(f"  - {flag}")

    return "\n".join(lines)


def format_cli_output(report: ProfileReport, verbose: bool = False) -> str:
    """Format a full profile report for terminal display."""
    lines: list[str] = [f"Profile: {click.style(report.login, bold=True)}", ""]

    for category in report.categories:
        title = CATEGORY_CONFIGS[category.category].title
        styled = click.style(str(category.score), fg=_score_color(category.score), bold=True)
        lines.append(f"{title}: {styled}")
        for metric in category.metrics:
            metric_title = METRIC_CONFIGS[metric.key].title
            lines.append(f"  {metric_title}: {metric.score} ({metric.level})")
            if verbose and metric.breakdown:
                for name, value in metric.breakdown.items():
                    lines.append(f"    {name}: {value:.0f}")

    lines.append("")
    lines.append(format_authenticity_cli(report.authenticity, verbose=verbose))
    return "\n".join(lines)


def format_markdown(score: AuthenticityScore) -> str:
    """Format an authenticity report as Markdown, e.g. for an issue comment."""
    lines: list[str] = [
        f"## Authenticity: **{score.category.value}** ({score.score}/100)",
        "",
        f"_{badge_text(score.category)}_",
        "",
        "| Component | Score |",
        "|-----------|-------|",
    ]
    for name, value in score.breakdown.model_dump().items():
        lines.append(f"| {_BREAKDOWN_LABELS[name]} | {value}/25 |")
    lines.append("")

    meta = score.metadata
    lines.append(
        f"**Repositories:** {meta.total_repos} total, {meta.original_repos} original, "
        f"{meta.forked_repos} forked, {meta.archived_repos} archived, "
        f"{meta.template_repos} templates"
    )
    lines.append("")

    if score.flags:
        lines.append("### Flags")
        lines.append("")
        for flag in score.flags:
            lines.append(f"- ⚠️ {flag}")
        lines.append("")

    return "\n".join(lines)


def format_json(result: BaseModel) -> str:
    """Format any report model as JSON."""
    return result.model_dump_json(indent=2)
