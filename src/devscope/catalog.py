"""Metric and category catalog.

Six metrics are grouped into three dashboard categories:

- OUTPUT: activity + impact
- QUALITY: quality + consistency
- TRUST: authenticity + collaboration

Each metric also declares its breakdown schema, the named components a
calculator reports and the maximum points each contributes. The tables are
read-only and checked once at import time.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

from devscope.models import MetricCategory, MetricKey


class BreakdownComponent(NamedTuple):
    name: str
    max_points: float


class MetricConfig(NamedTuple):
    key: MetricKey
    title: str
    description: str
    components: tuple[BreakdownComponent, ...]


class CategoryConfig(NamedTuple):
    name: MetricCategory
    title: str
    description: str
    metrics: tuple[MetricKey, MetricKey]


METRIC_CONFIGS: MappingProxyType[MetricKey, MetricConfig] = MappingProxyType({
    MetricKey.ACTIVITY: MetricConfig(
        key=MetricKey.ACTIVITY,
        title="Activity",
        description="Development frequency and contribution volume",
        components=(
            BreakdownComponent("recent_commits", 40),
            BreakdownComponent("consistency", 30),
            BreakdownComponent("diversity", 30),
        ),
    ),
    MetricKey.IMPACT: MetricConfig(
        key=MetricKey.IMPACT,
        title="Impact",
        description="Project reach through stars, forks, and engagement",
        components=(
            BreakdownComponent("stars", 35),
            BreakdownComponent("forks", 20),
            BreakdownComponent("contributors", 15),
            BreakdownComponent("reach", 20),
            BreakdownComponent("engagement", 10),
        ),
    ),
    MetricKey.QUALITY: MetricConfig(
        key=MetricKey.QUALITY,
        title="Quality",
        description="Code standards, documentation, and originality",
        components=(
            BreakdownComponent("originality", 30),
            BreakdownComponent("documentation", 25),
            BreakdownComponent("ownership", 20),
            BreakdownComponent("maturity", 15),
            BreakdownComponent("stack", 10),
        ),
    ),
    MetricKey.CONSISTENCY: MetricConfig(
        key=MetricKey.CONSISTENCY,
        title="Consistency",
        description="Regular contribution patterns over time",
        components=(
            BreakdownComponent("regularity", 50),
            BreakdownComponent("streak", 30),
            BreakdownComponent("recency", 20),
        ),
    ),
    MetricKey.AUTHENTICITY: MetricConfig(
        key=MetricKey.AUTHENTICITY,
        title="Authenticity",
        description="Profile genuineness and original work verification",
        components=(
            BreakdownComponent("originality_score", 25),
            BreakdownComponent("activity_score", 25),
            BreakdownComponent("engagement_score", 25),
            BreakdownComponent("code_ownership_score", 25),
        ),
    ),
    MetricKey.COLLABORATION: MetricConfig(
        key=MetricKey.COLLABORATION,
        title="Collaboration",
        description="Team contributions and open source involvement",
        components=(
            BreakdownComponent("contribution_ratio", 50),
            BreakdownComponent("diversity", 30),
            BreakdownComponent("engagement", 20),
        ),
    ),
})

CATEGORY_CONFIGS: MappingProxyType[MetricCategory, CategoryConfig] = MappingProxyType({
    MetricCategory.OUTPUT: CategoryConfig(
        name=MetricCategory.OUTPUT,
        title="Output",
        description="Productivity and project reach",
        metrics=(MetricKey.ACTIVITY, MetricKey.IMPACT),
    ),
    MetricCategory.QUALITY: CategoryConfig(
        name=MetricCategory.QUALITY,
        title="Quality",
        description="Code standards and work habits",
        metrics=(MetricKey.QUALITY, MetricKey.CONSISTENCY),
    ),
    MetricCategory.TRUST: CategoryConfig(
        name=MetricCategory.TRUST,
        title="Trust",
        description="Profile authenticity and teamwork",
        metrics=(MetricKey.AUTHENTICITY, MetricKey.COLLABORATION),
    ),
})

CATEGORY_ORDER: tuple[MetricCategory, ...] = (
    MetricCategory.OUTPUT,
    MetricCategory.QUALITY,
    MetricCategory.TRUST,
)


def category_for(key: MetricKey | str) -> MetricCategory:
    """Return the category that owns metric *key*."""
    metric = MetricKey(key)
    for config in CATEGORY_CONFIGS.values():
        if metric in config.metrics:
            return config.name
    raise KeyError(metric)


def _validate_catalog() -> None:
    if set(METRIC_CONFIGS) != set(MetricKey):
        raise RuntimeError("every MetricKey needs a MetricConfig")
    if set(CATEGORY_CONFIGS) != set(MetricCategory):
        raise RuntimeError("every MetricCategory needs a CategoryConfig")
    if set(CATEGORY_ORDER) != set(MetricCategory) or len(CATEGORY_ORDER) != len(MetricCategory):
        raise RuntimeError("CATEGORY_ORDER must list each category once")

    owned = [key for config in CATEGORY_CONFIGS.values() for key in config.metrics]
    if sorted(owned) != sorted(MetricKey):
        raise RuntimeError("each metric must belong to exactly one category")

    for key, config in METRIC_CONFIGS.items():
        if config.key != key:
            raise RuntimeError(f"metric config registered under wrong key: {key}")
        if sum(c.max_points for c in config.components) != 100:
            raise RuntimeError(f"breakdown of {key} must total 100 points")


_validate_catalog()
