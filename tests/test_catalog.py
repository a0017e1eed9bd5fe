"""Tests for the metric catalog."""

from __future__ import annotations

import pytest

from devscope.catalog import (
    CATEGORY_CONFIGS,
    CATEGORY_ORDER,
    METRIC_CONFIGS,
    category_for,
)
from devscope.models import MetricCategory, MetricKey


class TestMetricConfigs:
    def test_every_metric_configured(self) -> None:
        assert set(METRIC_CONFIGS) == set(MetricKey)

    @pytest.mark.parametrize("key", list(MetricKey))
    def test_breakdown_totals_100(self, key: MetricKey) -> None:
        components = METRIC_CONFIGS[key].components
        assert sum(c.max_points for c in components) == 100

    def test_authenticity_components(self) -> None:
        names = [c.name for c in METRIC_CONFIGS[MetricKey.AUTHENTICITY].components]
        assert names == [
            "originality_score",
            "activity_score",
            "engagement_score",
            "code_ownership_score",
        ]
        assert all(
            c.max_points == 25 for c in METRIC_CONFIGS[MetricKey.AUTHENTICITY].components
        )

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            METRIC_CONFIGS[MetricKey.ACTIVITY] = METRIC_CONFIGS[MetricKey.IMPACT]  # type: ignore[index]


class TestCategoryConfigs:
    def test_membership(self) -> None:
        assert CATEGORY_CONFIGS[MetricCategory.OUTPUT].metrics == (
            MetricKey.ACTIVITY, MetricKey.IMPACT,
        )
        assert CATEGORY_CONFIGS[MetricCategory.QUALITY].metrics == (
            MetricKey.QUALITY, MetricKey.CONSISTENCY,
        )
        assert CATEGORY_CONFIGS[MetricCategory.TRUST].metrics == (
            MetricKey.AUTHENTICITY, MetricKey.COLLABORATION,
        )

    def test_each_metric_in_one_category(self) -> None:
        members = [k for c in CATEGORY_CONFIGS.values() for k in c.metrics]
        assert sorted(members) == sorted(MetricKey)

    def test_order(self) -> None:
        assert CATEGORY_ORDER == (
            MetricCategory.OUTPUT, MetricCategory.QUALITY, MetricCategory.TRUST,
        )

    def test_titles(self) -> None:
        assert [CATEGORY_CONFIGS[c].title for c in CATEGORY_ORDER] == [
            "Output", "Quality", "Trust",
        ]


class TestCategoryFor:
    def test_enum_key(self) -> None:
        assert category_for(MetricKey.CONSISTENCY) == MetricCategory.QUALITY

    def test_string_key(self) -> None:
        assert category_for("collaboration") == MetricCategory.TRUST

    def test_unknown_key(self) -> None:
        with pytest.raises(ValueError):
            category_for("popularity")
