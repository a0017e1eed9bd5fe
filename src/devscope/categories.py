"""Roll the six metric scores up into the three dashboard categories."""

from __future__ import annotations

from collections.abc import Mapping

from devscope.catalog import CATEGORY_CONFIGS, CATEGORY_ORDER
from devscope.exceptions import MissingMetricError
from devscope.models import CategoryScore, MetricCategory, MetricData, MetricKey, ScoredMetric
from devscope.numeric import round_half_up


def _lookup(
    metrics: Mapping[MetricKey, MetricData] | Mapping[str, MetricData], key: MetricKey
) -> MetricData:
    # StrEnum members hash like their values, so plain string keys match too.
    try:
        return metrics[key]  # type: ignore[index]
    except KeyError:
        raise MissingMetricError(key.value) from None


def calculate_category_score(
    metrics: Mapping[MetricKey, MetricData] | Mapping[str, MetricData],
    category: MetricCategory | str,
) -> int:
    """Average the two member metrics of *category*, rounding half up."""
    first, second = CATEGORY_CONFIGS[MetricCategory(category)].metrics
    total = _lookup(metrics, first).score + _lookup(metrics, second).score
    return round_half_up(total / 2)


def get_category_scores(
    metrics: Mapping[MetricKey, MetricData] | Mapping[str, MetricData],
) -> list[CategoryScore]:
    """Compute every category score in display order.

    Raises :class:`MissingMetricError` if a member metric is absent; an
    unmeasured metric is never treated as a zero score.
    """
    results: list[CategoryScore] = []
    for category in CATEGORY_ORDER:
        first_key, second_key = CATEGORY_CONFIGS[category].metrics
        first = _lookup(metrics, first_key)
        second = _lookup(metrics, second_key)
        results.append(
            CategoryScore(
                category=category,
                score=calculate_category_score(metrics, category),
                metrics=(
                    ScoredMetric.model_validate({**first.model_dump(), "key": first_key}),
                    ScoredMetric.model_validate({**second.model_dump(), "key": second_key}),
                ),
            )
        )
    return results
