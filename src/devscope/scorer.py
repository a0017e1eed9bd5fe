"""Profile scoring: all six metrics, the category roll-up and authenticity."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from devscope.authenticity import AuthenticityScorer, authenticity_metric
from devscope.categories import get_category_scores
from devscope.config import DevscopeConfig
from devscope.metrics import (
    calculate_activity,
    calculate_collaboration,
    calculate_consistency,
    calculate_impact,
    calculate_quality,
)
from devscope.models import MetricData, MetricKey, ProfileReport, ProfileSnapshot

logger = logging.getLogger(__name__)


class ProfileScorer:
    """Score a complete developer profile snapshot."""

    def __init__(self, config: DevscopeConfig) -> None:
        self.config = config
        self._authenticity = AuthenticityScorer(config)

    def score(
        self, snapshot: ProfileSnapshot, now: datetime | None = None
    ) -> ProfileReport:
        """Compute every metric for *snapshot* and derive the category scores."""
        if now is None:
            now = datetime.now(UTC)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=UTC)

        authenticity = self._authenticity.score(snapshot.repositories, now=now)
        timeline = snapshot.timeline

        metrics: dict[MetricKey, MetricData] = {
            MetricKey.ACTIVITY: calculate_activity(timeline),
            MetricKey.IMPACT: calculate_impact(timeline),
            MetricKey.QUALITY: calculate_quality(timeline, now=now),
            MetricKey.CONSISTENCY: calculate_consistency(timeline),
            MetricKey.AUTHENTICITY: authenticity_metric(authenticity),
            MetricKey.COLLABORATION: calculate_collaboration(timeline),
        }
        categories = get_category_scores(metrics)

        logger.debug(
            "Scored %s: %s",
            snapshot.login,
            ", ".join(f"{c.category.value}={c.score}" for c in categories),
        )

        return ProfileReport(
            login=snapshot.login,
            metrics=metrics,
            categories=categories,
            authenticity=authenticity,
        )


def score_profile(
    snapshot: ProfileSnapshot,
    config: DevscopeConfig | None = None,
    now: datetime | None = None,
) -> ProfileReport:
    """Convenience function: score *snapshot* with default settings.

    Parameters
    ----------
    snapshot:
        Repositories and yearly timeline of the account.
    config:
        Optional configuration; defaults are used when *None*.
    now:
        Reference time for recency and age calculations; the current UTC
        time when *None*.
    """
    return ProfileScorer(config or DevscopeConfig()).score(snapshot, now=now)
