"""devscope - developer profile scoring."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from devscope.authenticity import AuthenticityScorer, compute_authenticity
from devscope.categories import calculate_category_score, get_category_scores
from devscope.config import DevscopeConfig, load_config
from devscope.exceptions import DevscopeError, MissingMetricError
from devscope.models import (
    AuthenticityCategory,
    AuthenticityScore,
    CategoryScore,
    MetricCategory,
    MetricData,
    MetricKey,
    ProfileReport,
    ProfileSnapshot,
    RepositoryFact,
)
from devscope.scorer import ProfileScorer, score_profile

try:
    __version__ = version("devscope")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "AuthenticityCategory",
    "AuthenticityScore",
    "AuthenticityScorer",
    "CategoryScore",
    "DevscopeConfig",
    "DevscopeError",
    "MetricCategory",
    "MetricData",
    "MetricKey",
    "MissingMetricError",
    "ProfileReport",
    "ProfileScorer",
    "ProfileSnapshot",
    "RepositoryFact",
    "__version__",
    "calculate_category_score",
    "compute_authenticity",
    "get_category_scores",
    "load_config",
    "score_profile",
]
