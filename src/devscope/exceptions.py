"""Custom exception hierarchy for devscope."""

from __future__ import annotations


class DevscopeError(Exception):
    """Base exception for devscope."""


class MissingMetricError(DevscopeError):
    """A metric required for category aggregation was not supplied."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing metric: {key}")


class ConfigError(DevscopeError):
    """Error with configuration."""


class SnapshotError(DevscopeError):
    """A profile snapshot file could not be read or validated."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid snapshot {path}: {reason}")
