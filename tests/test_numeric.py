"""Tests for numeric helpers."""

from __future__ import annotations

import pytest

from devscope.numeric import clamp, ratio, round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(80.5, 81), (79.5, 80), (0.5, 1), (2.4999, 2), (62.0, 62), (0.0, 0)],
    )
    def test_rounding(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected

    def test_differs_from_builtin_round(self) -> None:
        assert round(80.5) == 80
        assert round_half_up(80.5) == 81


class TestClamp:
    def test_within(self) -> None:
        assert clamp(12, 0, 25) == 12

    def test_bounds(self) -> None:
        assert clamp(-3, 0, 25) == 0
        assert clamp(30, 0, 25) == 25


class TestRatio:
    def test_zero_whole(self) -> None:
        assert ratio(3, 0) == 0.0

    def test_regular(self) -> None:
        assert ratio(1, 4) == 0.25
