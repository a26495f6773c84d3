"""Tests for category and effort colour lookups."""

import pytest

from pace_tracker.services.colors import (
    DEFAULT_CATEGORY_COLOR,
    EFFORT_GRADIENT,
    WorkoutCategory,
    category_color,
    effort_color,
    effort_level,
    effort_meter,
)


class TestCategoryColor:
    @pytest.mark.parametrize(
        "label, expected",
        [
            ("intervallpass", "#BF5E42"),
            ("distanspass", "#468771"),
            ("långpass", "#7AA6DB"),
            ("styrka", "#4E7C8C"),
            ("tävling", "#000000"),
        ],
    )
    def test_known_categories(self, label, expected):
        assert category_color(label) == expected

    def test_match_is_case_insensitive(self):
        assert category_color("Distanspass") == "#468771"
        assert category_color("LÅNGPASS") == "#7AA6DB"

    def test_member_names_accepted(self):
        assert category_color("long_run") == "#7AA6DB"
        assert WorkoutCategory.parse("RACE") is WorkoutCategory.RACE

    def test_every_category_has_a_color(self):
        for member in WorkoutCategory:
            assert category_color(member.value).startswith("#")

    @pytest.mark.parametrize("label", ["yoga", "", None, "interval pass"])
    def test_unknown_category_uses_default(self, label):
        assert WorkoutCategory.parse(label) is None
        assert category_color(label) == DEFAULT_CATEGORY_COLOR


class TestEffortColor:
    def test_gradient_endpoints(self):
        assert effort_color(1) == "#00A000"
        assert effort_color(5) == "#CCCC00"
        assert effort_color(10) == "#FF0000"

    def test_out_of_range_is_clamped(self):
        assert effort_color(0) == EFFORT_GRADIENT[0]
        assert effort_color(None) == EFFORT_GRADIENT[0]
        assert effort_color(14) == EFFORT_GRADIENT[-1]
        assert effort_color(-3) == EFFORT_GRADIENT[0]

    @pytest.mark.parametrize(
        "effort, level",
        [(None, "low"), (1, "low"), (4, "low"), (5, "medium"), (7, "medium"), (8, "high"), (10, "high")],
    )
    def test_effort_level(self, effort, level):
        assert effort_level(effort) == level

    def test_effort_meter(self):
        meter = effort_meter(3)

        assert len(meter) == 10
        assert meter[:3] == ["#00A000", "#33B300", "#66C600"]
        assert meter[3:] == [None] * 7
        assert effort_meter(None) == [None] * 10
