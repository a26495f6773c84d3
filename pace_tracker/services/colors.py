"""Display colours for workout categories and effort scores."""

from __future__ import annotations

from enum import Enum


DEFAULT_CATEGORY_COLOR = "#BF5E42"

# Effort 1 (green) through 10 (red).
EFFORT_GRADIENT: tuple[str, ...] = (
    "#00A000",
    "#33B300",
    "#66C600",
    "#99D900",
    "#CCCC00",
    "#FFBF00",
    "#FF9900",
    "#FF6600",
    "#FF3300",
    "#FF0000",
)

MIN_EFFORT = 1
MAX_EFFORT = 10


class WorkoutCategory(str, Enum):
    """Closed set of workout categories stored on library templates."""

    INTERVALS = "intervallpass"
    DISTANCE = "distanspass"
    LONG_RUN = "långpass"
    STRENGTH = "styrka"
    RACE = "tävling"

    @classmethod
    def parse(cls, label: str | None) -> "WorkoutCategory | None":
        """Match a label case-insensitively by value or member name."""
        if not label:
            return None
        needle = label.strip().lower()
        for member in cls:
            if needle in (member.value, member.name.lower()):
                return member
        return None


def category_color(label: str | None) -> str:
    """
    Return the display colour for a workout category label.

    Unknown or empty labels get DEFAULT_CATEGORY_COLOR.
    """
    category = WorkoutCategory.parse(label)
    if category is WorkoutCategory.INTERVALS:
        return "#BF5E42"
    if category is WorkoutCategory.DISTANCE:
        return "#468771"
    if category is WorkoutCategory.LONG_RUN:
        return "#7AA6DB"
    if category is WorkoutCategory.STRENGTH:
        return "#4E7C8C"
    if category is WorkoutCategory.RACE:
        return "#000000"
    return DEFAULT_CATEGORY_COLOR


def _clamp_effort(effort: int | None) -> int:
    if not effort:
        return MIN_EFFORT
    return max(MIN_EFFORT, min(MAX_EFFORT, int(effort)))


def effort_color(effort: int | None) -> str:
    """Map an effort score (1-10) onto the green to red gradient."""
    return EFFORT_GRADIENT[_clamp_effort(effort) - 1]


def effort_level(effort: int | None) -> str:
    """Describe an effort score as "low", "medium" or "high"."""
    value = effort or 0
    if value > 7:
        return "high"
    if value > 4:
        return "medium"
    return "low"


def effort_meter(effort: int | None) -> list[str | None]:
    """
    Build the ten-segment effort bar.

    Segments up to the effort carry their gradient colour, the rest are None.
    """
    value = effort or 0
    return [
        EFFORT_GRADIENT[index - 1] if index <= value else None
        for index in range(MIN_EFFORT, MAX_EFFORT + 1)
    ]
