"""VDOT pace zone calculation from a 5K race time."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any


logger = logging.getLogger(__name__)

FIVE_K_METERS = 5000
FIVE_K_KILOMETERS = 5

# Slowest accepted 5K. Keeps the VDOT estimate positive and time_5k inside
# an INTEGER column.
MAX_5K_SECONDS = 2 * 60 * 60

# Zone pace = 5K pace per km * multiplier. Listed fastest to slowest.
ZONE_MULTIPLIERS: dict[str, float] = {
    "one_k": 0.94,
    "interval": 0.96,
    "five_k": 1.00,
    "threshold": 1.03,
    "ten_k": 1.04,
    "tempo": 1.06,
    "half_marathon": 1.09,
    "marathon": 1.15,
    "easy": 1.22,
    "long_run": 1.32,
}

ZONE_ORDER: tuple[str, ...] = tuple(ZONE_MULTIPLIERS)

# Output keys of the public payload, matching the presentation layer's names.
ZONE_PAYLOAD_KEYS: dict[str, str] = {
    "one_k": "oneK",
    "five_k": "fiveK",
    "ten_k": "tenK",
    "half_marathon": "halfMarathon",
    "marathon": "marathon",
    "easy": "easy",
    "interval": "interval",
    "threshold": "threshold",
    "tempo": "tempo",
    "long_run": "longRun",
}

ZONE_LABELS: dict[str, str] = {
    "one_k": "1K",
    "five_k": "5K",
    "ten_k": "10K",
    "half_marathon": "Half marathon",
    "marathon": "Marathon",
    "easy": "Easy / distance",
    "interval": "Interval",
    "threshold": "Threshold",
    "tempo": "Tempo",
    "long_run": "Long run",
}

INVALID_TIME_MESSAGE = "invalid time"


class PaceZoneValidationError(ValueError):
    """Raised when a race time cannot be turned into pace zones."""

    def __init__(self, reason: str = INVALID_TIME_MESSAGE) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class RaceTimeInput:
    """A validated 5K race time."""

    minutes: int
    seconds: int

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds


@dataclass(frozen=True)
class PaceZoneSet:
    """
    Computed VDOT score and per-kilometre paces for one race time.

    Attributes:
        vdot_score: Rounded VDOT fitness index (descriptive only)
        time_5k_seconds: Total seconds of the race time the zones came from
        paces: Zone key -> "M:SS" per kilometre
        seconds_per_km: Zone key -> unformatted seconds per kilometre
    """

    vdot_score: int
    time_5k_seconds: int
    paces: dict[str, str] = field(default_factory=dict)
    seconds_per_km: dict[str, float] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Return the camelCase payload handed to the presentation layer."""
        return {
            "vdotScore": self.vdot_score,
            "time5kSeconds": self.time_5k_seconds,
            "paces": {
                ZONE_PAYLOAD_KEYS[zone]: self.paces[zone] for zone in ZONE_ORDER
            },
        }


def format_pace(seconds_per_km: float) -> str:
    """
    Format a pace in seconds per kilometre as ``M:SS``.

    Minutes come from floor division and seconds from the remainder, truncated
    toward zero. Nothing is rounded, so 225.6 s/km is "3:45", not "3:46".

    Args:
        seconds_per_km: Non-negative pace in seconds per kilometre

    Returns:
        Zero-padded pace string

    Raises:
        ValueError: If the pace is negative

    Example:
        >>> format_pace(316.8)
        '5:16'
    """
    if seconds_per_km < 0:
        raise ValueError(f"Pace cannot be negative: {seconds_per_km}")

    minutes = int(seconds_per_km // 60)
    seconds = int(seconds_per_km % 60)
    return f"{minutes}:{seconds:02d}"


def calculate_vdot(total_seconds: int) -> float:
    """
    Estimate VDOT from a 5K finish time using the Jack Daniels approximation.

    The oxygen cost of the race velocity is divided by the fraction of VO2max
    sustainable for the race duration. The duration term is fed the race time
    in seconds, as the stored scores always have been.

    Args:
        total_seconds: 5K finish time in seconds (must be positive)

    Returns:
        Unrounded VDOT score
    """
    velocity = FIVE_K_METERS / (total_seconds / 60)  # metres per minute
    vo2 = -4.60 + 0.182258 * velocity + 0.000104 * velocity ** 2
    percent_max = (
        0.8
        + 0.1894393 * math.exp(-0.012778 * total_seconds)
        + 0.2989558 * math.exp(-0.1932605 * total_seconds)
    )
    return vo2 / percent_max


def round_vdot(vdot: float) -> int:
    """Round a VDOT score to the nearest integer, halves upward."""
    return int(math.floor(vdot + 0.5))


def _coerce_int(value: Any) -> int:
    if isinstance(value, bool):
        raise PaceZoneValidationError()
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            raise PaceZoneValidationError() from None
    raise PaceZoneValidationError()


def parse_race_time(minutes: Any, seconds: Any) -> RaceTimeInput:
    """
    Validate a 5K time entered as minutes and seconds.

    Accepts integers or numeric strings. Minutes must be at least 1 (a "0:ss"
    5K is rejected even when seconds are given), seconds must lie in [0, 59]
    and the total may not exceed MAX_5K_SECONDS.

    Raises:
        PaceZoneValidationError: For non-numeric or out-of-range values
    """
    parsed_minutes = _coerce_int(minutes)
    parsed_seconds = _coerce_int(seconds)

    if parsed_minutes <= 0:
        raise PaceZoneValidationError()
    if not 0 <= parsed_seconds <= 59:
        raise PaceZoneValidationError()
    if parsed_minutes * 60 + parsed_seconds > MAX_5K_SECONDS:
        raise PaceZoneValidationError()

    return RaceTimeInput(minutes=parsed_minutes, seconds=parsed_seconds)


def compute_zones(minutes: Any, seconds: Any) -> PaceZoneSet:
    """
    Derive the full pace zone table from a 5K race time.

    Every zone is a fixed multiple of the pace actually run in the 5K, so the
    table depends only on the measured pace. VDOT is computed separately and
    is not fed back into the paces.

    Args:
        minutes: Whole minutes of the 5K time (>= 1)
        seconds: Remaining seconds (0-59)

    Returns:
        PaceZoneSet with ten formatted paces and the rounded VDOT score

    Raises:
        PaceZoneValidationError: If the time is invalid

    Example:
        >>> zones = compute_zones(20, 0)
        >>> zones.paces["five_k"], zones.paces["marathon"]
        ('4:00', '4:36')
    """
    race_time = parse_race_time(minutes, seconds)
    total_seconds = race_time.total_seconds
    base_pace = total_seconds / FIVE_K_KILOMETERS

    seconds_per_km = {
        zone: base_pace * multiplier for zone, multiplier in ZONE_MULTIPLIERS.items()
    }
    paces = {zone: format_pace(value) for zone, value in seconds_per_km.items()}
    vdot_score = round_vdot(calculate_vdot(total_seconds))

    logger.debug(
        "Computed pace zones for 5K %d:%02d (base=%.1f s/km, vdot=%d)",
        race_time.minutes,
        race_time.seconds,
        base_pace,
        vdot_score,
    )
    return PaceZoneSet(
        vdot_score=vdot_score,
        time_5k_seconds=total_seconds,
        paces=paces,
        seconds_per_km=seconds_per_km,
    )


def format_zones_table(zone_set: PaceZoneSet) -> str:
    """
    Format a zone set as human-readable lines, fastest first.

    Example:
        1K: 3:45 min/km
        Interval: 3:50 min/km
        ...
    """
    return "\n".join(
        f"{ZONE_LABELS[zone]}: {zone_set.paces[zone]} min/km" for zone in ZONE_ORDER
    )
