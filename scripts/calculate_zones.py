"""Print the pace zone table for a 5K time."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pace_tracker.services.pace_zones import (
    PaceZoneValidationError,
    compute_zones,
    format_zones_table,
)


logger = logging.getLogger("scripts.calculate_zones")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Calculate VDOT pace zones from a 5K race time",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 20:00 5K
  python scripts/calculate_zones.py 20

  # 25:30 5K
  python scripts/calculate_zones.py 25 30
        """
    )
    parser.add_argument("minutes", help="Whole minutes of the 5K time")
    parser.add_argument("seconds", nargs="?", default="0", help="Remaining seconds (0-59)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
    args = parse_args(argv)

    try:
        zones = compute_zones(args.minutes, args.seconds)
    except PaceZoneValidationError as err:
        logger.error("Cannot calculate zones: %s", err.reason)
        return 1

    print(f"VDOT: {zones.vdot_score}")
    print(format_zones_table(zones))
    return 0


if __name__ == "__main__":
    sys.exit(main())
