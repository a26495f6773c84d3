"""Create the data directory and bring the database schema up to date."""
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pace_tracker.database import run_migrations
from pace_tracker.logging_config import configure_logging


logger = logging.getLogger("scripts.initial_setup")


def main() -> None:
    configure_logging()
    data_dir = Path("data")
    data_dir.mkdir(exist_ok=True)
    run_migrations()
    logger.info("Database initialised at %s", data_dir.resolve())


if __name__ == "__main__":
    main()
