import argparse
from pathlib import Path
import sys

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.core.config import get_settings
from app.core.logging import setup_logging
from app.db.session import get_session_factory
from app.services.defaults import propagate_group_defaults, seed_defaults


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the default behavior catalog.")
    parser.add_argument(
        "--skip-propagate",
        action="store_true",
        help="Do not copy missing GROUP_WORK defaults to existing teachers.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging(get_settings().log_level)
    session_factory = get_session_factory()
    with session_factory() as db:
        inserted = seed_defaults(db)
        propagated = 0 if args.skip_propagate else propagate_group_defaults(db)
    print(f"Default behaviors inserted: {inserted}; teacher copies propagated: {propagated}")


if __name__ == "__main__":
    main()
