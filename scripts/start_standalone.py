"""Single-process launcher: migrate, seed the behavior catalog, then serve.

Defaults to a SQLite file under /data so the service runs without Postgres.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import uvicorn
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

DEFAULT_SQLITE_URL = "sqlite+pysqlite:////data/classroom.db"

logger = logging.getLogger("start_standalone")


def _truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def _database_url() -> str:
    url = (os.environ.get("DATABASE_URL") or "").strip() or DEFAULT_SQLITE_URL
    os.environ["DATABASE_URL"] = url
    parsed = make_url(url)
    if parsed.drivername.startswith("sqlite") and parsed.database and parsed.database != ":memory:":
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return url


def _migrate() -> None:
    config = Config(str(ROOT_DIR / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT_DIR / "alembic"))
    command.upgrade(config, "head")


def _seed(with_demo: bool) -> None:
    from app.db.session import get_session_factory
    from app.services.defaults import propagate_group_defaults, seed_defaults

    with get_session_factory()() as db:
        inserted = seed_defaults(db)
        propagated = propagate_group_defaults(db)
    logger.info("Defaults ready: %d inserted, %d propagated.", inserted, propagated)

    if with_demo:
        from scripts.seed_demo_data import main as seed_demo_data

        seed_demo_data()


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Classroom Rewards API as a single process.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=int(os.environ.get("APP_PORT", "8000")))
    parser.add_argument("--demo", action="store_true", default=_truthy(os.environ.get("STANDALONE_DEMO_DATA")))
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Using DATABASE_URL=%s", _database_url())

    _migrate()
    _seed(args.demo)
    uvicorn.run("app.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
