# start_app.py
"""Create the database schema and launch the API server."""

from __future__ import annotations

import argparse
import sys

import uvicorn
from dotenv import load_dotenv

import config


def main(argv: list[str] | None = None) -> None:
    """Load settings, optionally create tables, then start the API."""

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--skip-init-db",
        action="store_true",
        help="Start without creating missing tables",
    )
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args(argv)

    load_dotenv()  # load environment variables from a .env file
    config.get_settings.cache_clear()
    settings = config.get_settings()

    if not args.skip_init_db:
        from kitchenpos.app.db import init_db

        init_db()

    try:
        uvicorn.run(
            "kitchenpos.app.main:app",
            host=settings.host,  # nosec B104: bind for local development
            port=settings.port,
            log_level=settings.log_level.lower(),
            reload=args.reload,
        )
    except ModuleNotFoundError as exc:
        missing = exc.name or str(exc)
        print(
            f"Missing dependency: {missing}. Install it with 'pip install {missing}'",
            file=sys.stderr,
        )
        raise SystemExit(1)


if __name__ == "__main__":
    main()
