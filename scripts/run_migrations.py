#!/usr/bin/env python3
"""Upgrade the GameOn database schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c41f0a9d2e7
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from gameon.config import Settings
from gameon.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade to the requested revision (``head`` by default)."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config("alembic.ini")

    with logfire.span("run_migrations", target=target):
        try:
            command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Non-zero exit keeps a deploy from starting on a broken schema
            raise

        logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
