"""Database initialization entrypoint for local development."""

from jobreport.core import setup_logging
from jobreport.db import create_tables


def init_db() -> None:
    """Create the job result tables on the configured database."""
    create_tables()


if __name__ == "__main__":
    setup_logging()
    init_db()
