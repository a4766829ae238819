"""
Noteful Backend: Database Seeder
=================================

What:  Drops and recreates the schema, then loads the fixed data set in
       seed_data.py.
How:   python -m noteful.seed   (uses DATABASE_URL like the server does)
"""

import asyncio
import logging

from noteful.database import async_session_factory, dispose_engine, drop_tables, create_tables
from noteful.models import Folder, Note, Tag
from noteful.seed_data import FOLDERS, NOTES, TAGS

logger = logging.getLogger(__name__)


async def seed_database() -> dict:
    """Reset the schema and insert every seed row. Returns inserted counts."""
    await drop_tables()
    await create_tables()

    async with async_session_factory() as session:
        async with session.begin():
            session.add_all(Folder(**row) for row in FOLDERS)
            session.add_all(Tag(**row) for row in TAGS)
            session.add_all(Note(**row) for row in NOTES)

    counts = {"folders": len(FOLDERS), "tags": len(TAGS), "notes": len(NOTES)}
    logger.info(
        "Inserted %d folders, %d tags, %d notes",
        counts["folders"], counts["tags"], counts["notes"],
    )
    return counts


async def main() -> None:
    try:
        await seed_database()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    from noteful.main import setup_logging

    setup_logging()
    asyncio.run(main())
