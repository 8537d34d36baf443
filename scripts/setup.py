#!/usr/bin/env python3
"""Setup script for the Creek River campground API: migrate and seed."""

import asyncio
import logging
import sys
from decimal import Decimal
from pathlib import Path

# Add the server directory to the Python path
server_dir = Path(__file__).parent.parent / "server"
sys.path.insert(0, str(server_dir))

from alembic import command
from alembic.config import Config
from sqlalchemy import func, select

from creek_river.core.database import async_session_factory, close_db
from creek_river.models import Campsite, CampsiteType, UserProfile

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_CAMPSITE_TYPES = [
    ("Tent", Decimal("15.99"), 4),
    ("RV", Decimal("26.50"), 6),
    ("Primitive", Decimal("10.00"), 2),
    ("Hammock", Decimal("12.00"), 1),
]

SAMPLE_CAMPSITES = [
    ("Barred Owl", "Tent", "https://images.example.com/campsites/barred-owl.jpg"),
    ("Cardinal", "Tent", "https://images.example.com/campsites/cardinal.jpg"),
    ("Pileated Woodpecker", "RV", "https://images.example.com/campsites/pileated-woodpecker.jpg"),
    ("Blue Heron", "Primitive", None),
    ("Kingfisher", "Hammock", "https://images.example.com/campsites/kingfisher.jpg"),
]


def run_migrations() -> None:
    """Upgrade the database schema to the latest Alembic revision."""
    alembic_cfg = Config(str(server_dir / "db" / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(server_dir / "db" / "alembic"))

    logger.info("Running database migrations...")
    command.upgrade(alembic_cfg, "head")
    logger.info("Database migrations completed")


async def create_sample_data() -> None:
    """Seed campsite types, campsites and a guest when the database is empty."""
    logger.info("Creating sample data...")

    async with async_session_factory() as db:
        existing = await db.execute(select(func.count()).select_from(CampsiteType))
        if existing.scalar_one() > 0:
            logger.info("Sample data already exists, skipping...")
            return

        try:
            types_by_name = {}
            for name, fee, max_occupants in SAMPLE_CAMPSITE_TYPES:
                campsite_type = CampsiteType(
                    campsite_type_name=name,
                    fee_per_night=fee,
                    max_occupants=max_occupants
                )
                db.add(campsite_type)
                types_by_name[name] = campsite_type
            await db.flush()

            for nickname, type_name, image_url in SAMPLE_CAMPSITES:
                db.add(Campsite(
                    nickname=nickname,
                    campsite_type_id=types_by_name[type_name].id,
                    image_url=image_url
                ))

            db.add(UserProfile(first_name="Eve", last_name="Sullivan", email="eve@sullivan.com"))

            await db.commit()
            logger.info("Sample data created successfully!")

        except Exception as e:
            await db.rollback()
            logger.error(f"Failed to create sample data: {e}")
            raise


async def main():
    """Main setup function."""
    logger.info("Starting Creek River API setup...")

    # Alembic drives its own event loop for the async engine
    await asyncio.to_thread(run_migrations)
    await create_sample_data()
    await close_db()

    logger.info("Setup completed successfully!")
    logger.info("You can now start the API server with: cd server && uvicorn creek_river.main:app --reload")


if __name__ == "__main__":
    asyncio.run(main())
