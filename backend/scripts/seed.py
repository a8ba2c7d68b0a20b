"""Seed script — creates the initial admin user.

Idempotent: checks for an existing user before inserting.
Run: python backend/scripts/seed.py
"""
import asyncio
import logging
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.config import settings
from tracker.core.security import hash_password
from tracker.db.session import AsyncSessionLocal
from tracker.models.user import User

logger = logging.getLogger(__name__)


async def seed_admin_user(db: AsyncSession, username: str, password: str) -> User:
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalars().first()
    if user:
        logger.info("User %s already exists, skipping", username)
        return user
    user = User(
        username=username,
        password_hash=hash_password(password),
        role="admin",
        is_active=True,
    )
    db.add(user)
    await db.commit()
    logger.info("Seeded admin user %s", username)
    return user


async def run_seed() -> None:
    async with AsyncSessionLocal() as db:
        await seed_admin_user(db, settings.SEED_ADMIN_USERNAME, settings.SEED_ADMIN_PASSWORD)
    logger.info("Seeding complete.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(run_seed())
