"""Database seeder: sample posts (published, draft, removed) and events."""
import argparse
import asyncio
import logging
import random
import time
import uuid
from datetime import datetime, timezone, timedelta

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from bulletin.config import settings
from bulletin.database import Base, async_session, engine
from bulletin.logging_config import configure_logging
from bulletin.models import Article, Event

logger = logging.getLogger("bulletin.seed")

TOPICS = ["python", "fastapi", "postgresql", "docker", "kubernetes", "testing",
          "performance", "security", "rest-api", "asyncio"]
LOCATIONS = ["Berlin", "Lisbon", "Online", "Toronto", "Osaka", None]


async def reset_schema(bind: AsyncEngine) -> None:
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def seed(session_factory: async_sessionmaker, num_posts: int = 50, num_events: int = 20) -> dict:
    """
    Insert *num_posts* posts and *num_events* events using *session_factory*.

    Roughly one post in five is a draft and one in ten is soft-deleted.
    Returns the number of rows written per table.
    """
    rng = random.Random(42)
    now = datetime.now(timezone.utc)

    async with session_factory() as session:
        for i in range(num_posts):
            topic = rng.choice(TOPICS)
            removed = i % 10 == 9
            session.add(Article(
                id=uuid.uuid4(),
                title=f"Notes on {topic} #{i}",
                content=f"Sample content about {topic}. " * rng.randint(3, 12),
                published_at=now - timedelta(hours=rng.randint(1, 24 * 90)),
                is_published=i % 5 != 4,
                is_deleted=removed,
                deleted_at=now if removed else None,
            ))

        for i in range(num_events):
            session.add(Event(
                title=f"{rng.choice(TOPICS).title()} meetup #{i}",
                description=f"Talks and discussion, session {i}.",
                location=rng.choice(LOCATIONS),
                starts_at=now + timedelta(days=rng.randint(1, 120)),
            ))

        await session.commit()

    return {"articles": num_posts, "events": num_events}


async def main(small: bool = False) -> None:
    configure_logging(settings.LOG_LEVEL)
    num_posts, num_events = (20, 5) if small else (500, 100)

    start = time.perf_counter()
    await reset_schema(engine)
    counts = await seed(async_session, num_posts=num_posts, num_events=num_events)
    await engine.dispose()

    logger.info(
        "Seeded %d posts and %d events in %.1fs",
        counts["articles"], counts["events"], time.perf_counter() - start,
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the bulletin database")
    parser.add_argument("--small", action="store_true", help="Seed a small dataset for development")
    args = parser.parse_args()
    asyncio.run(main(small=args.small))
