"""Seed a development database with demo users, ideas and comments.

Usage:
    python seed_db.py

Every demo account uses the password ``password123``.
"""

import asyncio

from ideaboard.config import settings
from ideaboard.database import Database
from ideaboard.security import hash_password
from ideaboard.services import comments as comment_service
from ideaboard.services import ideas as idea_service
from ideaboard.services import users as user_service

DEMO_PASSWORD = "password123"


async def async_main():
    database = Database.from_settings(settings)
    await database.connect(create_schema=True)

    async with database.session() as session:
        if await user_service.get_user_by_email(session, "alice@example.com"):
            print("Demo data already present, nothing to do.")
            await database.dispose()
            return

        password_hash = hash_password(DEMO_PASSWORD, settings.PASSWORD_HASH_ROUNDS)
        alice = await user_service.create_user(session, "alice", "alice@example.com", password_hash, "Alice Builder")
        bob = await user_service.create_user(session, "bob", "bob@example.com", password_hash, "Bob Designer")

        garden = await idea_service.create_idea(
            session,
            user_id=alice.id,
            title="Rooftop garden",
            short_description="Grow vegetables on the office roof.",
            description="Raised beds, drip irrigation and a volunteer rota.",
            area="Facilities",
        )
        await idea_service.create_idea(
            session,
            user_id=bob.id,
            title="Quiet room booking",
            short_description="Book the quiet room from the intranet.",
            area="IT",
            status="In Review",
        )

        question = await comment_service.create_comment(
            session, garden.id, bob.id, bob.username, "Who waters it in August?"
        )
        await comment_service.create_comment(
            session, garden.id, alice.id, alice.username, "The rota covers holidays too.", parent_id=question.id
        )

        await session.commit()

    print("Seeded 2 users, 2 ideas and 2 comments.")
    await database.dispose()


if __name__ == "__main__":
    asyncio.run(async_main())
