"""Create a demo viewer with friends, lists and items so /lists has something to show."""
import asyncio
import sys
from datetime import datetime, timezone

import bcrypt

sys.path.insert(0, ".")
from listshare.config import get_settings
from listshare.database import async_session_maker, init_db, close_db
from listshare.kernel.models import (
    Friendship,
    ItemList,
    ListItem,
    PrivacyLevel,
    Theme,
    User,
)

settings = get_settings()


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8")[:72], bcrypt.gensalt()).decode("utf-8")


async def main() -> None:
    await init_db()

    async with async_session_maker() as session:
        existing = await session.get(User, settings.viewer_id)
        if existing:
            print(f"Viewer {settings.viewer_id} already exists, nothing to do")
            return

        viewer = User(
            id=settings.viewer_id,
            first_name="Vera",
            last_name="Viewer",
            password=hash_password("Test123!"),
            theme=Theme.DARK,
        )
        ada = User(first_name="Ada", last_name="Lovelace", password=hash_password("Test123!"))
        alan = User(first_name="Alan", last_name="Turing", password=hash_password("Test123!"))
        session.add_all([viewer, ada, alan])
        await session.flush()

        session.add_all([
            Friendship(user_id=viewer.id, friend_id=ada.id),
            Friendship(user_id=viewer.id, friend_id=alan.id),
            Friendship(user_id=ada.id, friend_id=viewer.id),
        ])

        birthday = ItemList(user_id=viewer.id, name="Birthday", color="#e4572e")
        books = ItemList(user_id=viewer.id, name="Books", color="#4c9f70", privacy_level=PrivacyLevel.PRIVATE)
        engines = ItemList(user_id=ada.id, name="Engine parts", color="#29335c")
        session.add_all([birthday, books, engines])
        await session.flush()

        session.add_all([
            ListItem(list_id=birthday.id, name="Rain jacket", link="https://example.com/jacket"),
            ListItem(list_id=birthday.id, name="Board game", claimer_id=ada.id),
            ListItem(list_id=birthday.id, name="Candles", claimer_string="Grandma"),
            ListItem(list_id=birthday.id, name="Old idea", removed_at=datetime.now(timezone.utc)),
            ListItem(list_id=books.id, name="Dune"),
            ListItem(list_id=engines.id, name="Brass gears"),
        ])
        await session.commit()

    await close_db()
    print(f"Seeded demo data for viewer {settings.viewer_id}")
    print(f"Open http://localhost:{settings.port}/lists")


if __name__ == "__main__":
    asyncio.run(main())
