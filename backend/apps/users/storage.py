"""User persistence."""
import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from apps.core.timeutil import utcnow
from apps.stats.storage import StatsStorage
from apps.users.tables import User

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("email", "first_name", "last_name", "profile_image_url")


class UserStorage:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_user(self, user_id: str) -> User | None:
        return await self.session.get(User, user_id)

    async def upsert_user(self, user_id: str, **profile: Any) -> tuple[User, bool]:
        """Create or refresh a user; returns ``(user, created)``.

        Only profile fields that are provided (not None) overwrite stored ones.
        A newly created user bumps the ``total_users`` counter.
        """
        updates = {k: v for k, v in profile.items() if k in PROFILE_FIELDS and v is not None}
        user = await self.get_user(user_id)

        if user is not None:
            changed = {k: v for k, v in updates.items() if getattr(user, k) != v}
            if changed:
                for key, value in changed.items():
                    setattr(user, key, value)
                user.updated_at = utcnow()
                await self.session.flush()
            return user, False

        user = User(id=user_id, **updates)
        self.session.add(user)
        await self.session.flush()
        await StatsStorage(self.session).increment("total_users")
        logger.info("Registered user %s", user_id)
        return user, True
