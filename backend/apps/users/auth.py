"""Current-user dependency.

Authentication happens upstream (identity provider or auth proxy); the
authenticated subject reaches us as request headers, which are trusted here.
"""
import logging

from fastapi import Depends, HTTPException, Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.core.config import settings
from apps.core.database import get_db
from apps.users.storage import PROFILE_FIELDS, UserStorage
from apps.users.tables import User

logger = logging.getLogger(__name__)


def _profile_from_headers(request: Request) -> dict[str, str | None]:
    headers = settings.identity
    return {name: request.headers.get(getattr(headers, name)) for name in PROFILE_FIELDS}


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)) -> User:
    user_id = (request.headers.get(settings.identity.user_id) or "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")

    storage = UserStorage(db)
    try:
        user, _ = await storage.upsert_user(user_id, **_profile_from_headers(request))
        await db.commit()
    except IntegrityError:
        # Lost a race registering the same user, or the email belongs to someone else
        await db.rollback()
        user = await storage.get_user(user_id)
        if user is None:
            logger.exception("Failed to register user %s", user_id)
            raise HTTPException(status_code=409, detail="Could not register user")
    return user
