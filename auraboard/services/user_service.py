import logging

from sqlalchemy.ext.asyncio import AsyncSession
from auraboard.models.user import User
from auraboard.repositories.user_repo import UserRepository
from auraboard.schemas.session import SessionUser

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self):
        self.repo = UserRepository()

    async def find(self, db: AsyncSession, identity: SessionUser) -> User | None:
        return await self.repo.get_by_email(db, identity.email)

    async def get_or_create(self, db: AsyncSession, identity: SessionUser) -> User:
        """Return the caller's User row, inserting it on first use. Does not commit."""
        user = await self.repo.get_by_email(db, identity.email)
        if user is None:
            user = await self.repo.create(db, User(email=identity.email, name=identity.name or ""))
            logger.info("created user %s for %s", user.id, identity.email)
        return user
