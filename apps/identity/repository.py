"""Identity module repository implementations."""

from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.repository.base import BaseRepository
from framework.repository.unit_of_work import UnitOfWork
from .models import User


class UserRepository(BaseRepository[User]):
    """User repository."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Find user by email (case-insensitive; emails are stored lowercased)."""
        return await self.get_by_id(User.email == email.lower())


class IdentityUnitOfWork(UnitOfWork):
    """User repository bound to the unit of work's session."""

    def __init__(self, session: AsyncSession):
        super().__init__(session=session)
        self.users = UserRepository(self.session)
