"""
Unit of Work: owns one session shared by its repositories and the transaction boundary.
"""

from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession


class UnitOfWork:
    """Shared session plus commit/rollback; subclasses build their repositories in __init__.

    Not safe for concurrent use: create one per request.
    """

    def __init__(self, session: Optional[AsyncSession] = None):
        """Initialize UnitOfWork; session must be provided."""
        if session is None:
            raise ValueError("Session must be provided.")

        self.session = session
        self._closed = False

    async def commit(self) -> None:
        """Write every staged change of every repository in one transaction."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Rollback all changes."""
        await self.session.rollback()

    async def flush(self) -> None:
        """Flush session (e.g. to get auto-increment IDs)."""
        await self.session.flush()

    async def close(self) -> None:
        """Release the session and its connection; further calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        await self.session.close()

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is not None:
                await self.rollback()
            else:
                await self.commit()
        finally:
            await self.close()
