from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.waitlist.models.waitlist import WaitlistEntry
from app.platform.exceptions import DuplicateEmailError


class WaitlistRepository(ABC):
    """Storage boundary for waitlist entries. Uniqueness of email is enforced here."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[WaitlistEntry]:
        ...

    @abstractmethod
    async def insert(self, email: str) -> WaitlistEntry:
        """Create an entry; raise DuplicateEmailError if the email is already stored."""


class SQLAlchemyWaitlistRepository(WaitlistRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> Optional[WaitlistEntry]:
        result = await self.db.execute(
            select(WaitlistEntry).where(WaitlistEntry.email == email).limit(1)
        )
        return result.scalars().first()

    async def insert(self, email: str) -> WaitlistEntry:
        entry = WaitlistEntry(email=email)
        self.db.add(entry)
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            raise DuplicateEmailError(email) from exc
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        await self.db.refresh(entry)
        return entry
