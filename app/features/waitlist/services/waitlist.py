import asyncio
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from app.features.waitlist.models.waitlist import WaitlistEntry
from app.features.waitlist.repositories.waitlist import WaitlistRepository
from app.features.waitlist.services.dns_check import MXResolver, verify_mail_domain
from app.features.waitlist.utils.email_validator import extract_domain, is_valid_email
from app.platform.config import Settings
from app.platform.exceptions import (
    INTERNAL_SERVER_ERROR,
    DuplicateEmailError,
    InvalidEmailDomainError,
)
from app.platform.logger import get_logger

logger = get_logger(__name__)

EMAIL_REQUIRED = "Email is required"
INVALID_EMAIL_FORMAT = "Invalid email format"
ALREADY_ON_WAITLIST = "Email already on waitlist"


class WaitlistService:
    """
    Runs a signup through validate -> MX check -> existence check -> insert.

    Client mistakes surface as 400 HTTPExceptions carrying a readable reason;
    storage failures are logged here and reported as a bare 500.
    """

    def __init__(self, repository: WaitlistRepository, resolver: MXResolver, settings: Settings):
        self.repository = repository
        self.resolver = resolver
        self.settings = settings

    async def register(self, email: Optional[str]) -> WaitlistEntry:
        if not email:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMAIL_REQUIRED)

        if not is_valid_email(email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_EMAIL_FORMAT)

        if self.settings.ENABLE_DNS_CHECK:
            try:
                await verify_mail_domain(self.resolver, extract_domain(email))
            except InvalidEmailDomainError as exc:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)

        try:
            existing = await self._bounded(self.repository.find_by_email(email))
            if existing:
                logger.info(f"Duplicate waitlist signup for entry {existing.id}")
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ALREADY_ON_WAITLIST)

            entry = await self._bounded(self.repository.insert(email))
        except DuplicateEmailError:
            # Lost the race against a concurrent signup for the same address
            logger.info("Duplicate waitlist signup rejected by unique constraint")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ALREADY_ON_WAITLIST)
        except (SQLAlchemyError, asyncio.TimeoutError) as exc:
            logger.exception("Failed to store waitlist entry", exc_info=exc)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_SERVER_ERROR
            )

        logger.info(f"Added waitlist entry {entry.id}")
        return entry

    async def _bounded(self, operation):
        return await asyncio.wait_for(operation, timeout=self.settings.DB_TIMEOUT_SECONDS)
