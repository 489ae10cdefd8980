from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.waitlist.repositories.waitlist import (
    SQLAlchemyWaitlistRepository,
    WaitlistRepository,
)
from app.features.waitlist.services.dns_check import MXResolver
from app.features.waitlist.services.waitlist import WaitlistService
from app.platform.config import Settings
from app.platform.db.session import get_db
from app.platform.deps import get_app_settings


def get_waitlist_repository(db: AsyncSession = Depends(get_db)) -> WaitlistRepository:
    return SQLAlchemyWaitlistRepository(db)


def get_mx_resolver(request: Request) -> MXResolver:
    return request.app.state.mx_resolver


def get_waitlist_service(
    repository: WaitlistRepository = Depends(get_waitlist_repository),
    resolver: MXResolver = Depends(get_mx_resolver),
    settings: Settings = Depends(get_app_settings),
) -> WaitlistService:
    """
    Wires the service for one request. Tests swap the repository or the
    resolver through app.dependency_overrides.
    """
    return WaitlistService(repository, resolver, settings)
