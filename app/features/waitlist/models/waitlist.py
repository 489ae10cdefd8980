from enum import Enum

import sqlalchemy
from sqlalchemy import Column, Integer, String, Text

from app.platform.db.base import Base


class WaitlistStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    NOTIFIED = "notified"


class WaitlistEntry(Base):
    __tablename__ = "waitlist"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(Text, unique=True, nullable=False, index=True)
    # Free text: labels beyond WaitlistStatus are set by admin tooling
    status = Column(String(50), nullable=True, server_default=WaitlistStatus.PENDING.value)
    created_at = Column(
        sqlalchemy.DateTime(timezone=True), server_default=sqlalchemy.func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<WaitlistEntry(id={self.id}, email='{self.email}', status='{self.status}')>"
