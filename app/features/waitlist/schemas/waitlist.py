from typing import Optional

from pydantic import BaseModel, Field


class WaitlistIn(BaseModel):
    # Optional so a missing email reaches the service and gets its own message
    email: Optional[str] = Field(None, description="Address to add to the waitlist")


class WaitlistCreated(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    error: str
