from fastapi import APIRouter, Depends, status

from app.features.waitlist.dependencies.waitlist import get_waitlist_service
from app.features.waitlist.schemas.waitlist import ErrorResponse, WaitlistCreated, WaitlistIn
from app.features.waitlist.services.waitlist import WaitlistService
from app.platform.response import success_response

router = APIRouter(tags=["Waitlist"])


@router.post(
    "/waitlist",
    status_code=status.HTTP_201_CREATED,
    response_model=WaitlistCreated,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def join_waitlist(
    waitlist_in: WaitlistIn,
    service: WaitlistService = Depends(get_waitlist_service),
):
    await service.register(waitlist_in.email)
    return success_response(message="Added to waitlist", status_code=status.HTTP_201_CREATED)
