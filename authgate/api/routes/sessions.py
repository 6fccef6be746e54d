from uuid import UUID

from fastapi import APIRouter, Depends, status

from authgate.api.error import ServerError
from authgate.api.utils.authorization import authorize
from authgate.app.services.unit_of_work import UnitOfWork
from authgate.app.use_cases.sessions import CloseSessionResponse, CloseUserSessionUseCase
from authgate.depends import get_unit_of_work
from authgate.domain.entities import UserLevel

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=CloseSessionResponse,
)
async def close_user_session(
    user_id: UUID,
    current_user: dict = Depends(authorize(UserLevel.privileged)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Force Sign-Out

    Closes another user's session; their refresh token stops working at once
    and their access token lapses within the hour. Idempotent.

    Raises:
        - 404 Not Found: Caller is not privileged
        - 500 Internal Server Error: Server error
    """
    use_case = CloseUserSessionUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
