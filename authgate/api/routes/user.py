from fastapi import APIRouter, Depends, status

from authgate.api.utils.authorization import authorize
from authgate.app.use_cases.auth import UserInfo
from authgate.domain.entities import UserLevel

router = APIRouter(tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_me(identity: dict = Depends(authorize(UserLevel.standard))):
    """
    Current user, read from the access token without touching storage.

    Raises:
        - 404 Not Found: Missing, invalid or under-privileged token
    """
    return UserInfo(
        id=identity["id"],
        username=identity["username"],
        first_name=identity.get("first_name"),
        last_name=identity.get("last_name"),
        level=identity["level"],
    )
