from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, Field

from authgate.api.error import ClientError, ServerError
from authgate.api.utils.cookies import clear_auth_cookies, set_access_cookie, set_auth_cookies
from authgate.app.services.unit_of_work import UnitOfWork
from authgate.app.use_cases.auth import (
    RefreshAccessUseCase,
    SignInUseCase,
    SignOutUseCase,
    SignUpCommand,
    SignUpUseCase,
    UserInfo,
)
from authgate.depends import get_unit_of_work
from authgate.domain.entities import TokenType

router = APIRouter(tags=["Authentication"])


class SignUpRequest(BaseModel):
    """
    Sign-up HTTP request payload

    Validates incoming HTTP request before converting to SignUpCommand.
    """

    username: str = Field(..., min_length=1, max_length=255, description="Unique username")
    password: str = Field(..., min_length=1, max_length=72, description="User password")
    first_name: Optional[str] = Field(None, max_length=255)
    last_name: Optional[str] = Field(None, max_length=255)


class SignInRequest(BaseModel):
    """Sign-in HTTP request payload"""

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=72)


class AuthResponse(BaseModel):
    """Body of a successful sign-up or sign-in; tokens go out as cookies"""

    message: str
    user: UserInfo


class MessageResponse(BaseModel):
    message: str


def _raise_for_auth_error(error) -> None:
    if error.code == "USERNAME_TAKEN":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code in ("INVALID_CREDENTIALS", "ALREADY_SIGNED_IN"):
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    elif error.code == "SESSION_CONFLICT":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


@router.post("/sign-up", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def sign_up(
    body: SignUpRequest,
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Sign-Up

    Creates a standard-level user and opens their session. Access and
    refresh tokens are set as http-only cookies.

    Raises:
        - 400 Bad Request: Username taken or malformed body
        - 401 Unauthorized: Caller already signed in
        - 409 Conflict: Session already active
        - 500 Internal Server Error: Server error
    """
    command = SignUpCommand(
        username=body.username,
        password=body.password,
        first_name=body.first_name,
        last_name=body.last_name,
    )

    use_case = SignUpUseCase(uow)
    result = await use_case.execute(command, request.cookies.get(TokenType.refresh.value))

    if result.is_err():
        _raise_for_auth_error(result.error)

    data = result.value
    set_auth_cookies(response, data.tokens)
    return AuthResponse(message=data.message, user=data.user)


@router.post("/sign-in", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def sign_in(
    body: SignInRequest,
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Sign-In

    Authenticates the user and opens a session, replacing a stale one left
    by a client that lost its cookies.

    Raises:
        - 401 Unauthorized: Invalid credentials or caller already signed in
        - 409 Conflict: Concurrent sign-in won the session
        - 500 Internal Server Error: Server error
    """
    use_case = SignInUseCase(uow)
    result = await use_case.execute(
        body.username, body.password, request.cookies.get(TokenType.refresh.value)
    )

    if result.is_err():
        _raise_for_auth_error(result.error)

    data = result.value
    set_auth_cookies(response, data.tokens)
    return AuthResponse(message=data.message, user=data.user)


@router.post("/sign-out", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def sign_out(
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Sign-Out

    Closes the caller's session and clears both cookies. Without valid
    cookies this is a no-op that still succeeds.
    """
    use_case = SignOutUseCase(uow)
    result = await use_case.execute(
        request.cookies.get(TokenType.access.value),
        request.cookies.get(TokenType.refresh.value),
    )

    if result.is_err():
        raise ServerError(result.error)

    data = result.value
    if data.signed_out:
        clear_auth_cookies(response)
    return MessageResponse(message=data.message)


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def refresh(
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Refresh Access Token

    Issues a new access cookie for a caller whose refresh cookie belongs to
    their current session. The refresh cookie is left as is.

    Raises:
        - 401 Unauthorized: Invalid/expired refresh token, or session closed or replaced
        - 500 Internal Server Error: Server error
    """
    use_case = RefreshAccessUseCase(uow)
    result = await use_case.execute(request.cookies.get(TokenType.refresh.value))

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "INVALID_SESSION"):
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    data = result.value
    set_access_cookie(response, data.access_token)
    return AuthResponse(message=data.message, user=data.user)
