"""
Cookie writer for the two bearer artifacts.

The cookie names ("access", "refresh") and their lifetimes are the only wire
contract the service owns.
"""

from fastapi import Response

from config import ApplicationConfig
from authgate.app.use_cases.sessions import TokenPair
from authgate.domain.entities import TokenType


def _set_cookie(response: Response, token_type: TokenType, token: str, max_age: int) -> None:
    response.set_cookie(
        key=token_type.value,
        value=token,
        max_age=max_age,
        httponly=True,
        secure=ApplicationConfig.COOKIE_SECURE,
        samesite=ApplicationConfig.COOKIE_SAMESITE,
    )


def set_access_cookie(response: Response, access_token: str) -> None:
    _set_cookie(
        response, TokenType.access, access_token, ApplicationConfig.ACCESS_TOKEN_TTL_SECONDS
    )


def set_auth_cookies(response: Response, tokens: TokenPair) -> None:
    set_access_cookie(response, tokens.access_token)
    _set_cookie(
        response,
        TokenType.refresh,
        tokens.refresh_token,
        ApplicationConfig.REFRESH_TOKEN_TTL_SECONDS,
    )


def clear_auth_cookies(response: Response) -> None:
    for token_type in TokenType:
        response.delete_cookie(
            key=token_type.value,
            httponly=True,
            secure=ApplicationConfig.COOKIE_SECURE,
            samesite=ApplicationConfig.COOKIE_SAMESITE,
        )
