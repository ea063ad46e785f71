"""Admin session dependencies.

Reads are public. Every content write declares ``CurrentAdmin`` ahead of its
body, so a request without a valid session is turned away before anything
is parsed or stored.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.config import settings
from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import IAuthProvider, TokenUser

# Documents the bearer scheme in OpenAPI; the cookie is checked first
bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_auth_provider() -> IAuthProvider:
    return JWTAuthProvider()


def extract_token(
    request: Request, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    """Session cookie first, then the ``Authorization: Bearer`` header."""
    cookie = request.cookies.get(settings.auth_cookie_name)
    if cookie:
        return cookie
    return credentials.credentials if credentials else None


async def get_current_admin(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> TokenUser:
    """
    The admin behind the request's session token.

    Raises:
        AuthenticationError: UNAUTHORIZED without a token, INVALID_TOKEN when
            the token is forged, expired or not an admin's
    """
    token = extract_token(request, credentials)
    if not token:
        raise AuthenticationError(
            message="Authentication required",
            error_code=ErrorCode.UNAUTHORIZED,
        )

    admin = await auth_provider.validate_token(token)
    if admin is None:
        raise AuthenticationError(
            message="Invalid or expired session",
            error_code=ErrorCode.INVALID_TOKEN,
        )
    return admin


CurrentAdmin = Annotated[TokenUser, Depends(get_current_admin)]
