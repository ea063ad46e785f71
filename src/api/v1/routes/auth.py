"""Admin session API routes."""

from fastapi import APIRouter, Depends, Request, Response

from api.dependencies.auth import get_auth_provider
from api.v1.dependencies import get_admin_credentials
from api.v1.schemas.auth import LoginRequest, LoginResponse
from api.v1.schemas.common import SuccessResponse
from core.config import settings
from core.exceptions import AuthenticationError, ErrorCode
from core.rate_limit import limiter
from infrastructure.auth.admin_credentials import AdminCredentials
from infrastructure.auth.provider import IAuthProvider, TokenUser

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in as the site admin",
    responses={401: {"description": "Invalid email or password"}},
)
@limiter.limit("5/minute")  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    response: Response,
    body: LoginRequest,
    credentials: AdminCredentials = Depends(get_admin_credentials),
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> LoginResponse:
    """Checks the admin email and password and sets the session cookie."""
    if not credentials.verify(body.email, body.password):
        raise AuthenticationError(
            message="Invalid email or password",
            error_code=ErrorCode.INVALID_CREDENTIALS,
        )

    email = body.email.strip().lower()
    token = auth_provider.create_token(TokenUser(subject=email, email=email))
    max_age = auth_provider.expire_minutes * 60
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=max_age,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )
    return LoginResponse(token=token, expires_in=max_age)


@router.post("/logout", response_model=SuccessResponse, summary="Log out")
async def logout(response: Response) -> SuccessResponse:
    response.delete_cookie(key=settings.auth_cookie_name, path="/")
    return SuccessResponse()
