"""JWT admin sessions.

Two kinds of token open an admin session:

- HS256 tokens minted by ``POST /api/v1/auth/login``, signed with
  ``JWT_SECRET_KEY``::

      {"sub": "admin@example.com", "email": "admin@example.com",
       "role": "admin", "iat": ..., "exp": ...}

- ES256 access tokens issued by Supabase Auth, when the site is managed
  through a Supabase project. They are verified against the project JWKS
  and only accepted for the configured ``ADMIN_EMAIL``.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

import httpx
import structlog
from jose import jwt
from jose.backends import ECKey
from jose.exceptions import JOSEError

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = structlog.get_logger()

ADMIN_ROLE = "admin"
SUPABASE_ALGORITHM = "ES256"


class JwksCache:
    """Signing keys of the Supabase project, by ``kid``.

    Keys are fetched on first use. A ``kid`` that is not cached triggers one
    refetch, which picks up rotated keys. Failed fetches are not cached.
    """

    def __init__(self) -> None:
        self._keys: dict[str, dict[str, Any]] | None = None

    def clear(self) -> None:
        self._keys = None

    async def _fetch(self) -> dict[str, dict[str, Any]]:
        url = settings.supabase_jwks_url
        if not url:
            return {}
        try:
            async with httpx.AsyncClient(timeout=10.0) as client:
                response = await client.get(url)
                response.raise_for_status()
                document = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("jwks_fetch_failed", url=url, error=str(exc))
            return {}

        keys = {key["kid"]: key for key in document.get("keys", []) if key.get("kid")}
        logger.info("jwks_fetched", key_count=len(keys))
        return keys

    async def key(self, kid: str) -> dict[str, Any] | None:
        if self._keys is None or kid not in self._keys:
            self._keys = await self._fetch() or None
        return (self._keys or {}).get(kid)


supabase_jwks = JwksCache()


def _user_from_claims(claims: Mapping[str, Any]) -> TokenUser | None:
    subject = str(claims.get("sub") or "")
    if not subject:
        return None
    # Supabase service tokens carry no email
    email = str(claims.get("email") or subject)
    return TokenUser(subject=subject, email=email, role=claims.get("role"))


class JWTAuthProvider:
    """Mints and validates admin session tokens."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
        admin_email: str = settings.admin_email,
        jwks: JwksCache = supabase_jwks,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes
        self._admin_email = admin_email.strip().lower()
        self._jwks = jwks

    @property
    def expire_minutes(self) -> int:
        return self._expire_minutes

    async def validate_token(self, token: str) -> TokenUser | None:
        """The admin identity in ``token``, or None when it does not open a session.

        The signing algorithm is read from the unverified header and picks
        the verification path; it never selects the key.
        """
        try:
            header = jwt.get_unverified_header(token)
            if header.get("alg") == SUPABASE_ALGORITHM:
                return await self._validate_supabase(token, header)
            claims = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JOSEError:
            return None
        return _user_from_claims(claims)

    async def _validate_supabase(self, token: str, header: Mapping[str, Any]) -> TokenUser | None:
        kid = header.get("kid")
        if not kid:
            return None

        key_data = await self._jwks.key(kid)
        if key_data is None:
            logger.warning("jwks_key_not_found", kid=kid)
            return None

        claims = jwt.decode(
            token,
            ECKey(key_data, algorithm=SUPABASE_ALGORITHM),
            algorithms=[SUPABASE_ALGORITHM],
            options={"verify_aud": False},
        )
        user = _user_from_claims(claims)
        if user is None:
            return None
        if not self._admin_email or user.email.strip().lower() != self._admin_email:
            logger.warning("supabase_token_not_admin", subject=user.subject)
            return None
        return TokenUser(subject=user.subject, email=user.email, role=ADMIN_ROLE)

    def create_token(self, user: TokenUser) -> str:
        issued_at = datetime.now(timezone.utc)
        claims: dict[str, Any] = {
            "sub": user.subject,
            "email": user.email,
            "role": user.role or ADMIN_ROLE,
            "iat": issued_at,
            "exp": issued_at + timedelta(minutes=self._expire_minutes),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
