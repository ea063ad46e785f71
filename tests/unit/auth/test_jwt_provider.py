"""Unit tests for JWTAuthProvider: admin session tokens and Supabase ES256 tokens."""

import time
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from jose import jwk
from jose import jwt as jose_jwt

from infrastructure.auth import jwt_provider as jwt_provider_module
from infrastructure.auth.jwt_provider import ADMIN_ROLE, JwksCache, JWTAuthProvider
from infrastructure.auth.provider import TokenUser

ADMIN = "admin@example.com"
JWKS_URL = "https://example.supabase.co/auth/v1/.well-known/jwks.json"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_hs256_token(payload: dict, secret: str = "test-secret") -> str:
    return jose_jwt.encode(payload, secret, algorithm="HS256")


class EcKeyPair:
    """A throwaway P-256 key pair standing in for the Supabase signing key."""

    def __init__(self, kid: str = "k1") -> None:
        private = ec.generate_private_key(ec.SECP256R1())
        self.kid = kid
        self.private_pem = private.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        )
        public_pem = private.public_key().public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        self.public_jwk = {**jwk.construct(public_pem, "ES256").to_dict(), "kid": kid}

    def sign(self, claims: dict, kid: str | None = None) -> str:
        return jose_jwt.encode(
            claims,
            self.private_pem,
            algorithm="ES256",
            headers={"kid": kid if kid is not None else self.kid},
        )


class StaticJwks(JwksCache):
    """JWKS cache preloaded with fixed keys; never goes to the network."""

    def __init__(self, *keys: dict) -> None:
        super().__init__()
        self._static = {key["kid"]: key for key in keys}

    async def key(self, kid: str) -> dict | None:
        return self._static.get(kid)


def _supabase_claims(email: str = ADMIN, **extra) -> dict:
    return {
        "sub": str(uuid4()),
        "email": email,
        "role": "authenticated",
        "exp": int(time.time()) + 600,
        **extra,
    }


def _mock_http_client(response: MagicMock | None = None, error: Exception | None = None):
    client = AsyncMock()
    if error is not None:
        client.get.side_effect = error
    else:
        client.get.return_value = response
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client


def _jwks_response(keys: list[dict]) -> MagicMock:
    response = MagicMock()
    response.json.return_value = {"keys": keys}
    response.raise_for_status = MagicMock()
    return response


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def hs256_provider() -> JWTAuthProvider:
    return JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=30)


@pytest.fixture
def signing_key() -> EcKeyPair:
    return EcKeyPair()


@pytest.fixture
def supabase_provider(signing_key: EcKeyPair) -> JWTAuthProvider:
    return JWTAuthProvider(
        secret_key="test-secret",
        algorithm="HS256",
        expire_minutes=30,
        admin_email=ADMIN,
        jwks=StaticJwks(signing_key.public_jwk),
    )


# ---------------------------------------------------------------------------
# Tests: admin session tokens
# ---------------------------------------------------------------------------


class TestSessionTokens:
    """Round trip of tokens minted at login and the claims validate_token requires."""

    async def test_should_round_trip_admin_session_token(self, hs256_provider: JWTAuthProvider):
        token = hs256_provider.create_token(TokenUser(subject=ADMIN, email=ADMIN))

        result = await hs256_provider.validate_token(token)

        assert result == TokenUser(subject=ADMIN, email=ADMIN, role=ADMIN_ROLE)

    async def test_should_reject_expired_token(self):
        expired = JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=-1)
        token = expired.create_token(TokenUser(subject=ADMIN, email=ADMIN))

        provider = JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=30)

        assert await provider.validate_token(token) is None

    async def test_should_reject_token_signed_with_other_secret(
        self, hs256_provider: JWTAuthProvider
    ):
        token = _make_hs256_token({"sub": ADMIN, "exp": 9999999999}, secret="other")

        assert await hs256_provider.validate_token(token) is None

    async def test_should_reject_garbage(self, hs256_provider: JWTAuthProvider):
        assert await hs256_provider.validate_token("not-a-jwt") is None

    async def test_should_return_none_when_token_has_no_sub_claim(
        self, hs256_provider: JWTAuthProvider
    ):
        token = _make_hs256_token({"email": ADMIN, "exp": 9999999999})

        assert await hs256_provider.validate_token(token) is None

    async def test_should_return_none_when_token_has_empty_sub(
        self, hs256_provider: JWTAuthProvider
    ):
        token = _make_hs256_token({"sub": "", "email": ADMIN, "exp": 9999999999})

        assert await hs256_provider.validate_token(token) is None

    async def test_should_fall_back_to_sub_when_email_missing(
        self, hs256_provider: JWTAuthProvider
    ):
        subject = str(uuid4())
        token = _make_hs256_token({"sub": subject, "email": "", "exp": 9999999999})

        result = await hs256_provider.validate_token(token)

        assert result is not None
        assert result.email == subject

    def test_should_expose_expiry(self, hs256_provider: JWTAuthProvider):
        assert hs256_provider.expire_minutes == 30


# ---------------------------------------------------------------------------
# Tests: JwksCache
# ---------------------------------------------------------------------------


class TestJwksCache:
    async def test_should_return_none_without_supabase_url(self):
        with patch.object(jwt_provider_module, "settings") as mock_settings:
            mock_settings.supabase_jwks_url = ""

            assert await JwksCache().key("k1") is None

    async def test_should_fetch_once_and_serve_from_cache(self):
        client = _mock_http_client(
            _jwks_response([{"kid": "k1", "kty": "EC"}, {"kid": "k2", "kty": "EC"}])
        )
        cache = JwksCache()

        with (
            patch.object(jwt_provider_module, "settings") as mock_settings,
            patch.object(jwt_provider_module.httpx, "AsyncClient", return_value=client),
        ):
            mock_settings.supabase_jwks_url = JWKS_URL

            first = await cache.key("k1")
            second = await cache.key("k2")

        assert first == {"kid": "k1", "kty": "EC"}
        assert second == {"kid": "k2", "kty": "EC"}
        client.get.assert_called_once_with(JWKS_URL)

    async def test_should_refetch_on_unknown_kid(self):
        client = _mock_http_client()
        client.get.side_effect = [
            _jwks_response([{"kid": "old", "kty": "EC"}]),
            _jwks_response([{"kid": "rotated", "kty": "EC"}]),
        ]
        cache = JwksCache()

        with (
            patch.object(jwt_provider_module, "settings") as mock_settings,
            patch.object(jwt_provider_module.httpx, "AsyncClient", return_value=client),
        ):
            mock_settings.supabase_jwks_url = JWKS_URL

            assert await cache.key("old") is not None
            assert await cache.key("rotated") == {"kid": "rotated", "kty": "EC"}

        assert client.get.call_count == 2

    async def test_should_not_cache_failed_fetch(self):
        failing = _mock_http_client(error=httpx.ConnectError("Connection refused"))
        working = _mock_http_client(_jwks_response([{"kid": "k1", "kty": "EC"}]))
        cache = JwksCache()

        with (
            patch.object(jwt_provider_module, "settings") as mock_settings,
            patch.object(
                jwt_provider_module.httpx, "AsyncClient", side_effect=[failing, working]
            ),
        ):
            mock_settings.supabase_jwks_url = JWKS_URL

            assert await cache.key("k1") is None
            assert await cache.key("k1") == {"kid": "k1", "kty": "EC"}

    async def test_should_skip_keys_without_kid(self):
        client = _mock_http_client(
            _jwks_response([{"kty": "EC"}, {"kid": "good-key", "kty": "EC"}])
        )
        cache = JwksCache()

        with (
            patch.object(jwt_provider_module, "settings") as mock_settings,
            patch.object(jwt_provider_module.httpx, "AsyncClient", return_value=client),
        ):
            mock_settings.supabase_jwks_url = JWKS_URL

            assert await cache.key("good-key") is not None

    async def test_clear_forces_refetch(self):
        client = _mock_http_client(_jwks_response([{"kid": "k1", "kty": "EC"}]))
        cache = JwksCache()

        with (
            patch.object(jwt_provider_module, "settings") as mock_settings,
            patch.object(jwt_provider_module.httpx, "AsyncClient", return_value=client),
        ):
            mock_settings.supabase_jwks_url = JWKS_URL
            await cache.key("k1")
            cache.clear()
            await cache.key("k1")

        assert client.get.call_count == 2


# ---------------------------------------------------------------------------
# Tests: Supabase ES256 tokens
# ---------------------------------------------------------------------------


class TestSupabaseTokens:
    async def test_should_accept_admin_token(
        self, supabase_provider: JWTAuthProvider, signing_key: EcKeyPair
    ):
        claims = _supabase_claims()
        token = signing_key.sign(claims)

        result = await supabase_provider.validate_token(token)

        assert result == TokenUser(subject=claims["sub"], email=ADMIN, role=ADMIN_ROLE)

    async def test_should_match_admin_email_case_insensitively(
        self, supabase_provider: JWTAuthProvider, signing_key: EcKeyPair
    ):
        token = signing_key.sign(_supabase_claims(email="Admin@Example.com"))

        assert await supabase_provider.validate_token(token) is not None

    async def test_should_reject_other_users(
        self, supabase_provider: JWTAuthProvider, signing_key: EcKeyPair
    ):
        token = signing_key.sign(_supabase_claims(email="visitor@example.com"))

        assert await supabase_provider.validate_token(token) is None

    async def test_should_reject_when_no_admin_configured(self, signing_key: EcKeyPair):
        provider = JWTAuthProvider(
            secret_key="test-secret",
            admin_email="",
            jwks=StaticJwks(signing_key.public_jwk),
        )

        assert await provider.validate_token(signing_key.sign(_supabase_claims())) is None

    async def test_should_reject_unknown_kid(
        self, supabase_provider: JWTAuthProvider, signing_key: EcKeyPair
    ):
        token = signing_key.sign(_supabase_claims(), kid="missing-kid")

        assert await supabase_provider.validate_token(token) is None

    async def test_should_reject_missing_kid(
        self, supabase_provider: JWTAuthProvider, signing_key: EcKeyPair
    ):
        token = jose_jwt.encode(_supabase_claims(), signing_key.private_pem, algorithm="ES256")

        assert await supabase_provider.validate_token(token) is None

    async def test_should_reject_token_signed_by_other_key(
        self, supabase_provider: JWTAuthProvider
    ):
        impostor = EcKeyPair(kid="k1")

        assert await supabase_provider.validate_token(impostor.sign(_supabase_claims())) is None

    async def test_should_reject_expired_token(
        self, supabase_provider: JWTAuthProvider, signing_key: EcKeyPair
    ):
        token = signing_key.sign(_supabase_claims(exp=int(time.time()) - 60))

        assert await supabase_provider.validate_token(token) is None

    async def test_should_ignore_audience(
        self, supabase_provider: JWTAuthProvider, signing_key: EcKeyPair
    ):
        token = signing_key.sign(_supabase_claims(aud="authenticated"))

        assert await supabase_provider.validate_token(token) is not None
