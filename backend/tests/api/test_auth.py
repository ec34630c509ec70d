"""Tests for Supabase JWT authentication and profile provisioning."""

import time
import uuid
from unittest.mock import MagicMock, patch

import jwt as pyjwt
import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from app.core.auth import decode_supabase_jwt, require_admin, require_auth
from app.domain.identity import ActingIdentity
from app.domain.roles import Role

pytestmark = pytest.mark.unit

_SECRET = "test-supabase-jwt-secret-with-enough-length"


def _mock_settings():
    s = MagicMock()
    s.supabase_jwt_secret = _SECRET
    s.supabase_jwt_audience = "authenticated"
    return s


def _token(**overrides) -> str:
    now = int(time.time())
    payload = {
        "sub": str(uuid.uuid4()),
        "email": "kim@example.com",
        "aud": "authenticated",
        "iat": now,
        "exp": now + 3600,
    }
    payload.update(overrides)
    payload = {k: v for k, v in payload.items() if v is not None}
    return pyjwt.encode(payload, _SECRET, algorithm="HS256")


@pytest.fixture(autouse=True)
def _settings():
    with patch("app.core.auth.get_settings", return_value=_mock_settings()):
        yield


class TestDecodeSupabaseJwt:
    def test_valid_token(self):
        user_id = uuid.uuid4()
        user = decode_supabase_jwt(_token(sub=str(user_id)))

        assert user.user_id == user_id
        assert user.email == "kim@example.com"

    def test_expired_token(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_supabase_jwt(_token(exp=int(time.time()) - 60))
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token expired"

    def test_wrong_audience(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_supabase_jwt(_token(aud="anon"))
        assert exc_info.value.status_code == 401

    def test_wrong_secret(self):
        token = pyjwt.encode(
            {"sub": str(uuid.uuid4()), "aud": "authenticated", "exp": int(time.time()) + 60},
            "another-secret-with-enough-length-too",
            algorithm="HS256",
        )
        with pytest.raises(HTTPException) as exc_info:
            decode_supabase_jwt(token)
        assert exc_info.value.status_code == 401

    def test_missing_sub(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_supabase_jwt(_token(sub=None))
        assert exc_info.value.status_code == 401

    def test_non_uuid_sub(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_supabase_jwt(_token(sub="not-a-uuid"))
        assert exc_info.value.status_code == 401

    def test_unconfigured_secret(self):
        settings = _mock_settings()
        settings.supabase_jwt_secret = ""
        with patch("app.core.auth.get_settings", return_value=settings):
            with pytest.raises(HTTPException) as exc_info:
                decode_supabase_jwt(_token())
        assert exc_info.value.status_code == 500


class TestRequireAuth:
    @pytest.mark.asyncio
    async def test_missing_credentials(self):
        with pytest.raises(HTTPException) as exc_info:
            await require_auth(MagicMock(), None)
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_sets_user_id_on_request_state(self):
        user_id = uuid.uuid4()
        request = MagicMock()
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials=_token(sub=str(user_id)))

        user = await require_auth(request, credentials)

        assert user.user_id == user_id
        assert request.state.user_id == str(user_id)


class TestRequireAdmin:
    @pytest.mark.asyncio
    async def test_admin_passes(self):
        admin = ActingIdentity(user_id=uuid.uuid4(), role=Role.ADMIN)
        assert await require_admin(admin) is admin

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [Role.SILVER, Role.GOLD])
    async def test_non_admin_rejected(self, role):
        with pytest.raises(HTTPException) as exc_info:
            await require_admin(ActingIdentity(user_id=uuid.uuid4(), role=role))
        assert exc_info.value.status_code == 403
