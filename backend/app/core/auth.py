"""Supabase JWT authentication for FastAPI."""

from dataclasses import dataclass
from uuid import UUID

import jwt as pyjwt
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import get_settings
from app.domain.identity import ActingIdentity
from app.domain.roles import Capability

_bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthUser:
    """Authenticated user extracted from a Supabase session JWT."""

    user_id: UUID
    email: str | None
    claims: dict


def decode_supabase_jwt(token: str) -> AuthUser:
    """Verify and decode a Supabase session JWT (HS256, shared secret).

    Raises ``HTTPException(401)`` on any validation failure.
    """
    settings = get_settings()
    if not settings.supabase_jwt_secret:
        raise HTTPException(status_code=500, detail="Authentication is misconfigured")

    try:
        payload = pyjwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=["HS256"],
            audience=settings.supabase_jwt_audience,
            options={
                "verify_exp": True,
                "require": ["sub", "exp"],
            },
        )
    except pyjwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except pyjwt.InvalidAudienceError:
        raise HTTPException(status_code=401, detail="Unauthorized audience (aud mismatch)")
    except pyjwt.MissingRequiredClaimError as exc:
        raise HTTPException(status_code=401, detail=f"Missing required claim: {exc}")
    except pyjwt.InvalidTokenError as exc:
        raise HTTPException(status_code=401, detail=f"Invalid token: {exc}")

    try:
        user_id = UUID(payload["sub"])
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Token sub claim is not a user id")

    return AuthUser(user_id=user_id, email=payload.get("email"), claims=payload)


async def require_auth(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> AuthUser:
    """FastAPI dependency that extracts and validates the bearer JWT.

    Usage::

        @router.get("/protected")
        async def protected(user: AuthUser = Depends(require_auth)):
            ...
    """
    if credentials is None:
        raise HTTPException(status_code=401, detail="Missing authorization header")

    user = decode_supabase_jwt(credentials.credentials)

    # Set user_id on request state for downstream use (error handlers, audit logging)
    request.state.user_id = str(user.user_id)

    return user


async def get_acting_identity(user: AuthUser = Depends(require_auth)) -> ActingIdentity:
    """Resolve the caller's profile (provisioning it on first login) into an ActingIdentity."""
    from app.core.provisioning import provision_profile_on_first_login

    profile = await provision_profile_on_first_login(user.user_id, user.claims)
    return ActingIdentity.from_profile(profile)


async def require_admin(acting: ActingIdentity = Depends(get_acting_identity)) -> ActingIdentity:
    """FastAPI dependency that requires the admin console capability."""
    if not acting.can(Capability.MANAGE_CONSOLE):
        raise HTTPException(status_code=403, detail="Admin access required")
    return acting
