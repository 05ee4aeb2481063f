"""JWT access tokens: creation (scripts, tests) and verification (API).

Uses dossier.core.config for secret, algorithm and default TTL.
"""

from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from dossier.core.config import get_settings
from dossier.shared.utils.datetime import utc_now


def create_access_token(
    user_id: str,
    roles: list[str] | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT whose sub is user_id.

    Args:
        user_id: Subject claim.
        roles: Informational roles claim; the API re-reads roles from the database.
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.
    """
    settings = get_settings()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims: dict[str, Any] = {"sub": user_id, "roles": roles or [], "exp": utc_now() + ttl}
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Raises:
        ValueError: If token is invalid, expired, or missing exp/sub.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if not payload.get("sub"):
        raise ValueError("Token missing required claim: sub")
    return payload
