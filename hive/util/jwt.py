"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from hive.domain.value.types import IdentityClaims


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    subject: str,
    email: str,
    name: str | None,
    secret: str,
    algorithm: str = "HS256",
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Create a signed identity token.

    Produces the same claim layout as the identity provider's ID tokens
    (`sub`, `email`, `name`), signed with a shared secret.

    Args:
        subject: External subject id
        email: Email claim
        name: Optional display name claim
        secret: Signing secret
        algorithm: Signing algorithm
        expires_in: Token lifetime

    Returns:
        Encoded JWT token
    """
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": subject,
        "email": email,
        "iat": now,
        "exp": now + expires_in,
    }
    if name:
        payload["name"] = name

    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(
    token: str,
    key: Any,
    algorithms: list[str],
    audience: str | None = None,
    issuer: str | None = None,
    leeway: int = 0,
) -> IdentityClaims:
    """Verify and decode an identity token.

    Args:
        token: JWT token to verify
        key: Secret or public key
        algorithms: Accepted algorithms
        audience: Expected `aud` claim (skipped when None)
        issuer: Expected `iss` claim (skipped when None)
        leeway: Tolerated clock skew in seconds

    Returns:
        Identity claims if valid

    Raises:
        JWTError: If token is invalid, expired or lacks required claims
    """
    options = {"require": ["exp", "sub"], "verify_aud": audience is not None}
    try:
        payload = jwt.decode(
            token,
            key,
            algorithms=algorithms,
            audience=audience,
            issuer=issuer,
            leeway=leeway,
            options=options,
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    email = payload.get("email")
    if not email:
        raise JWTError("Token has no email claim")

    return IdentityClaims(
        subject=payload["sub"],
        email=email,
        name=payload.get("name"),
    )
