# interviewhub/services/token_auth.py
import logging
from typing import Dict

from jose import jwt, JWTError

from interviewhub.config import settings

logger = logging.getLogger(__name__)


def decode_token(token: str) -> Dict[str, str | None]:
    """
    Verify an identity-provider access token (HS256) and return the claims we
    use: sub (external identity id), email and name.
    """
    token = (token or "").strip()
    if not token:
        raise ValueError("missing token")

    decode_kwargs = {
        "key": settings.auth_jwt_secret,
        "algorithms": ["HS256"],
        "options": {
            "verify_aud": bool(settings.auth_jwt_audience),
            "verify_iss": bool(settings.auth_jwt_issuer),
        },
    }
    # audience / issuer are only checked when configured
    if settings.auth_jwt_audience:
        decode_kwargs["audience"] = settings.auth_jwt_audience
    if settings.auth_jwt_issuer:
        decode_kwargs["issuer"] = settings.auth_jwt_issuer

    try:
        claims = jwt.decode(token, **decode_kwargs)
    except JWTError as e:
        raise ValueError("invalid token") from e

    subject = claims.get("sub")
    if not subject:
        raise ValueError("invalid token: missing sub")

    return {
        "user_id": str(subject),
        "email": claims.get("email"),
        "name": claims.get("name"),
    }


async def verify_bearer(authorization: str | None) -> Dict[str, str | None]:
    """
    - take the token out of `Authorization: Bearer <access_token>`
    - verify it with the shared secret
    - return the basic claims
    """
    if not authorization:
        raise ValueError("missing Authorization header")

    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise ValueError("invalid Authorization header")

    return decode_token(parts[1])
