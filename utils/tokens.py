from datetime import datetime, timedelta, timezone

import jwt  # PyJWT

from utils.errors import TokenError

JWT_ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=1)


def issue_token(subject_id, secret, ttl=DEFAULT_TTL):
    """Sign a bearer token carrying the subject id, valid for `ttl`."""
    if not secret:
        raise TokenError("JWT secret is not configured")

    now = datetime.now(timezone.utc)
    payload = {"id": str(subject_id), "iat": now, "exp": now + ttl}
    try:
        return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)
    except jwt.PyJWTError as e:
        raise TokenError(f"Could not sign token: {e}") from e


def decode_token(token, secret):
    """Return the subject id of a valid token."""
    if not secret:
        raise TokenError("JWT secret is not configured")
    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        raise TokenError("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise TokenError("Invalid token") from e

    subject = payload.get("id")
    if not subject:
        raise TokenError("Invalid token")
    return subject
