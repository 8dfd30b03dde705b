# backend/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError

from core.config import settings
from models.identity import CallerIdentity


JWT_SECRET = settings.SECRET_KEY
JWT_ALGORITHM = settings.JWT_ALGORITHM

# Token expiry (minutes) default from settings
ACCESS_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES


def create_access_token(
    subject: str,
    email: Optional[str] = None,
    expires_minutes: Optional[int] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Sign an identity token the same way the identity provider does.
    Supports both 'expires_minutes' and 'expires_delta' for compatibility.
    """
    if expires_delta is not None:
        exp = datetime.now(timezone.utc) + expires_delta
    else:
        exp = datetime.now(timezone.utc) + timedelta(
            minutes=expires_minutes or ACCESS_EXPIRE_MINUTES
        )

    to_encode = {"sub": str(subject), "exp": exp}
    if email is not None:
        to_encode["email"] = email
    return jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    """
    Decode and validate a JWT. Raises JWTError on invalid/expired tokens.
    """
    return jwt.decode(
        token,
        JWT_SECRET,
        algorithms=[JWT_ALGORITHM],
        options={"verify_aud": False},  # we don't use 'aud'
    )


def identity_from_token(token: Optional[str]) -> Optional[CallerIdentity]:
    """
    Map a bearer token to a CallerIdentity, or None when there is no
    verified identity (missing, malformed, expired or subject-less token).
    """
    if not token:
        return None
    try:
        payload = decode_token(token)
    except JWTError:
        return None

    sub = payload.get("sub")
    if sub is None:
        return None
    email = payload.get("email")
    return CallerIdentity(subject=str(sub), email=email if isinstance(email, str) else None)
