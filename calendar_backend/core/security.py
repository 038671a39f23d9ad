# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings


BCRYPT_ROUNDS = 12


def hash_password(plain_password: str) -> str:
    """Hash a plain password with a fresh bcrypt salt."""
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True when the plain password matches the stored bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def create_access_token(subject: str, extra_claims: Optional[Dict[str, Any]] = None) -> str:
    """
    Issue a signed access token for a user.

    Args:
        subject: User ID stored in the standard ``sub`` claim
        extra_claims: Additional claims to embed (e.g. email)

    Returns:
        Encoded JWT string
    """
    settings = get_settings()
    issued_at = int(time.time())
    claims: Dict[str, Any] = dict(extra_claims or {})
    claims.update(
        {
            "sub": subject,
            "iat": issued_at,
            "exp": issued_at + settings.access_token_expire_minutes * 60,
        }
    )
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate an access token.

    Raises:
        ValueError: If the token is malformed, tampered with or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")
