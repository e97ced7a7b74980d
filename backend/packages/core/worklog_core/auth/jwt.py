"""
JWT token handling.

Worklog does not issue sessions itself; tokens are minted by the sign-in
service and only verified here. ``create_access_token`` exists for that
service and for tests.
"""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError


class JWTConfig(BaseModel):
    """JWT signing configuration."""

    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24


class TokenData(BaseModel):
    """Decoded token claims."""

    sub: str
    type: str
    exp: int
    iat: int


def create_access_token(user_id: str, config: JWTConfig) -> str:
    """
    Create a signed access token.

    Args:
        user_id: Subject user identifier.
        config: JWT configuration.

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=config.access_token_expire_minutes)
    claims = {
        "sub": str(user_id),
        "type": "access",
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(claims, config.secret_key, algorithm=config.algorithm)


def verify_token(token: str, config: JWTConfig) -> TokenData | None:
    """
    Verify and decode a token.

    Args:
        token: Encoded JWT string.
        config: JWT configuration.

    Returns:
        Token claims, or None if the token is invalid or expired.
    """
    try:
        payload = jwt.decode(token, config.secret_key, algorithms=[config.algorithm])
        return TokenData.model_validate(payload)
    except (JWTError, ValidationError):
        return None
