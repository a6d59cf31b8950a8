from datetime import datetime, timedelta, timezone

import jwt
from fastapi import HTTPException
from passlib.context import CryptContext
from pydantic import BaseModel, ValidationError

from catalog_api.shared import Logger, load_config

logger = Logger(__name__).get_logger()

config = load_config()

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class TokenData(BaseModel):
    id: str
    iat: int
    exp: int


def hash_password(password: str) -> str:
    """Hash a plaintext password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    return pwd_context.verify(password, hashed)


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=config.auth.token_expire_minutes)
    payload = {
        "id": user_id,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(payload, config.auth.secret, algorithm=config.auth.algorithm)


def decode_access_token(token: str) -> TokenData:
    """
    Verifies the signature and expiry of a bearer token.
    Raises HTTPException(401) if the token cannot be trusted.
    """
    try:
        payload = jwt.decode(
            token, config.auth.secret, algorithms=[config.auth.algorithm]
        )
        return TokenData.model_validate(payload)
    except jwt.ExpiredSignatureError as e:
        logger.warning("Rejected expired token")
        raise HTTPException(status_code=401, detail="Token has expired") from e
    except (jwt.InvalidTokenError, ValidationError) as e:
        logger.warning("Token verification failed: %s", e)
        raise HTTPException(
            status_code=401, detail="Failed to authenticate token."
        ) from e
