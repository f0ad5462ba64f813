import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from pydantic import ValidationError
from sqlalchemy.orm import Session

from shared.models.users import Users
from shared.core.config import settings
from shared.core.exceptions import Unauthenticated
from shared.core.schemas import UserToken
from shared.core.database import get_db

logger = logging.getLogger(__name__)

# missing header is reported through our own Unauthenticated error
security = HTTPBearer(auto_error=False)


def create_access_token(data: dict):
    payload = data.copy()
    payload['exp'] = datetime.now(timezone.utc) + \
        timedelta(minutes=settings.JWT_EXPIRE_MINUTES)

    return jwt.encode(payload, settings.JWT_SECRET,
                      algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> UserToken:
    """Verify signature and expiry, then decode a JWT token."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET,
                             algorithms=[settings.JWT_ALGORITHM])
        return UserToken(**payload)
    except (JWTError, ValidationError):
        raise Unauthenticated("Invalid or expired token")


def validate_current_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> UserToken:
    if credentials is None:
        raise Unauthenticated()

    user_data = verify_token(credentials.credentials)

    # token may outlive the account it was issued for
    user = db.query(Users).filter(Users.email == user_data.email).first()
    if not user:
        logger.warning("Token subject %s no longer resolves to a user",
                       user_data.email)
        raise Unauthenticated("User not found")

    user_data.user_id = user.id
    user_data.name = user.name
    return user_data
