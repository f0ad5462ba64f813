import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.core import auth
from shared.core.exceptions import AuthenticationFailed, DuplicateIdentity, OwnerNotFound
from shared.models.users import Users, bcrypt_context
from ..schemas import authschemas

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> Optional[Users]:
    return db.query(Users).filter(Users.email == email).first()


def email_exists(db: Session, email: str) -> bool:
    return db.query(Users.id).filter(Users.email == email).first() is not None


def signup(db: Session, request: authschemas.SignUpRequest) -> Users:
    if email_exists(db, request.email):
        raise DuplicateIdentity(f"Email '{request.email}' is already taken")

    user = Users(name=request.name, email=request.email)
    user.set_password(request.password)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race with a concurrent sign-up for the same email
        db.rollback()
        raise DuplicateIdentity(f"Email '{request.email}' is already taken")
    db.refresh(user)

    logger.info("Registered user %s", user.id)
    return user


def login(db: Session, request: authschemas.LoginRequest) -> authschemas.TokenResponse:
    user = get_user_by_email(db, request.email)

    # unknown email and wrong password must look the same to the caller,
    # including how long the hash check takes
    if not user:
        bcrypt_context.dummy_verify()
    if not user or not user.verify_password(request.password):
        logger.warning("Rejected login attempt")
        raise AuthenticationFailed()

    token = auth.create_access_token({
        "sub": user.email,
        "user_id": user.id,
        "name": user.name})
    return authschemas.TokenResponse(token=token)


def get_me(db: Session, email: str) -> Users:
    user = get_user_by_email(db, email)
    if not user:
        raise OwnerNotFound(f"User not found with email: {email}")
    return user
