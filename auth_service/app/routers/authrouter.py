from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from shared.core import auth
from shared.core.database import get_db
from shared.core.schemas import UserToken
from ..schemas import authschemas
from ..services import authservices

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/signup", response_model=authschemas.MessageResponse,
             status_code=status.HTTP_201_CREATED)
def signup(
        request: authschemas.SignUpRequest,
        db: Session = Depends(get_db)):
    authservices.signup(db, request)
    return {"message": "User registered successfully"}


@router.post("/login", response_model=authschemas.TokenResponse)
def login(
        request: authschemas.LoginRequest,
        db: Session = Depends(get_db)):
    return authservices.login(db, request)


@router.get("/me", response_model=authschemas.UserOut)
def me(
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(auth.validate_current_token)):
    return authservices.get_me(db, current_user.email)
