# app/api/authentication.py

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import REGISTER_TOKEN_EXPIRE_DAYS
from app.core.database import get_db
from app.core.security import create_access_token
from app.models.auth_models import (
    RegisterRequest,
    LoginRequest,
    AuthResponse,
    UserOut,
    ErrorResponse,
)
from app.services.auth_service import AuthService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["Authentication"])


def _auth_response(user, expires_delta=None) -> AuthResponse:
    token = create_access_token({"user_id": user.id, "email": user.email}, expires_delta)
    return AuthResponse(token=token, user=UserOut(id=user.id, email=user.email))


@router.post("/register", response_model=AuthResponse, responses={400: {"model": ErrorResponse}})
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    """Create an account and sign the new user in right away."""
    user = AuthService(db).register(data.email, data.password)
    return _auth_response(user, timedelta(days=REGISTER_TOKEN_EXPIRE_DAYS))


@router.post("/login", response_model=AuthResponse, responses={400: {"model": ErrorResponse}})
def login(data: LoginRequest, db: Session = Depends(get_db)):
    user = AuthService(db).authenticate(data.email, data.password)
    logger.info(f"User {user.id} signed in")
    return _auth_response(user)
