from typing import Optional
from datetime import timedelta

from fastapi import Response
from jose import jwt
from passlib.context import CryptContext

from app.config import settings
from app.users.dao import UsersDAO
from app.users.models import Users
from app.utils import get_current_time

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = get_current_time() + (expires_delta or timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def set_access_token_cookie(response: Response, access_token: str):
    response.set_cookie(
        key="access_token",
        value=access_token,
        httponly=True,
        samesite="lax",
        secure=settings.MODE == "PROD",
        max_age=settings.ACCESS_TOKEN_EXPIRE_HOURS * 3600,
    )


async def authenticate_user(email: str, password: str) -> Optional[Users]:
    user = await UsersDAO.find_one_or_none(email=email)
    if user and verify_password(password, user.hashed_password):
        return user
    return None
