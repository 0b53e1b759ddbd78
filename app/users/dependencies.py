from datetime import datetime
from typing import Optional

from fastapi import Request, Depends
from jose import jwt, JWTError, ExpiredSignatureError

from app.config import settings
from app.exceptions import (
    TokenExpiredException,
    TokenAbsentException,
    IncorrectTokenFormatException,
    UserIsNotPresentException,
)
from app.logger.logger import logger


def get_token(request: Request) -> str:
    """Извлекает токен из файлов cookie или заголовков."""
    token = request.cookies.get("access_token")
    if not token:
        token = request.headers.get("access_token")
    if not token:
        logger.warning("Токен отсутствует в файлах cookie и заголовках.")
        raise TokenAbsentException
    return token


async def get_current_user_id(token: str = Depends(get_token)) -> int:
    """Проверяем токен и возвращаем идентификатор пользователя, не обращаясь к базе."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        logger.warning("Срок действия токена истек.")
        raise TokenExpiredException
    except JWTError as e:
        logger.warning(f"Ошибка декодирования токена: {str(e)}")
        raise IncorrectTokenFormatException

    expire: Optional[int] = payload.get("exp")
    if not expire or int(expire) < datetime.now().timestamp():
        logger.warning("Срок действия токена истек.")
        raise TokenExpiredException

    user_id: Optional[str] = payload.get("sub")
    if not user_id or not str(user_id).isdigit():
        logger.warning("Идентификатор пользователя не найден в токене.")
        raise UserIsNotPresentException

    return int(user_id)
