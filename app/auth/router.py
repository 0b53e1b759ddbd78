from fastapi import APIRouter, status, Response, Depends
from fastapi_versioning import version

from app.auth.auth import authenticate_user, create_access_token, set_access_token_cookie
from app.auth.schemas import SUserLogin
from app.exceptions import InvalidCredentialsException
from app.logger.logger import logger
from app.users.dependencies import get_current_user_id

router_auth = APIRouter(
    prefix="/auth",
    tags=["Авторизация"],
)


@router_auth.post("/login", status_code=status.HTTP_200_OK, summary="Авторизация пользователя")
@version(1)
async def login_user(response: Response, user_data: SUserLogin):
    """Проверка email и пароля, токен доступа кладется в cookie"""
    user = await authenticate_user(user_data.email, user_data.password)
    if not user:
        logger.warning(f"Неудачная попытка входа для {user_data.email}")
        raise InvalidCredentialsException

    access_token = create_access_token({"sub": str(user.id)})
    set_access_token_cookie(response, access_token)

    return {"userId": user.id}


@router_auth.get("/validate-token", status_code=status.HTTP_200_OK, summary="Проверка токена")
@version(1)
async def validate_token(user_id: int = Depends(get_current_user_id)):
    return {"userId": user_id}


@router_auth.post("/logout", status_code=status.HTTP_200_OK, summary="Выход пользователя")
@version(1)
async def logout_user(response: Response):
    """Удаление токена и выход пользователя"""
    response.delete_cookie(key="access_token")
    return {"message": "Успешный выход из системы"}
