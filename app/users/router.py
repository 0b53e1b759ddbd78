from fastapi import APIRouter, status, Response
from fastapi_versioning import version

from app.auth.auth import get_password_hash, create_access_token, set_access_token_cookie
from app.exceptions import UserEmailAlreadyExistsException
from app.logger.logger import logger
from app.users.dao import UsersDAO
from app.users.schemas import SUserRegister


router_users = APIRouter(
    prefix="/users",
    tags=["Пользователи"]
)


@router_users.post("/register", status_code=status.HTTP_200_OK, summary="Регистрация пользователя")
@version(1)
async def register_user(response: Response, user_data: SUserRegister):
    """Регистрация нового пользователя, токен доступа сразу кладется в cookie"""
    existing_user = await UsersDAO.find_one_or_none(email=user_data.email)
    if existing_user:
        logger.warning(f"Email {user_data.email} уже используется.")
        raise UserEmailAlreadyExistsException

    new_user = await UsersDAO.add(
        email=user_data.email,
        hashed_password=get_password_hash(user_data.password),
        firstname=user_data.first_name,
        lastname=user_data.last_name,
    )
    logger.info(f"Новый пользователь зарегистрирован: id={new_user.id}")

    access_token = create_access_token({"sub": str(new_user.id)})
    set_access_token_cookie(response, access_token)

    return {"message": "Пользователь успешно зарегистрирован"}
