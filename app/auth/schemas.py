from pydantic import BaseModel, EmailStr, Field


class SUserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6, description="Пароль должен содержать не менее 6 символов")
