from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class SUserRegister(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: EmailStr
    password: str = Field(..., min_length=6, description="Пароль должен содержать не менее 6 символов")
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
