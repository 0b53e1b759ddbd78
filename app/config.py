from typing import Literal, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    MODE: Literal["DEV", "TEST", "PROD"]
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FILE: Optional[str] = None
    TIMEZONE: str = "UTC"

    DB_HOST: str
    DB_PORT: int
    DB_USER: str
    DB_PASS: str
    DB_NAME: str

    @property
    def DATABASE_URL(self):
        return f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASS}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24

    # Настройки Cloudinary
    CLOUDINARY_CLOUD_NAME: str
    CLOUDINARY_API_KEY: str
    CLOUDINARY_API_SECRET: str
    CLOUDINARY_TIMEOUT: float = 30.0

    # Ограничения на загружаемые изображения
    MAX_IMAGE_FILES: int = 6
    MAX_IMAGE_FILE_SIZE: int = 5 * 1024 * 1024

    FRONTEND_URL: str = "http://localhost:5173"

    # Оповещения об ошибках в Telegram (необязательно)
    TELEGRAM_TOKEN: Optional[str] = None
    CHAT_ID: Optional[str] = None

    class Config:
        env_file = ".env"


settings = Settings()
