from typing import Optional

from fastapi import HTTPException, status


class HotelsException(HTTPException):
    status_code = 500
    detail = "Что-то пошло не так"

    def __init__(self):
        super().__init__(status_code=self.status_code, detail=self.detail)


class HotelsExceptionDynamic(HTTPException):
    status_code = 500
    detail = "Что-то пошло не так"

    def __init__(self, status_code: int, detail):
        super().__init__(status_code=status_code, detail=detail)


class SomethingWentWrongException(HotelsException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Что-то пошло не так"


class TokenExpiredException(HotelsException):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Срок действия токена истек"


class TokenAbsentException(HotelsException):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Токен отсутствует"


class IncorrectTokenFormatException(HotelsException):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Неверный формат токена"


class UserIsNotPresentException(HotelsException):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Пользователь не существует"


class UserEmailAlreadyExistsException(HotelsException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Пользователь с таким email уже существует"


class InvalidCredentialsException(HotelsException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Неверный email или пароль"


class HotelNotFoundException(HotelsException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Отель не найден"


class HotelValidationException(HotelsExceptionDynamic):
    def __init__(self, errors: list[dict]):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=errors)


class TooManyImageFiles(HotelsExceptionDynamic):
    def __init__(self, max_files: int):
        detail = [{"field": "imageFiles", "message": f"Можно загрузить не более {max_files} изображений"}]
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ImageFileTooLarge(HotelsExceptionDynamic):
    def __init__(self, filename: Optional[str], max_size: int):
        detail = [{
            "field": "imageFiles",
            "message": f"Файл {filename} больше допустимых {max_size // (1024 * 1024)} МБ",
        }]
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ImageFileIsNotAnImage(HotelsExceptionDynamic):
    def __init__(self, filename: Optional[str]):
        detail = [{"field": "imageFiles", "message": f"Файл {filename} не является изображением"}]
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ImageUploadError(Exception):
    """Ошибка при загрузке изображения в Cloudinary."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
