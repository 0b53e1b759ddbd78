import io
import re
from typing import List, Optional

from fastapi import Request
from PIL import Image, UnidentifiedImageError
from pydantic import ValidationError
from starlette.datastructures import FormData, UploadFile

from app.config import settings
from app.exceptions import HotelValidationException, TooManyImageFiles, ImageFileTooLarge, ImageFileIsNotAnImage
from app.hotels.schemas import SHotelCreate
from app.logger.logger import logger
from app.media.cloudinary import ImageFile

HOTEL_TEXT_FIELDS = ("name", "city", "country", "description", "type", "pricePerNight")

FIELD_MESSAGES = {
    "name": "Название обязательно",
    "city": "Город обязателен",
    "country": "Страна обязательна",
    "description": "Описание обязательно",
    "type": "Тип отеля обязателен",
    "pricePerNight": "Цена за ночь обязательна и должна быть числом",
    "facilities": "Удобства обязательны",
}

# facilities[0], facilities[1], ... и facilities[]
INDEXED_FACILITY = re.compile(r"^facilities\[(\d*)\]$")


def collect_facilities(form: FormData) -> List[str]:
    """Собирает удобства из повторяющихся полей facilities и индексированных facilities[N]."""
    plain = []
    indexed = []
    for key, value in form.multi_items():
        if not isinstance(value, str):
            continue
        if key == "facilities":
            plain.append(value)
            continue
        match = INDEXED_FACILITY.match(key)
        if match is None:
            continue
        if match.group(1):
            indexed.append((int(match.group(1)), value))
        else:
            plain.append(value)

    facilities = plain + [value for _, value in sorted(indexed, key=lambda item: item[0])]
    return [facility.strip() for facility in facilities if facility.strip()]


def validation_errors(exc: ValidationError) -> List[dict]:
    errors = []
    seen = set()
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        if field in seen:
            continue
        seen.add(field)
        errors.append({"field": field, "message": FIELD_MESSAGES.get(field, error["msg"])})
    return errors


async def hotel_form(request: Request) -> SHotelCreate:
    """Проверяет текстовые поля формы отеля."""
    form = await request.form()

    data = {}
    for field in HOTEL_TEXT_FIELDS:
        value = form.get(field)
        if isinstance(value, str):
            data[field] = value
    data["facilities"] = collect_facilities(form)

    try:
        return SHotelCreate.model_validate(data)
    except ValidationError as e:
        errors = validation_errors(e)
        logger.warning(f"Форма отеля не прошла проверку: {errors}")
        raise HotelValidationException(errors)


def detect_image_mime(content: bytes) -> Optional[str]:
    """MIME-тип изображения по его содержимому, None если это не изображение."""
    try:
        with Image.open(io.BytesIO(content)) as image:
            image.verify()
            image_format = image.format
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
        return None
    return Image.MIME.get(image_format, f"image/{image_format.lower()}")


async def image_files_form(request: Request) -> List[ImageFile]:
    """Забирает файлы imageFiles из формы и проверяет ограничения на количество и размер."""
    form = await request.form()

    uploads = [
        item for item in form.getlist("imageFiles")
        if isinstance(item, UploadFile) and (item.filename or item.size)
    ]
    if len(uploads) > settings.MAX_IMAGE_FILES:
        logger.warning(f"Передано {len(uploads)} изображений, допустимо {settings.MAX_IMAGE_FILES}")
        raise TooManyImageFiles(settings.MAX_IMAGE_FILES)

    image_files = []
    for upload in uploads:
        content = await upload.read()
        if len(content) > settings.MAX_IMAGE_FILE_SIZE:
            logger.warning(f"Файл {upload.filename} слишком большой: {len(content)} байт")
            raise ImageFileTooLarge(upload.filename, settings.MAX_IMAGE_FILE_SIZE)

        mime = detect_image_mime(content)
        if mime is None:
            logger.warning(f"Файл {upload.filename} не является изображением")
            raise ImageFileIsNotAnImage(upload.filename)

        image_files.append(ImageFile(content=content, content_type=mime, filename=upload.filename))

    return image_files
