import asyncio
import base64
import hashlib
import time
from dataclasses import dataclass
from typing import List, Optional

import httpx

from app.exceptions import ImageUploadError
from app.logger.logger import logger

UPLOAD_URL = "https://api.cloudinary.com/v1_1/{cloud_name}/image/upload"


@dataclass
class ImageFile:
    content: bytes
    content_type: str
    filename: Optional[str] = None


def build_data_uri(content: bytes, content_type: str) -> str:
    b64 = base64.b64encode(content).decode("ascii")
    return f"data:{content_type};base64,{b64}"


def sign_params(params: dict, api_secret: str) -> str:
    """Подпись запроса Cloudinary: параметры по алфавиту, затем секрет, SHA-1."""
    to_sign = "&".join(f"{key}={value}" for key, value in sorted(params.items()))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryService:
    def __init__(self, cloud_name: str, api_key: str, api_secret: str, timeout: float = 30.0):
        self._upload_url = UPLOAD_URL.format(cloud_name=cloud_name)
        self._api_key = api_key
        self._api_secret = api_secret
        self._timeout = timeout

    async def upload_image(self, client: httpx.AsyncClient, image: ImageFile) -> str:
        timestamp = str(int(time.time()))
        payload = {
            "file": build_data_uri(image.content, image.content_type),
            "api_key": self._api_key,
            "timestamp": timestamp,
            "signature": sign_params({"timestamp": timestamp}, self._api_secret),
        }

        try:
            resp = await client.post(self._upload_url, data=payload)
        except httpx.HTTPError as e:
            raise ImageUploadError(f"Ошибка соединения с Cloudinary: {e}") from e

        if resp.status_code >= 400:
            raise ImageUploadError(resp.text, status_code=resp.status_code)

        try:
            url = resp.json().get("url")
        except ValueError as e:
            raise ImageUploadError(f"Некорректный ответ Cloudinary: {e}", status_code=resp.status_code) from e
        if not url:
            raise ImageUploadError("Cloudinary не вернул ссылку на изображение", status_code=resp.status_code)

        logger.info(f"Изображение {image.filename} загружено: {url}")
        return url

    async def upload_images(self, images: List[ImageFile]) -> List[str]:
        """Загружает все изображения одновременно, ссылки возвращаются в порядке файлов."""
        if not images:
            return []

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            urls = await asyncio.gather(*(self.upload_image(client, image) for image in images))
        return list(urls)
