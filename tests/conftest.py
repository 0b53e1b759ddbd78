import io
import os

os.environ.setdefault("MODE", "TEST")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_PORT", "5432")
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASS", "test")
os.environ.setdefault("DB_NAME", "hotels_test")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALGORITHM", "HS256")
os.environ.setdefault("CLOUDINARY_CLOUD_NAME", "test-cloud")
os.environ.setdefault("CLOUDINARY_API_KEY", "test-api-key")
os.environ.setdefault("CLOUDINARY_API_SECRET", "test-api-secret")

import httpx  # noqa: E402
import pytest  # noqa: E402
from httpx import ASGITransport  # noqa: E402
from PIL import Image  # noqa: E402


def make_png(color: str = "red", size: tuple = (4, 4)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()


@pytest.fixture
def access_token() -> str:
    from app.auth.auth import create_access_token

    return create_access_token({"sub": "42"})


@pytest.fixture
def auth_headers(access_token) -> dict:
    return {"access_token": access_token}


@pytest.fixture
async def client():
    from app.main import app

    async with httpx.AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
