import asyncio
import base64
import hashlib
from unittest.mock import patch
from urllib.parse import parse_qs

import httpx
import pytest
import respx
from httpx import Response

from app.exceptions import ImageUploadError
from app.media.cloudinary import CloudinaryService, ImageFile, build_data_uri, sign_params

UPLOAD_ENDPOINT = "https://api.cloudinary.com/v1_1/demo/image/upload"
SECRET = "s3cr3t"


def _service() -> CloudinaryService:
    return CloudinaryService("demo", "key-123", SECRET, timeout=5.0)


def _form(request: httpx.Request) -> dict:
    return {key: values[0] for key, values in parse_qs(request.content.decode()).items()}


def _url_for_content(request: httpx.Request) -> Response:
    digest = hashlib.sha1(_form(request)["file"].encode()).hexdigest()[:12]
    return Response(200, json={"url": f"http://res.cloudinary.com/demo/image/upload/{digest}.png"})


def test_build_data_uri():
    assert build_data_uri(b"abc", "image/png") == "data:image/png;base64," + base64.b64encode(b"abc").decode()


def test_sign_params_sorts_keys_and_appends_secret():
    expected = hashlib.sha1(b"public_id=x&timestamp=100" + SECRET.encode()).hexdigest()
    assert sign_params({"timestamp": "100", "public_id": "x"}, SECRET) == expected


@respx.mock
@pytest.mark.asyncio
async def test_upload_image_sends_signed_data_uri():
    route = respx.post(UPLOAD_ENDPOINT).mock(
        return_value=Response(200, json={"url": "http://res.cloudinary.com/demo/image/upload/a.png"})
    )

    async with httpx.AsyncClient() as client:
        url = await _service().upload_image(client, ImageFile(b"\x89PNG", "image/png", "a.png"))

    assert url == "http://res.cloudinary.com/demo/image/upload/a.png"
    form = _form(route.calls.last.request)
    assert form["api_key"] == "key-123"
    assert form["file"] == build_data_uri(b"\x89PNG", "image/png")
    assert form["signature"] == sign_params({"timestamp": form["timestamp"]}, SECRET)


@respx.mock
@pytest.mark.asyncio
async def test_upload_image_http_error():
    respx.post(UPLOAD_ENDPOINT).mock(return_value=Response(401, text="Invalid Signature"))

    async with httpx.AsyncClient() as client:
        with pytest.raises(ImageUploadError) as exc_info:
            await _service().upload_image(client, ImageFile(b"img", "image/png"))

    assert exc_info.value.status_code == 401
    assert "Invalid Signature" in exc_info.value.message


@respx.mock
@pytest.mark.asyncio
async def test_upload_image_without_url_in_response():
    respx.post(UPLOAD_ENDPOINT).mock(return_value=Response(200, json={"public_id": "a"}))

    async with httpx.AsyncClient() as client:
        with pytest.raises(ImageUploadError):
            await _service().upload_image(client, ImageFile(b"img", "image/png"))


@respx.mock
@pytest.mark.asyncio
async def test_upload_image_connection_error():
    respx.post(UPLOAD_ENDPOINT).mock(side_effect=httpx.ConnectError("boom"))

    async with httpx.AsyncClient() as client:
        with pytest.raises(ImageUploadError):
            await _service().upload_image(client, ImageFile(b"img", "image/png"))


@respx.mock
@pytest.mark.asyncio
async def test_upload_images_keeps_input_order():
    route = respx.post(UPLOAD_ENDPOINT).mock(side_effect=_url_for_content)
    images = [ImageFile(f"image-{i}".encode(), "image/jpeg", f"{i}.jpg") for i in range(5)]

    urls = await _service().upload_images(images)

    expected = [
        "http://res.cloudinary.com/demo/image/upload/"
        + hashlib.sha1(build_data_uri(image.content, image.content_type).encode()).hexdigest()[:12]
        + ".png"
        for image in images
    ]
    assert urls == expected
    assert route.call_count == 5


@respx.mock
@pytest.mark.asyncio
async def test_upload_images_fails_when_any_upload_fails():
    responses = iter([
        Response(200, json={"url": "http://res.cloudinary.com/demo/image/upload/ok.png"}),
        Response(500, text="Server error"),
    ])
    respx.post(UPLOAD_ENDPOINT).mock(side_effect=lambda request: next(responses))

    with pytest.raises(ImageUploadError):
        await _service().upload_images([ImageFile(b"a", "image/png"), ImageFile(b"b", "image/png")])


@pytest.mark.asyncio
async def test_upload_images_empty_list_makes_no_requests():
    assert await _service().upload_images([]) == []


@pytest.mark.asyncio
async def test_upload_images_runs_uploads_concurrently():
    in_flight = 0
    peak = 0

    async def slow_upload(self, client, image):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return f"http://res.cloudinary.com/demo/image/upload/{image.filename}.png"

    images = [ImageFile(b"x", "image/png", filename=str(i)) for i in range(6)]

    with patch.object(CloudinaryService, "upload_image", slow_upload):
        urls = await _service().upload_images(images)

    assert peak == len(images)
    assert urls == [f"http://res.cloudinary.com/demo/image/upload/{i}.png" for i in range(6)]
