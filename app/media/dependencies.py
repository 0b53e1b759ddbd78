from app.config import settings
from app.media.cloudinary import CloudinaryService

cloudinary_service = CloudinaryService(
    cloud_name=settings.CLOUDINARY_CLOUD_NAME,
    api_key=settings.CLOUDINARY_API_KEY,
    api_secret=settings.CLOUDINARY_API_SECRET,
    timeout=settings.CLOUDINARY_TIMEOUT,
)


def get_media_service() -> CloudinaryService:
    return cloudinary_service
