from typing import List

from fastapi import APIRouter, status, Depends
from fastapi_pagination import Page, paginate
from fastapi_versioning import version
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import SomethingWentWrongException, HotelNotFoundException
from app.hotels.dao import HotelsDAO
from app.hotels.dependencies import hotel_form, image_files_form
from app.hotels.schemas import SHotel, SHotelCreate
from app.logger.logger import logger
from app.media.cloudinary import CloudinaryService, ImageFile
from app.media.dependencies import get_media_service
from app.pagination import CustomParams
from app.users.dependencies import get_current_user_id
from app.utils import get_current_time

router_my_hotels = APIRouter(
    prefix="/my-hotels",
    tags=["Мои отели"],
)


@router_my_hotels.post("",
                       status_code=status.HTTP_201_CREATED,
                       response_model=SHotel,
                       summary="Создание отеля с загрузкой изображений")
@version(1)
async def create_my_hotel(
        user_id: int = Depends(get_current_user_id),
        hotel_data: SHotelCreate = Depends(hotel_form),
        image_files: List[ImageFile] = Depends(image_files_form),
        media: CloudinaryService = Depends(get_media_service),
):
    """Загружает изображения в Cloudinary и сохраняет отель текущего пользователя.

    Любая ошибка загрузки или сохранения превращается в общий ответ 500.
    Если сохранение упало после загрузки, изображения остаются в Cloudinary.
    """
    try:
        image_urls = await media.upload_images(image_files)

        hotel = await HotelsDAO.add(
            **hotel_data.model_dump(),
            image_urls=image_urls,
            last_updated=get_current_time(),
            user_id=user_id,
        )
    except Exception as e:
        logger.error(f"Ошибка при создании отеля: {e}", exc_info=True)
        raise SomethingWentWrongException

    logger.info(f"Отель создан: id={hotel.id}, user_id={user_id}, изображений={len(image_urls)}")
    return hotel


@router_my_hotels.get("",
                      status_code=status.HTTP_200_OK,
                      response_model=Page[SHotel],
                      summary="Отели текущего пользователя с пагинацией")
@version(1)
async def get_my_hotels(
        user_id: int = Depends(get_current_user_id),
        params: CustomParams = Depends(),
):
    try:
        hotels = await HotelsDAO.find_all(user_id=user_id)
    except SQLAlchemyError as e:
        logger.error(f"Ошибка при получении отелей пользователя {user_id}: {e}")
        raise SomethingWentWrongException

    return paginate([SHotel.model_validate(hotel) for hotel in hotels], params=params)


@router_my_hotels.get("/{hotel_id}",
                      status_code=status.HTTP_200_OK,
                      response_model=SHotel,
                      summary="Отель текущего пользователя")
@version(1)
async def get_my_hotel(hotel_id: int, user_id: int = Depends(get_current_user_id)):
    try:
        hotel = await HotelsDAO.find_one_or_none(id=hotel_id, user_id=user_id)
    except SQLAlchemyError as e:
        logger.error(f"Ошибка при получении отеля {hotel_id}: {e}")
        raise SomethingWentWrongException

    if not hotel:
        logger.warning(f"Отель {hotel_id} пользователя {user_id} не найден")
        raise HotelNotFoundException

    return hotel
