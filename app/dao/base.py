from typing import Optional

from app.database import async_session_maker
from sqlalchemy import select, insert
from sqlalchemy.exc import SQLAlchemyError
from app.logger.logger import logger


class BaseDAO:
    model = None

    @classmethod
    async def find_one_or_none(cls, **filter_by) -> Optional[model]:
        async with async_session_maker() as session:
            try:
                query = select(cls.model).filter_by(**filter_by)
                result = await session.execute(query)
                return result.scalar_one_or_none()
            except SQLAlchemyError as e:
                logger.error(f"Ошибка при поиске с помощью фильтра {filter_by}: {e}")
                raise

    @classmethod
    async def find_all(cls, **filter_by) -> list:
        async with async_session_maker() as session:
            try:
                query = select(cls.model).filter_by(**filter_by).order_by(cls.model.id)
                result = await session.execute(query)
                return list(result.scalars().all())
            except SQLAlchemyError as e:
                logger.error(f"Ошибка при поиске всех с помощью фильтра {filter_by}: {e}")
                raise

    @classmethod
    async def add(cls, **data):
        async with async_session_maker() as session:
            try:
                query = insert(cls.model).values(**data).returning(cls.model)
                result = await session.execute(query)
                instance = result.scalar_one()
                await session.commit()
                return instance
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Ошибка при добавлении экземпляра с данными {data}: {e}")
                raise
