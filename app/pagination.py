from fastapi import Query
from fastapi_pagination import Params

DEFAULT_PAGE_SIZE = 10  # Количество элементов на странице по умолчанию
MAX_PAGE_SIZE = 100  # Максимальное количество элементов на странице


class CustomParams(Params):
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Размер страницы")
