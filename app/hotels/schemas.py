from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SHotelCreate(BaseModel):
    """Поля формы, из которых создается отель."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    price_per_night: float = Field(..., ge=0, allow_inf_nan=False)
    facilities: List[str] = Field(..., min_length=1)


class SHotel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    user_id: int
    name: str
    city: str
    country: str
    description: str
    type: str
    price_per_night: float
    facilities: List[str]
    image_urls: List[str]
    last_updated: datetime
