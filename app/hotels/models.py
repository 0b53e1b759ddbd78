from sqlalchemy import Column, Integer, String, Text, Float, ForeignKey, DateTime
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import relationship
from app.database import Base


class Hotels(Base):
    __tablename__ = "hotels"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    name = Column(String, nullable=False)
    city = Column(String, nullable=False)
    country = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String, nullable=False)
    price_per_night = Column(Float, nullable=False)
    facilities = Column(ARRAY(String), nullable=False)
    # Порядок ссылок совпадает с порядком загруженных файлов
    image_urls = Column(ARRAY(String), nullable=False, default=list)
    last_updated = Column(DateTime(timezone=True), nullable=False)

    owner = relationship("Users", back_populates="hotels")

    def __repr__(self):
        return f"<Hotels(id={self.id}, name={self.name}, city={self.city}, user_id={self.user_id})>"
