from typing import List
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from app.database import Base


class Users(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    hashed_password: Mapped[str] = mapped_column(String, nullable=False)
    firstname: Mapped[str] = mapped_column(String, nullable=False)
    lastname: Mapped[str] = mapped_column(String, nullable=False)

    # Связь one-to-many с отелями пользователя
    hotels: Mapped[List['Hotels']] = relationship('Hotels', back_populates='owner')

    def __repr__(self):
        return f"<Users(id={self.id}, email={self.email})>"
