from fastapi_users.db import SQLAlchemyBaseUserTable
from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from menuboard.core.constants import UserRole
from menuboard.models.base import Base


class User(SQLAlchemyBaseUserTable[int], Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nickname = Column(String(50), nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.CUSTOMER.value)  # "OWNER", "CUSTOMER"
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    menus = relationship("Menu", back_populates="user")

    @property
    def is_owner(self) -> bool:
        return self.role == UserRole.OWNER.value
