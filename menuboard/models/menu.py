from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from menuboard.core.constants import MenuStatus
from menuboard.models.base import Base


class Menu(Base):
    __tablename__ = "menus"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    image = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    order = Column(Integer, nullable=False, index=True)
    status = Column(String(20), nullable=False, default=MenuStatus.FOR_SALE.value)
    author = Column(String(50), nullable=False)  # creator nickname at creation time

    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    category = relationship("Category", back_populates="menus")

    # Creator; never reassigned
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    user = relationship("User", back_populates="menus")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True)  # soft delete
