from pydantic import BaseModel, Field, HttpUrl
from typing import Optional, List
from datetime import datetime

from menuboard.core.constants import MenuStatus


# ---------- Requests ----------
class MenuCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str
    image: HttpUrl
    price: float = Field(..., ge=0)
    # Accepted for compatibility; the server assigns the rank
    order: Optional[int] = Field(None, gt=0)

    class Config:
        extra = "forbid"
        str_strip_whitespace = True


class MenuUpdate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str
    price: float = Field(..., ge=0)
    order: int = Field(..., gt=0)
    status: Optional[MenuStatus] = None

    class Config:
        extra = "forbid"
        str_strip_whitespace = True


# ---------- Responses ----------
class MenuSummary(BaseModel):
    menu_id: int = Field(validation_alias="id")
    name: str
    image: str
    price: float
    order: int
    status: MenuStatus
    author: str

    class Config:
        from_attributes = True
        populate_by_name = True


class MenuDetail(BaseModel):
    category_id: int
    name: str
    description: str
    image: str
    price: float
    order: int
    status: MenuStatus
    deleted_at: Optional[datetime] = None
    author: str

    class Config:
        from_attributes = True


class MenuListResponse(BaseModel):
    data: List[MenuSummary]


class MenuDetailResponse(BaseModel):
    data: MenuDetail


class MessageResponse(BaseModel):
    message: str
