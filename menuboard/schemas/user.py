from fastapi_users import schemas

from menuboard.core.constants import UserRole


class UserRead(schemas.BaseUser[int]):
    nickname: str
    role: UserRole


# Role is not self-service; owners are promoted with scripts/manage_users.py
class UserCreate(schemas.BaseUserCreate):
    nickname: str
