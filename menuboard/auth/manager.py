import logging
from typing import Optional

from fastapi import Request
from fastapi_users import BaseUserManager, IntegerIDMixin

from menuboard.auth.config import auth_config
from menuboard.models.user import User

log = logging.getLogger(__name__)


class UserManager(IntegerIDMixin, BaseUserManager[User, int]):
    reset_password_token_secret = auth_config.secret
    verification_token_secret = auth_config.secret

    async def on_after_register(self, user: User, request: Optional[Request] = None):
        log.info("user registered: id=%s nickname=%s role=%s", user.id, user.nickname, user.role)
