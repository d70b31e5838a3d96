from .base import Base
from .user import User
from .category import Category
from .menu import Menu
