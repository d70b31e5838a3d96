from enum import Enum


class UserRole(str, Enum):
    OWNER = "OWNER"
    CUSTOMER = "CUSTOMER"


class MenuStatus(str, Enum):
    FOR_SALE = "FOR_SALE"
    SOLD_OUT = "SOLD_OUT"


# Rank given to the first menu ever created
FIRST_MENU_ORDER = 1

# Response messages
MENU_CREATED = "Menu created."
MENU_UPDATED = "Menu updated."
MENU_DELETED = "Menu deleted."
