"""User data models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class UserRole(str, Enum):
    """What a user is allowed to see."""

    CUSTOMER = "customer"
    RESTAURANT_MANAGER = "restaurantManager"
    ADMIN = "admin"


class User(BaseModel):
    """A registered user."""

    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole = UserRole.CUSTOMER
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
