from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Generic, Optional, TypeVar

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

# Shared properties
T = TypeVar("T")


class UserToken(BaseModel):
    sub: str  # email of the authenticated user
    user_id: Optional[str] = None
    name: Optional[str] = None
    exp: Optional[int] = None

    @property
    def email(self) -> str:
        return self.sub


class CamelOut(BaseModel):
    """Response base: serialized with camelCase keys, read from ORM rows."""

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
        "alias_generator": to_camel,
    }


class JsonOutResult(EmptyStringModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str
