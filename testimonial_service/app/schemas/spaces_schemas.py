from pydantic import Field

from shared.core.schemas import CamelOut
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class SpaceRequest(EmptyStringModel):
    name: str = Field(max_length=128)
    redirect_url: str  # e.g. "https://my-product.com"


class SpaceOut(CamelOut):
    id: str
    name: str
    slug: str
    public_url: str
    redirect_url: str
    user_id: str  # only the owner's id, never the user object
