from datetime import datetime
from typing import Optional
from pydantic import EmailStr, Field

from shared.core.schemas import CamelOut
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class ReviewRequest(EmptyStringModel):
    author_name: str = Field(max_length=200)
    author_email: Optional[EmailStr] = None  # EmailStr caps length at 254
    rating: int = Field(ge=1, le=5)
    text: str


class ReviewOut(CamelOut):
    id: str
    space_id: str
    author_name: str
    author_email: Optional[str] = None
    rating: int
    text: str
    liked: bool
    created_at: Optional[datetime] = None


class ReviewSubmitted(CamelOut):
    redirect_url: str
