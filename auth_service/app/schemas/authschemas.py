from pydantic import EmailStr, Field

from shared.core.schemas import CamelOut
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class SignUpRequest(EmptyStringModel):
    # secrets are hashed and compared byte for byte
    raw_fields = frozenset({"password"})

    name: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=40)


class LoginRequest(EmptyStringModel):
    raw_fields = frozenset({"password"})

    email: EmailStr
    password: str


class TokenResponse(CamelOut):
    token: str
    token_type: str = "Bearer"


class MessageResponse(CamelOut):
    message: str


class UserOut(CamelOut):
    id: str
    name: str
    email: str
