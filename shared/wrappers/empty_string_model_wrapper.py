import re
from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel
from typing import Any, ClassVar, FrozenSet

INVISIBLE_CHARS_PATTERN = re.compile(
    r'[\u200b-\u200f\u202a-\u202e\u2066-\u2069\ufeff]')


def deep_clean(value: Any):
    """Recursively strip strings, drop invisible chars and turn blanks into None."""

    if isinstance(value, dict):
        return {k: deep_clean(v) for k, v in value.items()}

    if isinstance(value, list):
        return [deep_clean(v) for v in value]

    if isinstance(value, str):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        return None if cleaned == "" else cleaned

    return value


class EmptyStringModel(BaseModel):
    """Request base model: blank strings arrive as None, so a blank
    required field fails validation instead of slipping through.

    Fields named in ``raw_fields`` are passed through exactly as sent.
    """

    raw_fields: ClassVar[FrozenSet[str]] = frozenset()

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
        "alias_generator": to_camel,
    }

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if isinstance(values, dict):
            return {
                k: v if k in cls.raw_fields else deep_clean(v)
                for k, v in values.items()
            }
        return values
