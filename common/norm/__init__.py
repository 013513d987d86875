from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from .dates import InvalidDate


class Registration(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        extra="forbid",
    )

    first_name: str
    last_name: str
    school_college_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    city_state: Optional[str] = None
    gender: Optional[str] = None
    category: list[str] = []
    other_category: Optional[str] = None
    participation_type: Optional[str] = None
    description: Optional[str] = None
    social: Optional[str] = None
    requirements: Optional[str] = None
    confirmation: bool = False
    profile_photo_reference: Optional[str] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def reject_invalid_date(cls, v):
        if isinstance(v, InvalidDate):
            raise ValueError(f"Cast to date failed for value {v.raw!r}")
        return v
