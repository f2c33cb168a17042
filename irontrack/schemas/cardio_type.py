"""Cardio type schemas."""

from pydantic import ConfigDict, Field, model_validator

from irontrack.core.constants import DEFAULT_DISTANCE_UNIT
from irontrack.core.enums import CardioCategory
from irontrack.schemas.common import CamelModel


class CardioTypeBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category: CardioCategory
    default_distance_unit: str | None = Field(default=DEFAULT_DISTANCE_UNIT, max_length=20)
    show_distance: bool = True
    show_pace: bool = True
    show_speed: bool = False
    pace_unit: str | None = Field(default=None, max_length=20)
    speed_unit: str | None = Field(default=None, max_length=20)


class CardioTypeCreate(CardioTypeBase):
    """User-created types are never built-in; `isBuiltIn` is not accepted."""


class CardioTypeUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    category: CardioCategory | None = None
    default_distance_unit: str | None = Field(None, max_length=20)
    show_distance: bool | None = None
    show_pace: bool | None = None
    show_speed: bool | None = None
    pace_unit: str | None = Field(None, max_length=20)
    speed_unit: str | None = Field(None, max_length=20)

    @model_validator(mode="after")
    def required_fields_not_null(self) -> "CardioTypeUpdate":
        for name in ("name", "category", "show_distance", "show_pace", "show_speed"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class CardioTypeRead(CardioTypeBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    category: str
    is_built_in: bool = False
