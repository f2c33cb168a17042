"""Exercise schemas."""

from pydantic import ConfigDict, Field, model_validator

from irontrack.schemas.common import CamelModel


class ExerciseBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None

    @model_validator(mode="after")
    def name_not_null(self) -> "ExerciseUpdate":
        if "name" in self.model_fields_set and self.name is None:
            raise ValueError("name cannot be null")
        return self


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
