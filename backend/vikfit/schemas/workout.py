from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

NameStr = Annotated[str, Field(max_length=120)]
DescriptionStr = Annotated[str, Field(max_length=1000)]
NonNegInt = Annotated[int, Field(ge=0)]
PosInt = Annotated[int, Field(ge=1)]
NonNegFloat = Annotated[float, Field(ge=0, le=1000)]

class WorkoutCreate(BaseModel):
    name: NameStr
    description: DescriptionStr | None = None

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("name cannot be blank")
        return v2

class WorkoutUpdate(BaseModel):
    name: NameStr | None = None
    description: DescriptionStr | None = None

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v2 = v.strip()
        if not v2:
            raise ValueError("name cannot be blank")
        return v2

class WorkoutRead(BaseModel):
    id: int
    name: str
    description: str | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}

class WorkoutPage(BaseModel):
    items: list[WorkoutRead]
    total: int
    limit: int
    offset: int

    model_config = {"from_attributes": True}

class ExerciseCreate(BaseModel):
    name: NameStr
    sets: PosInt | None = None
    reps: PosInt | None = None
    weight: NonNegFloat | None = None
    duration_seconds: NonNegInt = 0
    notes: Annotated[str, Field(max_length=500)] | None = None

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("exercise cannot be blank")
        return v2

class ExerciseRead(BaseModel):
    id: int
    workout_id: int
    name: str
    sets: int | None = None
    reps: int | None = None
    weight: float | None = None
    duration_seconds: int = 0
    notes: str | None = None

    model_config = {"from_attributes": True}
