from typing import Annotated
from datetime import date, datetime
from pydantic import BaseModel, Field

from vikfit.models.workout_log import WorkoutStatus

NonNegInt = Annotated[int, Field(ge=0)]
NonNegFloat = Annotated[float, Field(ge=0, le=1000)]

class LogStart(BaseModel):
    # defaults to today when omitted
    log_date: date | None = None

class LogComplete(BaseModel):
    total_duration_seconds: NonNegInt = 0

class WorkoutLogRead(BaseModel):
    id: int
    workout_id: int
    log_date: date
    status: WorkoutStatus
    total_duration_seconds: int = 0
    started_at: datetime | None = None
    completed_at: datetime | None = None

    model_config = {"from_attributes": True}

class SetCreate(BaseModel):
    exercise_id: int
    set_number: Annotated[int, Field(ge=1)]
    reps_completed: NonNegInt | None = None
    weight_used: NonNegFloat | None = None
    rpe: Annotated[int, Field(ge=1, le=10)] | None = None
    duration_seconds: NonNegInt = 0
    rest_seconds: NonNegInt = 0
    notes: Annotated[str, Field(max_length=500)] | None = None

class SetRead(BaseModel):
    id: int
    workout_log_id: int
    exercise_id: int
    set_number: int
    reps_completed: int | None = None
    weight_used: float | None = None
    rpe: int | None = None
    duration_seconds: int = 0
    rest_seconds: int = 0
    notes: str | None = None

    model_config = {"from_attributes": True}

class ExerciseSets(BaseModel):
    id: int
    name: str
    sets: list[SetRead]

class SummaryStats(BaseModel):
    total_duration: int
    total_rest_time: int
    total_exercise_time: int
    total_sets: int

class WorkoutSummary(BaseModel):
    workout: WorkoutLogRead
    exercises: list[ExerciseSets]
    stats: SummaryStats
