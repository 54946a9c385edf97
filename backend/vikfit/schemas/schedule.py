from typing import Annotated
from pydantic import BaseModel, Field

# Sunday = 0 ... Saturday = 6
DayOfWeek = Annotated[int, Field(ge=0, le=6)]

class ScheduleUpdate(BaseModel):
    days: set[DayOfWeek]

class ScheduleRead(BaseModel):
    workout_id: int
    days: list[int]
