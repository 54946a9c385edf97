from datetime import date
from pydantic import BaseModel

from vikfit.progress import ProgressBand
from vikfit.schemas.workout import WorkoutRead

class CompletedWorkoutRead(BaseModel):
    workout: WorkoutRead
    exercise_count: int

    model_config = {"from_attributes": True}

class DayBreakdownRead(BaseModel):
    date: date
    day_label: str
    day_of_week: int
    assigned: list[WorkoutRead]
    total_assigned: int
    completed: list[CompletedWorkoutRead]
    total_completed: int
    total_exercises_completed: int

    model_config = {"from_attributes": True}

class WeeklyBreakdownRead(BaseModel):
    week_start: date
    week_end: date
    days: list[DayBreakdownRead]

class WeeklyCompletionsRead(BaseModel):
    workout_id: int
    week_start: date
    week_end: date
    completions: int
    assigned_days: int
    completion_percentage: float

class WorkoutMetricsRead(BaseModel):
    workout: WorkoutRead
    assigned_days_count: int
    completion_count: int
    completion_percentage: float
    progress_band: ProgressBand

    model_config = {"from_attributes": True}

class WeeklySummaryRead(BaseModel):
    week_start: date
    week_end: date
    workouts_completed: int
    exercises_completed: int

    model_config = {"from_attributes": True}

class ProgressRead(BaseModel):
    completed: int
    assigned: int
    percentage: float
    ratio: float
    band: ProgressBand

class MacroTotalsRead(BaseModel):
    calories: float
    protein: float
    carbs: float
    fats: float

    model_config = {"from_attributes": True}

class DayMacrosRead(BaseModel):
    date: date
    day_label: str
    day_of_week: int
    totals: MacroTotalsRead

    model_config = {"from_attributes": True}

class MacroProgressRead(BaseModel):
    macro: str
    actual: float
    goal: float
    percentage: float
    band: ProgressBand

    model_config = {"from_attributes": True}

class WeeklyNutritionRead(BaseModel):
    week_start: date
    week_end: date
    totals: MacroTotalsRead
    goals: MacroTotalsRead
    previous_totals: MacroTotalsRead
    change: dict[str, float]
    progress: list[MacroProgressRead]
    days: list[DayMacrosRead]

    model_config = {"from_attributes": True}
