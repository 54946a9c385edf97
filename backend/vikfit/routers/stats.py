from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from vikfit.dates import today, week_anchor, week_end
from vikfit.db import get_db
from vikfit.progress import completion_percentage, completion_ratio, progress_band
from vikfit.repositories.goal_repo import MacroGoalRepository
from vikfit.repositories.meal_repo import MealRepository
from vikfit.repositories.schedule_repo import ScheduleRepository
from vikfit.schemas.stats import (
    DayBreakdownRead, ProgressRead, WeeklyBreakdownRead, WeeklyCompletionsRead, WeeklyNutritionRead,
    WeeklySummaryRead, WorkoutMetricsRead,
)
from vikfit.services import nutrition, stats

router = APIRouter(prefix="/stats", tags=["stats"])

# Every week_of is anchored to the Sunday of its week

@router.get("/workouts/{workout_id}/completions", response_model=WeeklyCompletionsRead)
def workout_completions(
    workout_id: int,
    db: Session = Depends(get_db),
    week_of: date | None = Query(None, description="any date in the week, default today"),
):
    repo = ScheduleRepository(db)
    start = week_anchor(week_of or today())
    # read-only: an unknown workout or a store outage reports zeros, not an error
    done = stats.weekly_completions(repo, workout_id, start)
    assigned = len(repo.get_scheduled_days(workout_id))
    return WeeklyCompletionsRead(
        workout_id=workout_id,
        week_start=start,
        week_end=week_end(start),
        completions=done,
        assigned_days=assigned,
        completion_percentage=completion_percentage(done, assigned),
    )

@router.get("/weeks/{week_of}/breakdown", response_model=WeeklyBreakdownRead)
def breakdown(week_of: date, db: Session = Depends(get_db)):
    start = week_anchor(week_of)
    days = stats.weekly_breakdown(ScheduleRepository(db), start)
    return WeeklyBreakdownRead(
        week_start=start,
        week_end=week_end(start),
        days=[DayBreakdownRead.model_validate(d) for d in days],
    )

@router.get("/weeks/{week_of}/metrics", response_model=list[WorkoutMetricsRead])
def metrics(week_of: date, db: Session = Depends(get_db)):
    rows = stats.workouts_with_metrics(ScheduleRepository(db), week_anchor(week_of))
    return [WorkoutMetricsRead.model_validate(m) for m in rows]

@router.get("/weeks/{week_of}/summary", response_model=WeeklySummaryRead)
def summary(week_of: date, db: Session = Depends(get_db)):
    return WeeklySummaryRead.model_validate(stats.weekly_summary(ScheduleRepository(db), week_anchor(week_of)))

@router.get("/weeks/{week_of}/nutrition", response_model=WeeklyNutritionRead)
def weekly_nutrition(week_of: date, db: Session = Depends(get_db)):
    report = nutrition.weekly_nutrition(MealRepository(db), MacroGoalRepository(db), week_anchor(week_of))
    return WeeklyNutritionRead.model_validate(report)

@router.get("/progress", response_model=ProgressRead)
def progress(
    completed: int = Query(..., ge=0),
    assigned: int = Query(..., ge=0),
):
    pct = completion_percentage(completed, assigned)
    return ProgressRead(
        completed=completed,
        assigned=assigned,
        percentage=pct,
        ratio=completion_ratio(completed, assigned),
        band=progress_band(pct),
    )
