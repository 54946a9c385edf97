from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from vikfit.db import get_db
from vikfit.deps.lookups import existing_workout
from vikfit.models import Workout
from vikfit.repositories.schedule_repo import ScheduleRepository
from vikfit.schemas.schedule import ScheduleRead, ScheduleUpdate
from vikfit.schemas.workout import WorkoutRead

router = APIRouter(tags=["schedule"])

@router.get("/workouts/{workout_id}/schedule", response_model=ScheduleRead)
def get_schedule(workout_id: int, db: Session = Depends(get_db)):
    # unknown workouts simply have no days
    days = ScheduleRepository(db).get_scheduled_days(workout_id)
    return ScheduleRead(workout_id=workout_id, days=sorted(days))

# Replaces the whole set; a store failure surfaces as 503, never as a partial schedule
@router.put("/workouts/{workout_id}/schedule", response_model=ScheduleRead)
def assign_schedule(
    payload: ScheduleUpdate,
    workout: Workout = Depends(existing_workout),
    db: Session = Depends(get_db),
):
    days = ScheduleRepository(db).assign_days(workout.id, payload.days)
    return ScheduleRead(workout_id=workout.id, days=sorted(days))

@router.post("/workouts/{workout_id}/schedule/remove", response_model=ScheduleRead)
def remove_from_schedule(
    payload: ScheduleUpdate,
    workout: Workout = Depends(existing_workout),
    db: Session = Depends(get_db),
):
    repo = ScheduleRepository(db)
    repo.remove_days(workout.id, payload.days)
    return ScheduleRead(workout_id=workout.id, days=sorted(repo.get_scheduled_days(workout.id)))

@router.get("/schedule/days/{day_of_week}", response_model=list[WorkoutRead])
def workouts_for_day(
    day_of_week: int = Path(..., ge=0, le=6, description="Sunday=0 ... Saturday=6"),
    db: Session = Depends(get_db),
):
    return ScheduleRepository(db).get_scheduled_workouts_for_day(day_of_week)
