# vikfit/deps/lookups.py
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from vikfit.db import get_db
from vikfit.models import Meal, MealLog, Workout, WorkoutLog, WorkoutStatus
from vikfit.repositories.log_repo import LogRepository
from vikfit.repositories.meal_repo import MealRepository
from vikfit.repositories.workout_repo import WorkoutRepository

def existing_workout(workout_id: int, db: Session = Depends(get_db)) -> Workout:
    """Resolve the ``{workout_id}`` path parameter or answer 404."""
    workout = WorkoutRepository(db).get(workout_id)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return workout

def existing_log(log_id: int, db: Session = Depends(get_db)) -> WorkoutLog:
    wl = LogRepository(db).get(log_id)
    if not wl:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout log not found")
    return wl

def require_in_progress(wl: WorkoutLog = Depends(existing_log)) -> WorkoutLog:
    """Sets can only be added to, and sessions only finished from, an open log."""
    if wl.status != WorkoutStatus.in_progress:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                            detail=f"Workout log is {wl.status.value}")
    return wl

def existing_meal(meal_id: int, db: Session = Depends(get_db)) -> Meal:
    meal = MealRepository(db).get(meal_id)
    if not meal:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found")
    return meal

def existing_meal_log(meal_log_id: int, db: Session = Depends(get_db)) -> MealLog:
    entry = MealRepository(db).get_log(meal_log_id)
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Meal log not found")
    return entry
