from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from vikfit.dates import today
from vikfit.db import get_db
from vikfit.deps.lookups import existing_log, existing_workout, require_in_progress
from vikfit.models import Workout, WorkoutLog
from vikfit.repositories.log_repo import LogRepository
from vikfit.repositories.workout_repo import WorkoutRepository
from vikfit.schemas.workout_log import (
    LogComplete, LogStart, SetCreate, SetRead, WorkoutLogRead, WorkoutSummary,
)

router = APIRouter(tags=["logs"])

@router.post("/workouts/{workout_id}/logs", response_model=WorkoutLogRead,
             status_code=status.HTTP_201_CREATED)
def start_log(
    payload: LogStart,
    workout: Workout = Depends(existing_workout),
    db: Session = Depends(get_db),
):
    try:
        return LogRepository(db).start(workout.id, payload.log_date or today())
    except ValueError as e:
        if str(e) == "log_already_exists":
            raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                                detail="workout already logged for that date")
        raise

@router.get("/workouts/{workout_id}/history", response_model=list[WorkoutLogRead])
def history(
    workout: Workout = Depends(existing_workout),
    db: Session = Depends(get_db),
    limit: int = Query(10, ge=1, le=100),
):
    return LogRepository(db).history(workout.id, limit=limit)

@router.get("/logs/{log_id}", response_model=WorkoutLogRead)
def get_log(wl: WorkoutLog = Depends(existing_log)):
    return wl

@router.get("/logs/{log_id}/sets", response_model=list[SetRead])
def list_sets(wl: WorkoutLog = Depends(existing_log), db: Session = Depends(get_db)):
    return LogRepository(db).list_sets(wl.id)

@router.post("/logs/{log_id}/sets", response_model=SetRead, status_code=status.HTTP_201_CREATED)
def log_set(
    payload: SetCreate,
    wl: WorkoutLog = Depends(require_in_progress),
    db: Session = Depends(get_db),
):
    # exercise must belong to the logged workout
    ex = WorkoutRepository(db).get_exercise(payload.exercise_id)
    if not ex or ex.workout_id != wl.workout_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return LogRepository(db).log_set(wl.id, **payload.model_dump())

@router.post("/logs/{log_id}/complete", response_model=WorkoutLogRead)
def complete_log(
    payload: LogComplete,
    wl: WorkoutLog = Depends(require_in_progress),
    db: Session = Depends(get_db),
):
    return LogRepository(db).complete(wl.id, total_duration_seconds=payload.total_duration_seconds)

@router.post("/logs/{log_id}/cancel", response_model=WorkoutLogRead)
def cancel_log(wl: WorkoutLog = Depends(existing_log), db: Session = Depends(get_db)):
    return LogRepository(db).cancel(wl.id)

@router.delete("/logs/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_log(wl: WorkoutLog = Depends(existing_log), db: Session = Depends(get_db)):
    LogRepository(db).delete(wl.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/logs/{log_id}/summary", response_model=WorkoutSummary)
def log_summary(wl: WorkoutLog = Depends(existing_log), db: Session = Depends(get_db)):
    return LogRepository(db).summary(wl.id)
