from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from vikfit.db import get_db
from vikfit.deps.lookups import existing_workout
from vikfit.models import Workout
from vikfit.repositories.workout_repo import WorkoutRepository
from vikfit.schemas.workout import (
    ExerciseCreate, ExerciseRead, WorkoutCreate, WorkoutPage, WorkoutRead, WorkoutUpdate,
)

router = APIRouter(tags=["workouts"])

@router.get("/workouts", response_model=WorkoutPage)
def list_workouts(
    db: Session = Depends(get_db),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    page = WorkoutRepository(db).list(limit=limit, offset=offset)
    return WorkoutPage.model_validate(page)

@router.post("/workouts", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(payload: WorkoutCreate, db: Session = Depends(get_db)):
    return WorkoutRepository(db).create(name=payload.name, description=payload.description)

@router.get("/workouts/{workout_id}", response_model=WorkoutRead)
def get_workout(workout: Workout = Depends(existing_workout)):
    return workout

@router.patch("/workouts/{workout_id}", response_model=WorkoutRead)
def update_workout(
    payload: WorkoutUpdate,
    workout: Workout = Depends(existing_workout),
    db: Session = Depends(get_db),
):
    return WorkoutRepository(db).update(workout.id, name=payload.name, description=payload.description)

@router.delete("/workouts/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout: Workout = Depends(existing_workout), db: Session = Depends(get_db)):
    WorkoutRepository(db).delete(workout.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/workouts/{workout_id}/exercises", response_model=list[ExerciseRead])
def list_exercises(workout: Workout = Depends(existing_workout), db: Session = Depends(get_db)):
    return WorkoutRepository(db).list_exercises(workout.id)

@router.post("/workouts/{workout_id}/exercises", response_model=ExerciseRead,
             status_code=status.HTTP_201_CREATED)
def add_exercise(
    payload: ExerciseCreate,
    workout: Workout = Depends(existing_workout),
    db: Session = Depends(get_db),
):
    return WorkoutRepository(db).add_exercise(workout.id, **payload.model_dump())

@router.delete("/exercises/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_exercise(exercise_id: int, db: Session = Depends(get_db)):
    if not WorkoutRepository(db).delete_exercise(exercise_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
