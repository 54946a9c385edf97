from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from vikfit.dates import today
from vikfit.db import get_db
from vikfit.deps.lookups import existing_meal, existing_meal_log
from vikfit.models import Meal, MealLog
from vikfit.repositories.goal_repo import MacroGoalRepository
from vikfit.repositories.meal_repo import MealRepository
from vikfit.schemas.meal import (
    MacroGoalRead, MacroGoalSet, MealCreate, MealLogCreate, MealLogRead, MealLogUpdate,
    MealRead, MealUpdate,
)
from vikfit.schemas.stats import MacroTotalsRead
from vikfit.services import nutrition

router = APIRouter(tags=["meals"])

# Meal templates
@router.get("/meals", response_model=list[MealRead])
def list_meals(
    db: Session = Depends(get_db),
    category: str | None = Query(None, max_length=40),
    q: str | None = Query(None, max_length=120, description="substring of the name"),
):
    return MealRepository(db).list(category=category, search=q)

@router.post("/meals", response_model=MealRead, status_code=status.HTTP_201_CREATED)
def create_meal(payload: MealCreate, db: Session = Depends(get_db)):
    return MealRepository(db).create(**payload.model_dump())

@router.patch("/meals/{meal_id}", response_model=MealRead)
def update_meal(payload: MealUpdate, meal: Meal = Depends(existing_meal), db: Session = Depends(get_db)):
    return MealRepository(db).update(meal.id, **payload.model_dump())

@router.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_meal(meal: Meal = Depends(existing_meal), db: Session = Depends(get_db)):
    MealRepository(db).delete(meal.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# What was eaten
@router.post("/meals/{meal_id}/logs", response_model=MealLogRead, status_code=status.HTTP_201_CREATED)
def log_meal(payload: MealLogCreate, meal: Meal = Depends(existing_meal), db: Session = Depends(get_db)):
    macros = payload.model_dump(exclude={"meal_date"})
    return MealRepository(db).log_meal(meal, payload.meal_date or today(), **macros)

@router.get("/meal-logs", response_model=list[MealLogRead])
def meal_logs_for_day(on: date = Query(..., description="YYYY-MM-DD"), db: Session = Depends(get_db)):
    return MealRepository(db).logs_for_date(on)

@router.get("/meal-logs/totals", response_model=MacroTotalsRead)
def daily_totals(on: date = Query(..., description="YYYY-MM-DD"), db: Session = Depends(get_db)):
    totals = MealRepository(db).totals_in_range(on, on)
    return MacroTotalsRead.model_validate(nutrition.MacroTotals(*totals))

@router.patch("/meal-logs/{meal_log_id}", response_model=MealLogRead)
def update_meal_log(
    payload: MealLogUpdate,
    entry: MealLog = Depends(existing_meal_log),
    db: Session = Depends(get_db),
):
    return MealRepository(db).update_log(entry.id, **payload.model_dump())

@router.delete("/meal-logs/{meal_log_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_meal_log(entry: MealLog = Depends(existing_meal_log), db: Session = Depends(get_db)):
    MealRepository(db).delete_log(entry.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Goals apply from their date until the next saved goal
@router.put("/macro-goals/{goal_date}", response_model=MacroGoalRead)
def set_macro_goals(goal_date: date, payload: MacroGoalSet, db: Session = Depends(get_db)):
    return MacroGoalRepository(db).set_goals(goal_date, **payload.model_dump())

@router.get("/macro-goals/{on}", response_model=MacroTotalsRead)
def macro_goals_for_day(on: date, db: Session = Depends(get_db)):
    return MacroTotalsRead.model_validate(nutrition.daily_goals(MacroGoalRepository(db), on))
