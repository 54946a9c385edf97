# vikfit/repositories/meal_repo.py
from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import select, func

from vikfit.dates import parse_date
from vikfit.models import Meal, MealLog
from vikfit.repositories.base import BaseRepository

MACROS = ("calories", "protein", "carbs", "fats")

class MealRepository(BaseRepository[Meal]):
    """Meal templates and the day-by-day log of what was eaten.

    Macro sums are fail-soft reads like the workout statistics; every other
    method behaves like the workout library.
    """
    model = Meal

    # READS
    def get(self, meal_id: int) -> Optional[Meal]:
        return self.db.get(Meal, meal_id)

    def list(self, *, category: str | None = None, search: str | None = None) -> list[Meal]:
        stmt = select(Meal)
        if category is not None:
            stmt = stmt.where(Meal.category == category)
        if search:
            stmt = stmt.where(Meal.name.ilike(f"%{search}%"))
        stmt = stmt.order_by(Meal.category.asc(), Meal.name.asc(), Meal.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def get_log(self, log_id: int) -> Optional[MealLog]:
        return self.db.get(MealLog, log_id)

    def logs_for_date(self, on: date | str) -> list[MealLog]:
        """Newest first, like the day's meal list."""
        stmt = select(MealLog).where(MealLog.meal_date == parse_date(on))\
                              .order_by(MealLog.created_at.desc(), MealLog.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def totals_in_range(
        self, start: date | str, end: date | str, *, strict: bool = False
    ) -> tuple[float, float, float, float]:
        """(calories, protein, carbs, fats) logged with ``start <= meal_date <= end``."""
        start, end = parse_date(start), parse_date(end)

        def query() -> tuple[float, float, float, float]:
            stmt = select(
                *(func.coalesce(func.sum(getattr(MealLog, m)), 0) for m in MACROS)
            ).where(MealLog.meal_date >= start, MealLog.meal_date <= end)
            row = self.db.execute(stmt).one()
            return tuple(float(v or 0) for v in row)
        return self.soft_read("meal_totals_in_range", query,
                              default=lambda: (0.0, 0.0, 0.0, 0.0), strict=strict)

    # WRITES
    def create(self, *, name: str, category: str | None = None, calories: float = 0,
               protein: float = 0, carbs: float = 0, fats: float = 0) -> Meal:
        meal = Meal(name=name, category=category, calories=calories,
                    protein=protein, carbs=carbs, fats=fats)
        return self.write("create_meal", lambda: self.add_and_refresh(meal))

    def update(self, meal_id: int, **fields) -> Optional[Meal]:
        """Overwrite the given template fields; ``None`` values are skipped."""
        meal = self.get(meal_id)
        if not meal:
            return None

        def work() -> Meal:
            for key, value in fields.items():
                if value is not None:
                    setattr(meal, key, value)
            self.db.flush()
            return meal
        meal = self.write("update_meal", work)
        self.db.refresh(meal)
        return meal

    def delete(self, meal_id: int) -> bool:
        meal = self.get(meal_id)
        if not meal:
            return False
        # its logs go with it
        self.write("delete_meal", lambda: self.db.delete(meal))
        return True

    def log_meal(self, meal: Meal, meal_date: date | str, **overrides) -> MealLog:
        """Log ``meal`` on ``meal_date``; macros not overridden come from the template."""
        values = {m: overrides.get(m) if overrides.get(m) is not None else getattr(meal, m)
                  for m in MACROS}
        entry = MealLog(meal_id=meal.id, meal_date=parse_date(meal_date), **values)
        return self.write("log_meal", lambda: self.add_and_refresh(entry))

    def update_log(self, log_id: int, **macros) -> Optional[MealLog]:
        entry = self.get_log(log_id)
        if not entry:
            return None

        def work() -> MealLog:
            for key, value in macros.items():
                if value is not None:
                    setattr(entry, key, value)
            self.db.flush()
            return entry
        entry = self.write("update_meal_log", work)
        self.db.refresh(entry)
        return entry

    def delete_log(self, log_id: int) -> bool:
        entry = self.get_log(log_id)
        if not entry:
            return False
        self.write("delete_meal_log", lambda: self.db.delete(entry))
        return True
