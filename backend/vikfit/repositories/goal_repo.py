from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import select, delete

from vikfit.dates import parse_date
from vikfit.models import MacroGoal
from vikfit.repositories.base import BaseRepository

class MacroGoalRepository(BaseRepository[MacroGoal]):
    """Macro goals are a timeline: each row applies from its date onward."""
    model = MacroGoal

    def in_effect(self, on: date | str, *, strict: bool = False) -> Optional[MacroGoal]:
        """The latest goal saved on or before ``on``; None when there is none."""
        on = parse_date(on)

        def query() -> Optional[MacroGoal]:
            stmt = select(MacroGoal).where(MacroGoal.goal_date <= on)\
                                    .order_by(MacroGoal.goal_date.desc()).limit(1)
            return self.db.execute(stmt).scalar_one_or_none()
        return self.soft_read("macro_goal_in_effect", query, default=lambda: None, strict=strict)

    def set_goals(self, goal_date: date | str, *, calorie_goal: float, protein_goal: float,
                  carbs_goal: float, fats_goal: float) -> MacroGoal:
        """Save goals from ``goal_date`` on.

        Goals dated after ``goal_date`` are dropped so the new values cover
        every later day, and a goal already on that date is overwritten.
        """
        goal_date = parse_date(goal_date)
        values = dict(calorie_goal=calorie_goal, protein_goal=protein_goal,
                      carbs_goal=carbs_goal, fats_goal=fats_goal)

        def work() -> MacroGoal:
            self.db.execute(delete(MacroGoal).where(MacroGoal.goal_date > goal_date))
            goal = self.db.execute(
                select(MacroGoal).where(MacroGoal.goal_date == goal_date)
            ).scalar_one_or_none()
            if goal is None:
                goal = MacroGoal(goal_date=goal_date, **values)
                self.db.add(goal)
            else:
                for key, value in values.items():
                    setattr(goal, key, value)
            self.db.flush()
            self.db.refresh(goal)
            return goal
        return self.write("set_macro_goals", work)
