"""Weekly meal statistics: totals, per-day breakdown, goals and trends.

Weeks follow the same Sunday-anchored convention as the workout
statistics. Reads are fail-soft in the same way: a store failure yields
zero totals and a ``degraded_read`` warning.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta

from vikfit.dates import day_label, day_of_week, parse_date, week_dates, week_end
from vikfit.errors import PersistenceError
from vikfit.progress import BandThresholds, ProgressBand, completion_percentage, progress_band
from vikfit.repositories.goal_repo import MacroGoalRepository
from vikfit.repositories.meal_repo import MACROS, MealRepository
from vikfit.settings import get_settings

log = logging.getLogger("vikfit.stats")


@dataclass(frozen=True, slots=True)
class MacroTotals:
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0

    def scaled(self, factor: float) -> "MacroTotals":
        return MacroTotals(*(getattr(self, m) * factor for m in MACROS))


@dataclass(slots=True)
class DayMacros:
    date: date
    day_label: str
    day_of_week: int
    totals: MacroTotals = field(default_factory=MacroTotals)


@dataclass(slots=True)
class MacroProgress:
    macro: str
    actual: float
    goal: float
    percentage: float
    band: ProgressBand


@dataclass(slots=True)
class WeeklyNutrition:
    week_start: date
    week_end: date
    totals: MacroTotals
    goals: MacroTotals
    previous_totals: MacroTotals
    change: dict[str, float]
    progress: list[MacroProgress]
    days: list[DayMacros]


def percentage_change(current: float, previous: float) -> float:
    """Change from ``previous`` to ``current`` in percent.

    From a zero baseline any increase counts as +100 and no change as 0.
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return (current - previous) / previous * 100


def daily_goals(goals: MacroGoalRepository, on: date | str) -> MacroTotals:
    """Goals in effect on ``on``, or the configured defaults when none were saved."""
    goal = goals.in_effect(on)
    if goal is None:
        s = get_settings()
        return MacroTotals(s.DEFAULT_CALORIE_GOAL, s.DEFAULT_PROTEIN_GOAL,
                           s.DEFAULT_CARBS_GOAL, s.DEFAULT_FATS_GOAL)
    return MacroTotals(goal.calorie_goal, goal.protein_goal, goal.carbs_goal, goal.fats_goal)


def weekly_goals(goals: MacroGoalRepository, week_start: date | str) -> MacroTotals:
    """Seven times the daily goals in effect on ``week_start``; zeros if none were saved."""
    goal = goals.in_effect(parse_date(week_start))
    if goal is None:
        return MacroTotals()
    return MacroTotals(goal.calorie_goal, goal.protein_goal, goal.carbs_goal, goal.fats_goal).scaled(7)


def weekly_meal_totals(meals: MealRepository, week_start: date | str) -> MacroTotals:
    start = parse_date(week_start)
    return MacroTotals(*meals.totals_in_range(start, week_end(start)))


def weekly_meal_breakdown(meals: MealRepository, week_start: date | str) -> list[DayMacros]:
    """Seven days from ``week_start`` with the macros logged on each.

    As with the workout breakdown, a day whose query fails comes back as
    zeros without affecting the others.
    """
    days: list[DayMacros] = []
    for d in week_dates(parse_date(week_start)):
        day = DayMacros(date=d, day_label=day_label(d), day_of_week=day_of_week(d))
        try:
            day.totals = MacroTotals(*meals.totals_in_range(d, d, strict=True))
        except PersistenceError:
            log.warning("degraded_read op=weekly_meal_breakdown day=%s: returning zeros",
                        d.isoformat(), exc_info=True,
                        extra={"degraded_read": True, "op": "weekly_meal_breakdown"})
        days.append(day)
    return days


def macro_progress(
    totals: MacroTotals, goals: MacroTotals, thresholds: BandThresholds | None = None
) -> list[MacroProgress]:
    thresholds = thresholds or BandThresholds.from_settings()
    rows = []
    for m in MACROS:
        actual, goal = getattr(totals, m), getattr(goals, m)
        pct = completion_percentage(actual, goal)
        rows.append(MacroProgress(macro=m, actual=actual, goal=goal, percentage=pct,
                                  band=progress_band(pct, thresholds)))
    return rows


def weekly_nutrition(
    meals: MealRepository, goals: MacroGoalRepository, week_start: date | str
) -> WeeklyNutrition:
    """Everything the weekly meal view shows, compared with the week before."""
    start = parse_date(week_start)
    days = weekly_meal_breakdown(meals, start)
    totals = MacroTotals(*(sum(getattr(d.totals, m) for d in days) for m in MACROS))
    previous = weekly_meal_totals(meals, start - timedelta(days=7))
    targets = weekly_goals(goals, start)
    return WeeklyNutrition(
        week_start=start,
        week_end=week_end(start),
        totals=totals,
        goals=targets,
        previous_totals=previous,
        change={m: percentage_change(getattr(totals, m), getattr(previous, m)) for m in MACROS},
        progress=macro_progress(totals, targets),
        days=days,
    )
