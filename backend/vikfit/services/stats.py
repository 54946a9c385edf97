"""Weekly completion statistics.

Everything is recomputed from the store on each call; nothing is cached.
All reads here are fail-soft: a store failure yields zeros/empty lists and
a ``degraded_read`` warning, never an exception.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from vikfit.dates import day_label, day_of_week, parse_date, week_dates, week_end
from vikfit.errors import PersistenceError
from vikfit.models import Workout
from vikfit.progress import BandThresholds, ProgressBand, completion_percentage, progress_band
from vikfit.repositories.schedule_repo import ScheduleRepository

log = logging.getLogger("vikfit.stats")


@dataclass(slots=True)
class CompletedWorkout:
    workout: Workout
    exercise_count: int


@dataclass(slots=True)
class DayBreakdown:
    date: date
    day_label: str
    day_of_week: int
    assigned: list[Workout] = field(default_factory=list)
    completed: list[CompletedWorkout] = field(default_factory=list)

    @property
    def total_assigned(self) -> int:
        return len(self.assigned)

    @property
    def total_completed(self) -> int:
        return len(self.completed)

    @property
    def total_exercises_completed(self) -> int:
        return sum(c.exercise_count for c in self.completed)


@dataclass(slots=True)
class WorkoutMetrics:
    workout: Workout
    assigned_days_count: int
    completion_count: int
    completion_percentage: float
    progress_band: ProgressBand


@dataclass(slots=True)
class WeeklySummary:
    week_start: date
    week_end: date
    workouts_completed: int = 0
    exercises_completed: int = 0


def weekly_completions(repo: ScheduleRepository, workout_id: int, week_start: date | str) -> int:
    """Completed sessions of ``workout_id`` in the 7 days from ``week_start``.

    An unknown workout gives 0, not an error.
    """
    start = parse_date(week_start)
    return repo.get_completions_in_range(workout_id, start, week_end(start))


def weekly_breakdown(repo: ScheduleRepository, week_start: date | str) -> list[DayBreakdown]:
    """Seven days starting at ``week_start``, each with assigned vs completed workouts.

    Index 0 is ``week_start`` itself, whatever weekday it falls on. A day
    whose queries fail comes back empty; the other days are unaffected.
    """
    days: list[DayBreakdown] = []
    for d in week_dates(parse_date(week_start)):
        dow = day_of_week(d)
        day = DayBreakdown(date=d, day_label=day_label(d), day_of_week=dow)
        try:
            assigned = repo.get_scheduled_workouts_for_day(dow, strict=True)
            completed = [
                CompletedWorkout(workout=w, exercise_count=n)
                for w, n in repo.get_completed_workouts_for_date(d, strict=True)
            ]
        except PersistenceError:
            log.warning("degraded_read op=weekly_breakdown day=%s: returning empty day",
                        d.isoformat(), exc_info=True,
                        extra={"degraded_read": True, "op": "weekly_breakdown"})
        else:
            day.assigned = assigned
            day.completed = completed
        days.append(day)
    return days


def workouts_with_metrics(
    repo: ScheduleRepository,
    week_start: date | str,
    thresholds: BandThresholds | None = None,
) -> list[WorkoutMetrics]:
    """Every workout with its assigned-day count and completions for the week."""
    start = parse_date(week_start)
    try:
        workouts = repo.list_workouts(strict=True)
        assigned = repo.assigned_day_counts(strict=True)
        done = repo.completion_counts_in_range(start, week_end(start), strict=True)
    except PersistenceError:
        log.warning("degraded_read op=workouts_with_metrics week=%s: returning []",
                    start.isoformat(), exc_info=True,
                    extra={"degraded_read": True, "op": "workouts_with_metrics"})
        return []

    thresholds = thresholds or BandThresholds.from_settings()
    metrics = []
    for w in workouts:
        n_assigned = assigned.get(w.id, 0)
        n_done = done.get(w.id, 0)
        pct = completion_percentage(n_done, n_assigned)
        metrics.append(WorkoutMetrics(
            workout=w,
            assigned_days_count=n_assigned,
            completion_count=n_done,
            completion_percentage=pct,
            progress_band=progress_band(pct, thresholds),
        ))
    return metrics


def weekly_summary(repo: ScheduleRepository, week_start: date | str) -> WeeklySummary:
    """Distinct workouts completed and exercises performed across the week."""
    start = parse_date(week_start)
    days = weekly_breakdown(repo, start)
    workout_ids = {c.workout.id for day in days for c in day.completed}
    return WeeklySummary(
        week_start=start,
        week_end=week_end(start),
        workouts_completed=len(workout_ids),
        exercises_completed=sum(day.total_exercises_completed for day in days),
    )
