from __future__ import annotations
from collections.abc import Iterable
from datetime import date

from sqlalchemy import select, delete, func, distinct

from vikfit.dates import check_day_of_week, parse_date
from vikfit.models import ScheduleEntry, SetLog, Workout, WorkoutLog, WorkoutStatus
from vikfit.repositories.base import BaseRepository

class ScheduleRepository(BaseRepository[ScheduleEntry]):
    """Day-of-week assignments plus the completion reads the stats engine needs.

    Reads never raise on store failure (see ``BaseRepository.soft_read``)
    unless called with ``strict=True``; writes raise ``PersistenceError``.
    """
    model = ScheduleEntry

    # READS
    def get_scheduled_days(self, workout_id: int, *, strict: bool = False) -> set[int]:
        def query() -> set[int]:
            stmt = select(ScheduleEntry.day_of_week).where(ScheduleEntry.workout_id == workout_id)
            return set(self.db.execute(stmt).scalars().all())
        return self.soft_read("get_scheduled_days", query, default=set, strict=strict)

    def get_completions_in_range(
        self, workout_id: int, start: date | str, end: date | str, *, strict: bool = False
    ) -> int:
        start, end = parse_date(start), parse_date(end)

        def query() -> int:
            stmt = select(func.count(WorkoutLog.id)).where(
                WorkoutLog.workout_id == workout_id,
                WorkoutLog.status == WorkoutStatus.completed,
                WorkoutLog.log_date >= start,
                WorkoutLog.log_date <= end,
            )
            return self.db.execute(stmt).scalar_one() or 0
        return self.soft_read("get_completions_in_range", query, default=int, strict=strict)

    def get_scheduled_workouts_for_day(self, day_of_week: int, *, strict: bool = False) -> list[Workout]:
        check_day_of_week(day_of_week)

        def query() -> list[Workout]:
            stmt = (
                select(Workout)
                .join(ScheduleEntry, ScheduleEntry.workout_id == Workout.id)
                .where(ScheduleEntry.day_of_week == day_of_week)
                .distinct()
                .order_by(Workout.name.asc(), Workout.id.asc())
            )
            return list(self.db.execute(stmt).scalars().all())
        return self.soft_read("get_scheduled_workouts_for_day", query, default=list, strict=strict)

    def get_completed_workouts_for_date(
        self, on: date | str, *, strict: bool = False
    ) -> list[tuple[Workout, int]]:
        """Completed workouts logged on ``on``, each with its distinct-exercise count."""
        on = parse_date(on)

        def query() -> list[tuple[Workout, int]]:
            exercise_count = func.count(distinct(SetLog.exercise_id))
            stmt = (
                select(Workout, exercise_count)
                .join(WorkoutLog, WorkoutLog.workout_id == Workout.id)
                .outerjoin(SetLog, SetLog.workout_log_id == WorkoutLog.id)
                .where(
                    WorkoutLog.log_date == on,
                    WorkoutLog.status == WorkoutStatus.completed,
                )
                .group_by(Workout.id)
                .order_by(Workout.name.asc(), Workout.id.asc())
            )
            return [(w, int(n or 0)) for w, n in self.db.execute(stmt).all()]
        return self.soft_read("get_completed_workouts_for_date", query, default=list, strict=strict)

    def list_workouts(self, *, strict: bool = False) -> list[Workout]:
        def query() -> list[Workout]:
            stmt = select(Workout).order_by(Workout.name.asc(), Workout.id.asc())
            return list(self.db.execute(stmt).scalars().all())
        return self.soft_read("list_workouts", query, default=list, strict=strict)

    def assigned_day_counts(self, *, strict: bool = False) -> dict[int, int]:
        """workout_id -> number of distinct days it is scheduled on."""
        def query() -> dict[int, int]:
            stmt = (
                select(ScheduleEntry.workout_id, func.count(distinct(ScheduleEntry.day_of_week)))
                .group_by(ScheduleEntry.workout_id)
            )
            return {wid: n for wid, n in self.db.execute(stmt).all()}
        return self.soft_read("assigned_day_counts", query, default=dict, strict=strict)

    def completion_counts_in_range(
        self, start: date | str, end: date | str, *, strict: bool = False
    ) -> dict[int, int]:
        """workout_id -> completed logs with ``start <= log_date <= end``."""
        start, end = parse_date(start), parse_date(end)

        def query() -> dict[int, int]:
            stmt = (
                select(WorkoutLog.workout_id, func.count(WorkoutLog.id))
                .where(
                    WorkoutLog.status == WorkoutStatus.completed,
                    WorkoutLog.log_date >= start,
                    WorkoutLog.log_date <= end,
                )
                .group_by(WorkoutLog.workout_id)
            )
            return {wid: n for wid, n in self.db.execute(stmt).all()}
        return self.soft_read("completion_counts_in_range", query, default=dict, strict=strict)

    # WRITES
    def _lock_workout(self, workout_id: int) -> None:
        # concurrent replacements of one workout's days queue on its row (no-op on SQLite)
        self.db.execute(select(Workout.id).where(Workout.id == workout_id).with_for_update())

    def assign_days(self, workout_id: int, days: Iterable[int]) -> set[int]:
        """Replace the whole assignment set for ``workout_id`` in one transaction."""
        wanted = {check_day_of_week(d) for d in days}

        def work() -> set[int]:
            self._lock_workout(workout_id)
            self.db.execute(delete(ScheduleEntry).where(ScheduleEntry.workout_id == workout_id))
            self.db.add_all(ScheduleEntry(workout_id=workout_id, day_of_week=d) for d in sorted(wanted))
            self.db.flush()
            return wanted
        return self.write("assign_days", work)

    def remove_days(self, workout_id: int, days: Iterable[int]) -> None:
        doomed = {check_day_of_week(d) for d in days}

        def work() -> None:
            self._lock_workout(workout_id)
            self.db.execute(
                delete(ScheduleEntry).where(
                    ScheduleEntry.workout_id == workout_id,
                    ScheduleEntry.day_of_week.in_(doomed),
                )
            )
        self.write("remove_days", work)
