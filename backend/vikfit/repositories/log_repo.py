from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Any, Optional

from sqlalchemy import select

from vikfit.dates import parse_date
from vikfit.models import Exercise, SetLog, WorkoutLog, WorkoutStatus
from vikfit.repositories.base import BaseRepository

class LogRepository(BaseRepository[WorkoutLog]):
    model = WorkoutLog

    # READS
    def get(self, log_id: int) -> Optional[WorkoutLog]:
        return self.db.get(WorkoutLog, log_id)

    def get_for_date(self, workout_id: int, log_date: date | str) -> Optional[WorkoutLog]:
        stmt = select(WorkoutLog).where(
            WorkoutLog.workout_id == workout_id,
            WorkoutLog.log_date == parse_date(log_date),
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def history(self, workout_id: int, *, limit: int = 10) -> list[WorkoutLog]:
        stmt = select(WorkoutLog).where(
            WorkoutLog.workout_id == workout_id,
            WorkoutLog.status == WorkoutStatus.completed,
        ).order_by(WorkoutLog.log_date.desc()).limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def list_sets(self, log_id: int) -> list[SetLog]:
        stmt = select(SetLog).where(SetLog.workout_log_id == log_id)\
                             .order_by(SetLog.exercise_id.asc(), SetLog.set_number.asc())
        return list(self.db.execute(stmt).scalars().all())

    def summary(self, log_id: int) -> Optional[dict[str, Any]]:
        """The log, its sets grouped per exercise, and duration/rest totals."""
        wl = self.get(log_id)
        if not wl:
            return None
        rows = self.db.execute(
            select(SetLog, Exercise.name)
            .join(Exercise, Exercise.id == SetLog.exercise_id)
            .where(SetLog.workout_log_id == log_id)
            .order_by(SetLog.exercise_id.asc(), SetLog.set_number.asc())
        ).all()

        groups: dict[int, dict[str, Any]] = {}
        for s, exercise_name in rows:
            g = groups.setdefault(s.exercise_id, {"id": s.exercise_id, "name": exercise_name, "sets": []})
            g["sets"].append(s)

        sets = [s for s, _ in rows]
        return {
            "workout": wl,
            "exercises": list(groups.values()),
            "sets": sets,
            "stats": {
                "total_duration": wl.total_duration_seconds or 0,
                "total_rest_time": sum(s.rest_seconds or 0 for s in sets),
                "total_exercise_time": sum(s.duration_seconds or 0 for s in sets),
                "total_sets": len(sets),
            },
        }

    # WRITES
    def start(self, workout_id: int, log_date: date | str) -> WorkoutLog:
        """Open today's session; an existing log for the same date is reopened."""
        log_date = parse_date(log_date)
        existing = self.get_for_date(workout_id, log_date)
        if existing:
            if existing.status != WorkoutStatus.in_progress:
                def reopen() -> WorkoutLog:
                    existing.status = WorkoutStatus.in_progress
                    existing.completed_at = None
                    self.db.flush()
                    return existing
                self.write("reopen_workout_log", reopen)
            return existing

        wl = WorkoutLog(workout_id=workout_id, log_date=log_date, status=WorkoutStatus.in_progress)
        return self.write("start_workout_log", lambda: self.add_and_refresh(wl),
                          conflict="log_already_exists")

    def log_set(self, log_id: int, *, exercise_id: int, set_number: int,
                reps_completed: int | None = None, weight_used: float | None = None,
                rpe: int | None = None, duration_seconds: int = 0, rest_seconds: int = 0,
                notes: str | None = None) -> SetLog:
        s = SetLog(workout_log_id=log_id, exercise_id=exercise_id, set_number=set_number,
                   reps_completed=reps_completed, weight_used=weight_used, rpe=rpe,
                   duration_seconds=duration_seconds, rest_seconds=rest_seconds, notes=notes)
        return self.write("log_set", lambda: self.add_and_refresh(s))

    def complete(self, log_id: int, *, total_duration_seconds: int) -> Optional[WorkoutLog]:
        return self._set_status(log_id, WorkoutStatus.completed,
                                total_duration_seconds=total_duration_seconds)

    def cancel(self, log_id: int) -> Optional[WorkoutLog]:
        return self._set_status(log_id, WorkoutStatus.cancelled)

    def delete(self, log_id: int) -> bool:
        wl = self.get(log_id)
        if not wl:
            return False
        self.write("delete_workout_log", lambda: self.db.delete(wl))
        return True

    def _set_status(self, log_id: int, status: WorkoutStatus, *,
                    total_duration_seconds: int | None = None) -> Optional[WorkoutLog]:
        wl = self.get(log_id)
        if not wl:
            return None

        def work() -> WorkoutLog:
            wl.status = status
            if status == WorkoutStatus.completed:
                wl.total_duration_seconds = total_duration_seconds or 0
                wl.completed_at = datetime.now(timezone.utc)
            self.db.flush()
            return wl
        self.write(f"set_status_{status.value}", work)
        self.db.refresh(wl)
        return wl
