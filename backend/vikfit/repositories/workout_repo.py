# vikfit/repositories/workout_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select

from vikfit.models import Exercise, Workout
from vikfit.repositories.base import BaseRepository, Page

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    # READS
    def get(self, workout_id: int) -> Optional[Workout]:
        return self.db.get(Workout, workout_id)

    def list(self, *, limit: int = 50, offset: int = 0) -> Page[Workout]:
        stmt = select(Workout).order_by(Workout.name.asc(), Workout.id.asc())
        return self.page_from_stmt(stmt, limit=limit, offset=offset)

    def get_exercise(self, exercise_id: int) -> Optional[Exercise]:
        return self.db.get(Exercise, exercise_id)

    def list_exercises(self, workout_id: int) -> list[Exercise]:
        stmt = select(Exercise).where(Exercise.workout_id == workout_id).order_by(Exercise.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    def create(self, *, name: str, description: str | None = None) -> Workout:
        return self.write("create_workout",
                          lambda: self.add_and_refresh(Workout(name=name, description=description)))

    def update(self, workout_id: int, *, name: str | None = None,
               description: str | None = None) -> Optional[Workout]:
        """Rename and/or edit the description; ``None`` leaves a field as is."""
        workout = self.get(workout_id)
        if not workout:
            return None

        def work() -> Workout:
            if name is not None:
                workout.name = name
            if description is not None:
                workout.description = description
            self.db.flush()
            return workout
        workout = self.write("update_workout", work)
        self.db.refresh(workout)
        return workout

    def delete(self, workout_id: int) -> bool:
        workout = self.get(workout_id)
        if not workout:
            return False
        # schedule entries, exercises and logs go with it
        self.write("delete_workout", lambda: self.db.delete(workout))
        return True

    def add_exercise(self, workout_id: int, *, name: str, sets: int | None = None,
                     reps: int | None = None, weight: float | None = None,
                     duration_seconds: int = 0, notes: str | None = None) -> Exercise:
        ex = Exercise(workout_id=workout_id, name=name, sets=sets, reps=reps, weight=weight,
                      duration_seconds=duration_seconds, notes=notes)
        return self.write("add_exercise", lambda: self.add_and_refresh(ex))

    def delete_exercise(self, exercise_id: int) -> bool:
        ex = self.get_exercise(exercise_id)
        if not ex:
            return False
        self.write("delete_exercise", lambda: self.db.delete(ex))
        return True
