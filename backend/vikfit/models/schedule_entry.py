from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, DateTime, CheckConstraint, UniqueConstraint, func
from vikfit.db import Base

class ScheduleEntry(Base):
    """A workout assigned to a day of the week (Sunday=0 ... Saturday=6)."""
    __tablename__ = "schedule_entries"
    __table_args__ = (
        UniqueConstraint("workout_id", "day_of_week", name="uq_schedule_workout_day"),
        CheckConstraint("day_of_week BETWEEN 0 AND 6", name="ck_schedule_day_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    workout_id: Mapped[int] = mapped_column(ForeignKey("workouts.id", ondelete="CASCADE"), index=True)
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    workout = relationship("Workout", back_populates="schedule")
