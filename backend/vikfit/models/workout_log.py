from datetime import date, datetime
from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import (
    Integer, ForeignKey, Date, DateTime, UniqueConstraint, Enum as SAEnum, func,
)
from vikfit.db import Base

class WorkoutStatus(str, Enum):
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"

class WorkoutLog(Base):
    __tablename__ = "workout_logs"
    __table_args__ = (
        UniqueConstraint("workout_id", "log_date", name="uq_workout_log_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    workout_id: Mapped[int] = mapped_column(ForeignKey("workouts.id", ondelete="CASCADE"), index=True)
    log_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    status: Mapped[WorkoutStatus] = mapped_column(
        SAEnum(WorkoutStatus, name="workout_status"),
        nullable=False,
        default=WorkoutStatus.in_progress,
        server_default=WorkoutStatus.in_progress.value,
    )
    total_duration_seconds: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    workout = relationship("Workout", back_populates="logs")
    sets = relationship("SetLog", back_populates="workout_log", cascade="all, delete-orphan",
                        order_by="SetLog.id")
