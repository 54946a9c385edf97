from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, Text, DateTime, func
from vikfit.db import Base

class Workout(Base):
    __tablename__ = "workouts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[DateTime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    exercises = relationship("Exercise", back_populates="workout", cascade="all, delete-orphan",
                             order_by="Exercise.id")
    schedule = relationship("ScheduleEntry", back_populates="workout", cascade="all, delete-orphan")
    logs = relationship("WorkoutLog", back_populates="workout", cascade="all, delete-orphan")
