from datetime import date, datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, Float, Date, DateTime, func
from vikfit.db import Base

class MacroGoal(Base):
    """Daily macro targets effective from ``goal_date`` until the next goal."""
    __tablename__ = "macro_goals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    goal_date: Mapped[date] = mapped_column(Date, nullable=False, unique=True, index=True)
    calorie_goal: Mapped[float] = mapped_column(Float, nullable=False)
    protein_goal: Mapped[float] = mapped_column(Float, nullable=False)
    carbs_goal: Mapped[float] = mapped_column(Float, nullable=False)
    fats_goal: Mapped[float] = mapped_column(Float, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
