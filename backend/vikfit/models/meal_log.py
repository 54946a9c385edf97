from datetime import date, datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, Float, Date, DateTime, func
from vikfit.db import Base

class MealLog(Base):
    __tablename__ = "meal_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    meal_id: Mapped[int] = mapped_column(ForeignKey("meals.id", ondelete="CASCADE"), index=True)
    meal_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    # macros are copied at log time so editing the template leaves history alone
    calories: Mapped[float] = mapped_column(Float, nullable=False, default=0, server_default="0")
    protein: Mapped[float] = mapped_column(Float, nullable=False, default=0, server_default="0")
    carbs: Mapped[float] = mapped_column(Float, nullable=False, default=0, server_default="0")
    fats: Mapped[float] = mapped_column(Float, nullable=False, default=0, server_default="0")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    meal = relationship("Meal", back_populates="logs")
