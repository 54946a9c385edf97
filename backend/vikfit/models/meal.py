from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, Float, DateTime, func
from vikfit.db import Base

class Meal(Base):
    """A reusable meal template; logging it copies its macros onto a MealLog."""
    __tablename__ = "meals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    category: Mapped[str | None] = mapped_column(String(40), nullable=True, index=True)
    calories: Mapped[float] = mapped_column(Float, nullable=False, default=0, server_default="0")
    protein: Mapped[float] = mapped_column(Float, nullable=False, default=0, server_default="0")
    carbs: Mapped[float] = mapped_column(Float, nullable=False, default=0, server_default="0")
    fats: Mapped[float] = mapped_column(Float, nullable=False, default=0, server_default="0")
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    logs = relationship("MealLog", back_populates="meal", cascade="all, delete-orphan")
