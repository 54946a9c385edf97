from typing import Annotated
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator

NameStr = Annotated[str, Field(max_length=120)]
CategoryStr = Annotated[str, Field(max_length=40)]
Macro = Annotated[float, Field(ge=0, le=100000)]

class MealCreate(BaseModel):
    name: NameStr
    category: CategoryStr | None = None
    calories: Macro = 0
    protein: Macro = 0
    carbs: Macro = 0
    fats: Macro = 0

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("name cannot be blank")
        return v2

class MealUpdate(BaseModel):
    name: NameStr | None = None
    category: CategoryStr | None = None
    calories: Macro | None = None
    protein: Macro | None = None
    carbs: Macro | None = None
    fats: Macro | None = None

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v2 = v.strip()
        if not v2:
            raise ValueError("name cannot be blank")
        return v2

class MealRead(BaseModel):
    id: int
    name: str
    category: str | None = None
    calories: float
    protein: float
    carbs: float
    fats: float

    model_config = {"from_attributes": True}

class MealLogCreate(BaseModel):
    """Omitted macros are copied from the meal template."""
    meal_date: date | None = None
    calories: Macro | None = None
    protein: Macro | None = None
    carbs: Macro | None = None
    fats: Macro | None = None

class MealLogUpdate(BaseModel):
    calories: Macro | None = None
    protein: Macro | None = None
    carbs: Macro | None = None
    fats: Macro | None = None

class MealLogRead(BaseModel):
    id: int
    meal_id: int
    meal_date: date
    calories: float
    protein: float
    carbs: float
    fats: float
    created_at: datetime | None = None

    model_config = {"from_attributes": True}

class MacroGoalSet(BaseModel):
    calorie_goal: Macro
    protein_goal: Macro
    carbs_goal: Macro
    fats_goal: Macro

class MacroGoalRead(MacroGoalSet):
    goal_date: date
    model_config = {"from_attributes": True}
