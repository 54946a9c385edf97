from typing import Annotated
from datetime import date
from pydantic import BaseModel, Field

Weight = Annotated[float, Field(gt=0, le=1000)]

class WeightRecord(BaseModel):
    current_weight: Weight
    target_weight: Weight

class WeightEntryRead(WeightRecord):
    id: int
    weight_date: date

    model_config = {"from_attributes": True}
