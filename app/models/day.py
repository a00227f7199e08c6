# models/day.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class DayCreate(BaseModel):
    name: Optional[str] = None   # blank or missing -> "Day <order>"

class DayRename(BaseModel):
    name: Optional[str] = None

class Section(BaseModel):
    id: str
    type: str          # 'warmup', 'workout', 'stretch'
    sectionOrder: int = Field(validation_alias="section_order")
    dayId: str = Field(validation_alias="day_id")
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")
    updatedAt: Optional[datetime] = Field(None, validation_alias="updated_at")

    model_config = ConfigDict(from_attributes=True)

class Day(BaseModel):
    id: str
    name: str
    dayOrder: int = Field(validation_alias="day_order")
    planId: str = Field(validation_alias="plan_id")
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")
    updatedAt: Optional[datetime] = Field(None, validation_alias="updated_at")

    model_config = ConfigDict(from_attributes=True)

class DayWithSections(Day):
    """Returned on creation, so the client gets the section ids right away."""
    sections: List[Section] = []
