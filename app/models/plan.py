# models/plan.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class PlanCreate(BaseModel):
    title: Optional[str] = None

class PlanRename(BaseModel):
    title: Optional[str] = None

class Plan(BaseModel):
    id: str
    title: str
    userId: str = Field(validation_alias="user_id")
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")
    updatedAt: Optional[datetime] = Field(None, validation_alias="updated_at")

    model_config = ConfigDict(from_attributes=True)
