# app/models/exercise.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, AliasChoices, StrictInt
from datetime import datetime
from typing import Optional

class ExerciseFields(BaseModel):
    """
        Exercise fields as sent by the mobile app.

        Everything is optional at this level: which fields are actually
        required depends on ``mode`` and is decided by the exercise service,
        so that the client gets the same messages whether it forgot a field
        or sent a bad value.  Unknown keys are ignored.
    """
    name:       Optional[str] = None
    mode:       Optional[str] = None
    sets:       Optional[StrictInt] = None   # true/false are rejected, not read as 1/0
    reps:       Optional[str] = None
    time_value: Optional[StrictInt] = Field(
        default=None,
        validation_alias=AliasChoices("timeValue", "time_value"),
    )
    time_unit:  Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("timeUnit", "time_unit"),
    )

    model_config = ConfigDict(extra="ignore")

class ExerciseCreate(ExerciseFields):
    pass

class ExerciseUpdate(ExerciseFields):
    pass

class Exercise(BaseModel):
    id:            str
    name:          str
    mode:          str
    sets:          Optional[int] = None
    reps:          Optional[str] = None
    timeValue:     Optional[int] = Field(None, validation_alias="time_value")
    timeUnit:      Optional[str] = Field(None, validation_alias="time_unit")
    exerciseOrder: int = Field(validation_alias="exercise_order")
    sectionId:     str = Field(validation_alias="section_id")
    createdAt:     Optional[datetime] = Field(None, validation_alias="created_at")
    updatedAt:     Optional[datetime] = Field(None, validation_alias="updated_at")

    model_config = ConfigDict(from_attributes=True)
