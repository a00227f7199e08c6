# services/exercise_service.py
"""
Exercises are either rep based (sets x reps) or time based (value + unit).

The two field groups are mutually exclusive: whatever the client sends, the
stored row has exactly one group filled in and the other one null. This is
checked here on every write, both on create and on update.
"""

import logging
from typing import Any, Dict, List, Optional

from app.core.exceptions import ValidationError
from app.db.models import Section, Exercise, EXERCISE_MODES, TIME_UNITS
from app.services.base import BaseService, require_text
from app.services.ordering import OrderedCollection
from app.services.ownership import ResourceType

logger = logging.getLogger(__name__)

EXERCISE_FIELDS = ("name", "mode", "sets", "reps", "time_value", "time_unit")

# upper bound and error message per time unit; the lower bound is always 1
TIME_LIMITS = {
    "sec":  (59, "Seconds must be 1-59"),
    "min":  (59, "Minutes must be 1-59"),
    "hour": (12, "Hours must be 1-12"),
}


def _positive_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 1 else None


def validate_exercise(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a complete set of exercise fields and return the column values to store.

    Raises ValidationError with a message the mobile client shows as-is.
    """
    name = require_text(fields.get("name"), "Exercise name required")

    mode = fields.get("mode")
    if mode not in EXERCISE_MODES:
        raise ValidationError("Mode must be 'reps' or 'time'")

    if mode == "reps":
        sets = _positive_int(fields.get("sets"))
        if sets is None:
            raise ValidationError("Sets required")
        reps = require_text(fields.get("reps"), "Reps required")
        return {
            "name": name,
            "mode": mode,
            "sets": sets,
            "reps": reps,
            "time_value": None,
            "time_unit": None,
        }

    time_value = _positive_int(fields.get("time_value"))
    if time_value is None:
        raise ValidationError("Time value required")
    time_unit = fields.get("time_unit")
    if time_unit not in TIME_UNITS:
        raise ValidationError("Invalid time unit")
    upper, message = TIME_LIMITS[time_unit]
    if time_value > upper:
        raise ValidationError(message)

    return {
        "name": name,
        "mode": mode,
        "sets": None,
        "reps": None,
        "time_value": time_value,
        "time_unit": time_unit,
    }


class ExerciseService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.exercises = OrderedCollection(
            db, Exercise, Exercise.exercise_order, Exercise.section_id, Section, Section.last_exercise_order
        )

    def create(self, user_id: str, section_id: str, fields: Dict[str, Any]) -> Exercise:
        self._begin_write()
        self.ownership.require(user_id, ResourceType.SECTION, section_id)
        values = validate_exercise(fields)

        def build(order: int) -> Exercise:
            return Exercise(section_id=section_id, exercise_order=order, **values)

        with self._transaction("creating exercise"):
            exercise = self.exercises.insert(section_id, build)
        self.db.refresh(exercise)

        logger.info(f"Created exercise {exercise.id} (order {exercise.exercise_order}) in section {section_id}")
        return exercise

    def get(self, user_id: str, exercise_id: str) -> Exercise:
        return self.ownership.require(user_id, ResourceType.EXERCISE, exercise_id)

    def list(self, user_id: str, section_id: str) -> List[Exercise]:
        self.ownership.require(user_id, ResourceType.SECTION, section_id)
        return (
            self.db.query(Exercise)
            .filter(Exercise.section_id == section_id)
            .order_by(Exercise.exercise_order, Exercise.created_at, Exercise.id)
            .all()
        )

    def update(self, user_id: str, exercise_id: str, changes: Dict[str, Any]) -> Exercise:
        """
        Overlay ``changes`` on the stored exercise and re-validate the result.

        Switching mode drops the old mode's values, so the new mode's fields
        have to be part of ``changes``. Keys other than EXERCISE_FIELDS are ignored.
        """
        self._begin_write()
        exercise = self.ownership.require(user_id, ResourceType.EXERCISE, exercise_id)

        merged = {field: getattr(exercise, field) for field in EXERCISE_FIELDS}
        merged.update({k: v for k, v in changes.items() if k in EXERCISE_FIELDS})
        values = validate_exercise(merged)

        with self._transaction("updating exercise"):
            for field, value in values.items():
                setattr(exercise, field, value)
        self.db.refresh(exercise)
        return exercise

    def delete(self, user_id: str, exercise_id: str) -> None:
        self._begin_write()
        exercise = self.ownership.require(user_id, ResourceType.EXERCISE, exercise_id)

        with self._transaction("deleting exercise"):
            self.db.delete(exercise)
        logger.info(f"Deleted exercise {exercise_id}")
