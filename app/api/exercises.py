# app/api/exercises.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.dependencies import get_current_user_id
from app.models.exercise import ExerciseCreate, ExerciseUpdate, Exercise
from app.services.exercise_service import ExerciseService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Exercises"])


@router.get("/sections/{section_id}/exercises", response_model=List[Exercise])
def get_exercises(
    section_id: str,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Exercises of a section, in exerciseOrder."""
    return ExerciseService(db).list(current_user, section_id)


@router.post("/sections/{section_id}/exercises", response_model=Exercise, status_code=201)
def create_exercise(
    section_id: str,
    data: ExerciseCreate,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return ExerciseService(db).create(current_user, section_id, data.model_dump())


@router.get("/exercises/{exercise_id}", response_model=Exercise)
def get_exercise(
    exercise_id: str,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return ExerciseService(db).get(current_user, exercise_id)


@router.patch("/exercises/{exercise_id}", response_model=Exercise)
def update_exercise(
    exercise_id: str,
    data: ExerciseUpdate,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Partially update an exercise.

    Only the fields present in the body are changed; the result is validated
    like a new exercise, and the fields of the unused mode end up null.
    """
    changes = data.model_dump(exclude_unset=True)
    return ExerciseService(db).update(current_user, exercise_id, changes)


@router.delete("/exercises/{exercise_id}", status_code=204)
def delete_exercise(
    exercise_id: str,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    ExerciseService(db).delete(current_user, exercise_id)
    return Response(status_code=204)
