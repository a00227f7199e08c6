# app/api/plans.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.dependencies import get_current_user_id
from app.models.plan import PlanCreate, PlanRename, Plan
from app.services.plan_service import PlanService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/plans", tags=["Plans"])


@router.get("", response_model=List[Plan])
def get_plans(
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get all plans of the authenticated user, newest first."""
    return PlanService(db).list(current_user)


@router.post("", response_model=Plan, status_code=201)
def create_plan(
    data: PlanCreate,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return PlanService(db).create(current_user, data.title)


@router.patch("/{plan_id}", response_model=Plan)
def rename_plan(
    plan_id: str,
    data: PlanRename,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return PlanService(db).rename(current_user, plan_id, data.title)


@router.delete("/{plan_id}", status_code=204)
def delete_plan(
    plan_id: str,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Delete a plan with all of its days, sections and exercises.

    A plan that doesn't exist and one owned by someone else both answer 404.
    """
    PlanService(db).delete(current_user, plan_id)
    return Response(status_code=204)
