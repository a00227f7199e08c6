# app/api/days.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.dependencies import get_current_user_id
from app.models.day import DayCreate, DayRename, Day, DayWithSections, Section
from app.services.day_service import DayService
from app.services.section_service import SectionService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Days"])


@router.get("/plans/{plan_id}/days", response_model=List[Day])
def get_days(
    plan_id: str,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Days of a plan, in dayOrder."""
    return DayService(db).list(current_user, plan_id)


@router.post("/plans/{plan_id}/days", response_model=DayWithSections, status_code=201)
def create_day(
    plan_id: str,
    data: Optional[DayCreate] = None,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Append a day to the plan; its warmup, workout and stretch sections come with it."""
    name = data.name if data else None
    return DayService(db).create(current_user, plan_id, name)


@router.patch("/days/{day_id}", response_model=Day)
def rename_day(
    day_id: str,
    data: DayRename,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return DayService(db).rename(current_user, day_id, data.name)


@router.delete("/days/{day_id}", status_code=204)
def delete_day(
    day_id: str,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    DayService(db).delete(current_user, day_id)
    return Response(status_code=204)


@router.get("/days/{day_id}/sections", response_model=List[Section], tags=["Sections"])
def get_sections(
    day_id: str,
    current_user: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return SectionService(db).list(current_user, day_id)
