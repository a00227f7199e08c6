# services/ownership.py
"""
Ownership resolution for the plan hierarchy.

Every Day, Section and Exercise belongs to a user only through its chain of
parents (Exercise -> Section -> Day -> Plan -> User). ``OwnershipResolver``
walks that chain with a single joined query instead of one lookup per level,
and is the one place the API decides whether a user may see a resource.

A resource owned by another user and a resource that does not exist look the
same from the outside: both raise ``NotFound``.
"""

import logging
from enum import Enum
from typing import Optional

from sqlalchemy.orm import Session

from app.core.exceptions import NotFound
from app.db.models import Plan, Day, Section, Exercise

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    PLAN = "plan"
    DAY = "day"
    SECTION = "section"
    EXERCISE = "exercise"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# model for each resource type, and the joins that lead from it up to plans
_MODELS = {
    ResourceType.PLAN: Plan,
    ResourceType.DAY: Day,
    ResourceType.SECTION: Section,
    ResourceType.EXERCISE: Exercise,
}

_PARENT_JOINS = {
    ResourceType.PLAN: [],
    ResourceType.DAY: [
        (Plan, Day.plan_id == Plan.id),
    ],
    ResourceType.SECTION: [
        (Day, Section.day_id == Day.id),
        (Plan, Day.plan_id == Plan.id),
    ],
    ResourceType.EXERCISE: [
        (Section, Exercise.section_id == Section.id),
        (Day, Section.day_id == Day.id),
        (Plan, Day.plan_id == Plan.id),
    ],
}


class OwnershipResolver:
    """Answers "who owns this?" for any resource in the hierarchy."""

    def __init__(self, db: Session):
        self.db = db

    def _scoped(self, resource_type: ResourceType, *entities):
        model = _MODELS[resource_type]
        query = self.db.query(*entities).select_from(model)
        for parent, onclause in _PARENT_JOINS[resource_type]:
            query = query.join(parent, onclause)
        return query

    def owner_of(self, resource_type: ResourceType, resource_id: str) -> Optional[str]:
        """Return the user id at the top of the chain, or None if the resource doesn't exist."""
        model = _MODELS[resource_type]
        return (
            self._scoped(resource_type, Plan.user_id)
            .filter(model.id == resource_id)
            .scalar()
        )

    def owns(self, user_id: str, resource_type: ResourceType, resource_id: str) -> bool:
        owner = self.owner_of(resource_type, resource_id)
        return owner is not None and owner == user_id

    def require(self, user_id: str, resource_type: ResourceType, resource_id: str):
        """Load the resource if ``user_id`` owns it, else raise NotFound."""
        model = _MODELS[resource_type]
        row = (
            self._scoped(resource_type, model)
            .filter(model.id == resource_id, Plan.user_id == user_id)
            .first()
        )
        if row is None:
            logger.debug(f"{resource_type.value} {resource_id} not visible to user {user_id}")
            raise NotFound(f"{resource_type.label} not found")
        return row
