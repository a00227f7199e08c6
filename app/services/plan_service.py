# services/plan_service.py
import logging
from typing import List

from app.core.exceptions import Unauthenticated
from app.db.models import Plan, User
from app.services.base import BaseService, require_text
from app.services.ownership import ResourceType

logger = logging.getLogger(__name__)


class PlanService(BaseService):
    """Plans are the top of the hierarchy and are owned directly by a user."""

    def create(self, user_id: str, title: str) -> Plan:
        title = require_text(title, "Title required")
        self._begin_write()
        if self.db.get(User, user_id) is None:
            # valid token for an account that has since been removed
            raise Unauthenticated("Unknown user")

        plan = Plan(title=title, user_id=user_id)
        with self._transaction("creating plan"):
            self.db.add(plan)
        self.db.refresh(plan)

        logger.info(f"Created plan {plan.id} for user {user_id}")
        return plan

    def list(self, user_id: str) -> List[Plan]:
        """All of the user's plans, newest first."""
        return (
            self.db.query(Plan)
            .filter(Plan.user_id == user_id)
            .order_by(Plan.created_at.desc(), Plan.id.desc())
            .all()
        )

    def rename(self, user_id: str, plan_id: str, title: str) -> Plan:
        title = require_text(title, "Title required")
        self._begin_write()
        plan = self.ownership.require(user_id, ResourceType.PLAN, plan_id)

        with self._transaction("renaming plan"):
            plan.title = title
        self.db.refresh(plan)
        return plan

    def delete(self, user_id: str, plan_id: str) -> None:
        """Delete the plan and, through cascading FKs, everything under it."""
        self._begin_write()
        plan = self.ownership.require(user_id, ResourceType.PLAN, plan_id)

        with self._transaction("deleting plan"):
            self.db.delete(plan)
        logger.info(f"Deleted plan {plan_id} for user {user_id}")
