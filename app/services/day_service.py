# services/day_service.py
import logging
from typing import List, Optional

from app.db.models import Plan, Day, Section
from app.services.base import BaseService, require_text
from app.services.ordering import OrderedCollection
from app.services.ownership import ResourceType

logger = logging.getLogger(__name__)

# Every day gets exactly these sections, in this order, when it is created
SECTION_LAYOUT = (
    ("warmup", 1),
    ("workout", 2),
    ("stretch", 3),
)


class DayService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.days = OrderedCollection(db, Day, Day.day_order, Day.plan_id, Plan, Plan.last_day_order)

    def create(self, user_id: str, plan_id: str, name: Optional[str] = None) -> Day:
        """
        Append a day to the plan together with its three sections.

        The day and its sections are flushed in one savepoint and committed in
        one transaction, so a day is never visible without its sections. A
        blank or missing name becomes "Day <order>".
        """
        self._begin_write()
        self.ownership.require(user_id, ResourceType.PLAN, plan_id)
        requested = name.strip() if isinstance(name, str) else ""

        def build(order: int) -> Day:
            return Day(
                plan_id=plan_id,
                name=requested or f"Day {order}",
                day_order=order,
                sections=[
                    Section(type=section_type, section_order=section_order)
                    for section_type, section_order in SECTION_LAYOUT
                ],
            )

        with self._transaction("creating day"):
            day = self.days.insert(plan_id, build)
        self.db.refresh(day)

        logger.info(f"Created day {day.id} (order {day.day_order}) in plan {plan_id}")
        return day

    def list(self, user_id: str, plan_id: str) -> List[Day]:
        self.ownership.require(user_id, ResourceType.PLAN, plan_id)
        return (
            self.db.query(Day)
            .filter(Day.plan_id == plan_id)
            .order_by(Day.day_order, Day.created_at, Day.id)
            .all()
        )

    def rename(self, user_id: str, day_id: str, name: str) -> Day:
        name = require_text(name, "Name required")
        self._begin_write()
        day = self.ownership.require(user_id, ResourceType.DAY, day_id)

        with self._transaction("renaming day"):
            day.name = name
        self.db.refresh(day)
        return day

    def delete(self, user_id: str, day_id: str) -> None:
        """Delete the day; its sections and their exercises go with it."""
        self._begin_write()
        day = self.ownership.require(user_id, ResourceType.DAY, day_id)

        with self._transaction("deleting day"):
            self.db.delete(day)
        logger.info(f"Deleted day {day_id}")
