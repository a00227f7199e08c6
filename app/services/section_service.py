# services/section_service.py
from typing import List

from app.db.models import Section
from app.services.base import BaseService
from app.services.ownership import ResourceType


class SectionService(BaseService):
    """Read-only: sections are created and deleted only together with their day."""

    def list(self, user_id: str, day_id: str) -> List[Section]:
        self.ownership.require(user_id, ResourceType.DAY, day_id)
        return (
            self.db.query(Section)
            .filter(Section.day_id == day_id)
            .order_by(Section.section_order, Section.created_at, Section.id)
            .all()
        )
