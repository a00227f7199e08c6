# services/ordering.py
"""
Ordered Collection Manager.

Days within a plan and exercises within a section carry a client-visible
position (``day_order``, ``exercise_order``). A new row goes one past the
highest position ever handed out in its scope. The parent keeps that
high-water mark (``plans.last_day_order``, ``sections.last_exercise_order``),
so deleting the last row does not free its position. Deleting never
renumbers the rest either: gaps are expected.

Order assignment and the insert happen in the caller's transaction:

* the parent row is locked (``SELECT ... FOR UPDATE``) so concurrent creators
  in the same scope queue up behind each other on databases that support it,
  and a parent that no longer exists is reported as NotFound,
* the insert and the high-water update are flushed inside a SAVEPOINT; a
  unique-constraint collision on ``(scope, order)`` rolls back just that
  savepoint and the order is computed again. Any other integrity error (a
  CHECK or foreign key violation) is not retried and propagates.
"""

import logging
from typing import Callable

from sqlalchemy import UniqueConstraint, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import ORDER_ASSIGN_RETRIES
from app.core.exceptions import Conflict, NotFound

logger = logging.getLogger(__name__)


class OrderedCollection:
    def __init__(self, db: Session, model, order_column, scope_column, parent_model, counter_column,
                 retries: int = ORDER_ASSIGN_RETRIES):
        self.db = db
        self.model = model
        self.order_column = order_column
        self.scope_column = scope_column
        self.parent_model = parent_model
        self.counter_column = counter_column
        self.retries = retries
        self.constraint_name = self._order_constraint_name()

    def _order_constraint_name(self) -> str:
        for constraint in self.model.__table__.constraints:
            if isinstance(constraint, UniqueConstraint) and self.order_column.key in constraint.columns.keys():
                return constraint.name.lower()
        raise ValueError(f"{self.model.__tablename__} has no unique constraint on {self.order_column.key}")

    def next_order(self, scope_id: str) -> int:
        """One past the highest order ever issued in the scope, or 1 for a new scope."""
        current = (
            self.db.query(func.max(self.order_column))
            .filter(self.scope_column == scope_id)
            .scalar()
        )
        issued = (
            self.db.query(self.counter_column)
            .filter(self.parent_model.id == scope_id)
            .scalar()
        )
        return max(current or 0, issued or 0) + 1

    def _lock_scope(self, scope_id: str) -> None:
        # FOR UPDATE is a no-op on SQLite, where the write transaction already holds the lock
        parent = (
            self.db.query(self.parent_model.id)
            .filter(self.parent_model.id == scope_id)
            .with_for_update()
            .first()
        )
        if parent is None:
            raise NotFound(f"{self.parent_model.__name__} not found")

    def _record_issued(self, scope_id: str, order: int) -> None:
        (
            self.db.query(self.parent_model)
            .filter(self.parent_model.id == scope_id, self.counter_column < order)
            .update({self.counter_column: order}, synchronize_session=False)
        )

    def _is_order_collision(self, exc: IntegrityError) -> bool:
        """True when ``exc`` is the (scope, order) unique constraint and nothing else."""
        message = str(exc.orig).lower()
        if "unique" not in message and "duplicate" not in message:
            return False
        # postgres names the constraint, sqlite lists "table.column" pairs
        return (
            self.constraint_name in message
            or f"{self.model.__tablename__}.{self.order_column.key}" in message
        )

    def insert(self, scope_id: str, build: Callable[[int], object]):
        """
        Build a row for the next free position in ``scope_id`` and flush it.

        ``build`` receives the assigned order and returns the (unsaved) ORM
        object. The caller still owns the outer transaction and must commit.
        """
        self._lock_scope(scope_id)

        for attempt in range(1, self.retries + 1):
            order = self.next_order(scope_id)
            row = build(order)
            try:
                with self.db.begin_nested():
                    self.db.add(row)
                    self.db.flush()
                    self._record_issued(scope_id, order)
            except IntegrityError as e:
                if not self._is_order_collision(e):
                    raise
                logger.warning(
                    f"Order collision for {self.model.__tablename__} "
                    f"scope={scope_id} order={order} (attempt {attempt}/{self.retries})"
                )
                continue
            return row

        logger.error(f"Gave up assigning order for {self.model.__tablename__} scope={scope_id}")
        raise Conflict("Could not assign a position, please retry")
