import logging
from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy.exc import IntegrityError

from app.core.database import begin_write
from app.core.exceptions import Conflict, NotFound
from app.db.models import Plan, Day, Section, Exercise
from app.services.day_service import DayService
from app.services.exercise_service import ExerciseService
from app.services.ordering import OrderedCollection


def _days(db):
    return OrderedCollection(db, Day, Day.day_order, Day.plan_id, Plan, Plan.last_day_order)


def test_next_order_empty_scope(db, plan):
    assert _days(db).next_order(plan.id) == 1


def test_next_order_skips_gaps(db, owner, plan):
    service = DayService(db)
    service.create(owner.id, plan.id)
    second = service.create(owner.id, plan.id)
    service.create(owner.id, plan.id)
    service.delete(owner.id, second.id)

    assert _days(db).next_order(plan.id) == 4


def test_next_order_remembers_deleted_highest(db, owner, plan):
    service = DayService(db)
    service.create(owner.id, plan.id)
    last = service.create(owner.id, plan.id)
    service.delete(owner.id, last.id)

    assert _days(db).next_order(plan.id) == 3
    db.refresh(plan)
    assert plan.last_day_order == 2


def test_collision_is_retried(db, owner, plan, day, caplog):
    service = DayService(db)
    real_next_order = service.days.next_order
    calls = []

    def stale_once(scope_id):
        calls.append(scope_id)
        # the first read pretends the existing day isn't there yet
        return 1 if len(calls) == 1 else real_next_order(scope_id)

    service.days.next_order = stale_once

    with caplog.at_level(logging.WARNING, logger="app.services.ordering"):
        created = service.create(owner.id, plan.id)

    assert created.day_order == 2
    assert created.name == "Day 2"
    assert len(calls) == 2
    assert "Order collision" in caplog.text
    assert db.query(Day).count() == 2
    # the discarded attempt left no sections behind
    assert db.query(Section).count() == 6


def test_gives_up_after_retries(db, owner, plan, day):
    service = DayService(db)
    service.days.retries = 3
    attempts = []

    def always_stale(scope_id):
        attempts.append(scope_id)
        return 1

    service.days.next_order = always_stale

    with pytest.raises(Conflict):
        service.create(owner.id, plan.id)
    assert len(attempts) == 3
    assert db.query(Day).count() == 1


def test_constraint_name_is_found_from_the_model(db):
    assert _days(db).constraint_name == "uq_days_plan_order"
    exercises = OrderedCollection(
        db, Exercise, Exercise.exercise_order, Exercise.section_id, Section, Section.last_exercise_order
    )
    assert exercises.constraint_name == "uq_exercises_section_order"


def test_other_integrity_errors_are_not_retried(db, section, caplog):
    exercises = OrderedCollection(
        db, Exercise, Exercise.exercise_order, Exercise.section_id, Section, Section.last_exercise_order
    )
    builds = []

    def build(order):
        builds.append(order)
        # skips validation: the CHECK constraint on time_unit rejects it
        return Exercise(section_id=section.id, exercise_order=order, name="Plank",
                        mode="time", time_value=30, time_unit="day")

    begin_write(db)
    with caplog.at_level(logging.WARNING, logger="app.services.ordering"):
        with pytest.raises(IntegrityError):
            exercises.insert(section.id, build)
    db.rollback()

    assert builds == [1]
    assert "Order collision" not in caplog.text
    assert db.query(Exercise).count() == 0


def test_missing_parent_is_not_found(db):
    with pytest.raises(NotFound) as exc_info:
        _days(db).insert("no-such-plan", lambda order: Day(plan_id="no-such-plan", name="x", day_order=order))
    assert exc_info.value.message == "Plan not found"
    db.rollback()
    assert db.query(Day).count() == 0


@pytest.mark.parametrize("workers", [2, 10, 50])
def test_concurrent_day_creation_gets_distinct_orders(db, session_factory, owner, plan, workers):
    user_id, plan_id = owner.id, plan.id
    # release the write lock held by the fixture session
    db.close()

    def create_day(_):
        with session_factory() as session:
            return DayService(session).create(user_id, plan_id).day_order

    with ThreadPoolExecutor(max_workers=workers) as pool:
        orders = list(pool.map(create_day, range(workers)))

    assert sorted(orders) == list(range(1, workers + 1))

    with session_factory() as session:
        assert session.query(Section).count() == 3 * workers


@pytest.mark.parametrize("workers", [2, 10, 50])
def test_concurrent_exercise_creation_gets_distinct_orders(db, session_factory, owner, section, workers):
    user_id, section_id = owner.id, section.id
    db.close()

    def create_exercise(n):
        with session_factory() as session:
            fields = {"name": f"Move {n}", "mode": "reps", "sets": 1, "reps": "5"}
            return ExerciseService(session).create(user_id, section_id, fields).exercise_order

    with ThreadPoolExecutor(max_workers=workers) as pool:
        orders = list(pool.map(create_exercise, range(workers)))

    assert sorted(orders) == list(range(1, workers + 1))

    with session_factory() as session:
        stored = [e.exercise_order for e in session.query(Exercise).order_by(Exercise.exercise_order)]
    assert stored == list(range(1, workers + 1))
