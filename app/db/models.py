# db/models.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
import uuid
from datetime import datetime, timezone

def utcnow():
    return datetime.now(timezone.utc)

def generate_uuid():
    return str(uuid.uuid4())

SECTION_TYPES = ("warmup", "workout", "stretch")
EXERCISE_MODES = ("reps", "time")
TIME_UNITS = ("sec", "min", "hour")

# User related models
class User(Base):
    __tablename__ = 'users'

    id            = Column(String(36), primary_key=True, default=generate_uuid)
    email         = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at    = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    # Relationships
    plans = relationship("Plan", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)

# Plan hierarchy: Plan -> Day -> Section -> Exercise
class Plan(Base):
    __tablename__ = 'plans'

    id         = Column(String(36), primary_key=True, default=generate_uuid)
    title      = Column(Text, nullable=False)
    user_id    = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    last_day_order = Column(Integer, nullable=False, default=0, server_default="0")  # highest day_order ever issued
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)

    # Relationships
    user = relationship("User", back_populates="plans")
    days = relationship("Day", back_populates="plan", cascade="all, delete-orphan", passive_deletes=True)

    # Indexes
    __table_args__ = (
        Index('idx_plans_user_id', 'user_id'),
    )

class Day(Base):
    __tablename__ = 'days'

    id         = Column(String(36), primary_key=True, default=generate_uuid)
    plan_id    = Column(String(36), ForeignKey('plans.id', ondelete='CASCADE'), nullable=False)
    name       = Column(Text, nullable=False)
    day_order  = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)

    # Relationships
    plan     = relationship("Plan", back_populates="days")
    sections = relationship(
        "Section",
        back_populates="day",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Section.section_order",
    )

    __table_args__ = (
        UniqueConstraint('plan_id', 'day_order', name='uq_days_plan_order'),
        Index('idx_days_plan_id', 'plan_id'),
    )

class Section(Base):
    __tablename__ = 'sections'

    id            = Column(String(36), primary_key=True, default=generate_uuid)
    day_id        = Column(String(36), ForeignKey('days.id', ondelete='CASCADE'), nullable=False)
    type          = Column(String(20), nullable=False)   # 'warmup', 'workout', 'stretch'
    section_order = Column(Integer, nullable=False)
    last_exercise_order = Column(Integer, nullable=False, default=0, server_default="0")  # highest exercise_order ever issued
    created_at    = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at    = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)

    # Relationships
    day       = relationship("Day", back_populates="sections")
    exercises = relationship("Exercise", back_populates="section", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        UniqueConstraint('day_id', 'section_order', name='uq_sections_day_order'),
        UniqueConstraint('day_id', 'type', name='uq_sections_day_type'),
        CheckConstraint("type IN ('warmup', 'workout', 'stretch')", name='ck_sections_type'),
        Index('idx_sections_day_id', 'day_id'),
    )

class Exercise(Base):
    __tablename__ = 'exercises'

    id             = Column(String(36), primary_key=True, default=generate_uuid)
    section_id     = Column(String(36), ForeignKey('sections.id', ondelete='CASCADE'), nullable=False)
    name           = Column(Text, nullable=False)
    mode           = Column(String(10), nullable=False)  # 'reps' or 'time'

    # reps mode
    sets           = Column(Integer, nullable=True)
    reps           = Column(Text, nullable=True)  # free form: "10", "8-12", "AMRAP"

    # time mode
    time_value     = Column(Integer, nullable=True)
    time_unit      = Column(String(10), nullable=True)   # 'sec', 'min', 'hour'

    exercise_order = Column(Integer, nullable=False)
    created_at     = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at     = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)

    # Relationships
    section = relationship("Section", back_populates="exercises")

    __table_args__ = (
        UniqueConstraint('section_id', 'exercise_order', name='uq_exercises_section_order'),
        CheckConstraint("mode IN ('reps', 'time')", name='ck_exercises_mode'),
        CheckConstraint("time_unit IS NULL OR time_unit IN ('sec', 'min', 'hour')", name='ck_exercises_time_unit'),
        Index('idx_exercises_section_id', 'section_id'),
    )
