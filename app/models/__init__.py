# models/__init__.py
"""
Pydantic models for request/response validation
"""

from .auth_models import (
    RegisterRequest,
    LoginRequest,
    UserOut,
    AuthResponse,
    ErrorResponse,
)

from .plan import (
    PlanCreate,
    PlanRename,
    Plan,
)

from .day import (
    DayCreate,
    DayRename,
    Section,
    Day,
    DayWithSections,
)

from .exercise import (
    ExerciseFields,
    ExerciseCreate,
    ExerciseUpdate,
    Exercise,
)

__all__ = [
    # Auth
    "RegisterRequest",
    "LoginRequest",
    "UserOut",
    "AuthResponse",
    "ErrorResponse",

    # Plan
    "PlanCreate",
    "PlanRename",
    "Plan",

    # Day / Section
    "DayCreate",
    "DayRename",
    "Section",
    "Day",
    "DayWithSections",

    # Exercise
    "ExerciseFields",
    "ExerciseCreate",
    "ExerciseUpdate",
    "Exercise",
]
