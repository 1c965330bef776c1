"""Quiz feature: session service, schemas, and API router."""

from .router import create_quiz_routers
from .schemas import (
    CategoryPayload,
    SessionCreated,
    SummaryPayload,
    WorkshopPayload,
)
from .service import DEFAULT_SESSION_ID, QuizManager, QuizSession, QuizSummary

__all__ = [
    "DEFAULT_SESSION_ID",
    "CategoryPayload",
    "QuizManager",
    "QuizSession",
    "QuizSummary",
    "SessionCreated",
    "SummaryPayload",
    "WorkshopPayload",
    "create_quiz_routers",
]
