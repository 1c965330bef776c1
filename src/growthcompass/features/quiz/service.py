from __future__ import annotations

import logging
import secrets
import string
import threading
from dataclasses import dataclass, field

from ...core.learning_style import LearningStyleResult, LearningStyleState
from ...core.wellbeing import CategoryResult, WellbeingState
from ...core.workshops import recommend_workshop
from .concurrency import run_blocking
from .schemas import CategoryPayload, SummaryPayload, WorkshopPayload

__all__ = [
    "DEFAULT_SESSION_ID",
    "QuizManager",
    "QuizSession",
    "QuizSummary",
    "_summary_payload",
]

logger = logging.getLogger(__name__)

# Backs the legacy routes, which only ever knew one process-wide session.
DEFAULT_SESSION_ID = "default"


@dataclass(frozen=True)
class QuizSummary:
    learning_style: LearningStyleResult
    wellbeing: list[CategoryResult]


@dataclass
class QuizSession:
    """Answer state for one quiz taker.

    A session collects answers until :meth:`summarize` is called, which
    computes the results and returns the session to its initial state.
    ``passes`` counts completed summaries.
    """

    learning_style: LearningStyleState = field(default_factory=LearningStyleState)
    wellbeing: WellbeingState = field(default_factory=WellbeingState)
    passes: int = 0

    def submit_learning_style(self, option: int) -> None:
        self.learning_style.record(option)

    def submit_wellbeing(self, option: int) -> None:
        self.wellbeing.record(option)

    def summarize(self) -> QuizSummary:
        summary = QuizSummary(
            learning_style=self.learning_style.result(),
            wellbeing=self.wellbeing.results(),
        )
        self.reset()
        self.passes += 1
        return summary

    def reset(self) -> None:
        self.learning_style.reset()
        self.wellbeing.reset()

    @property
    def is_pristine(self) -> bool:
        return self.learning_style.is_pristine and self.wellbeing.is_pristine


class QuizManager:
    """Owns quiz sessions independent of the HTTP layer."""

    def __init__(self) -> None:
        self._sessions: dict[str, QuizSession] = {DEFAULT_SESSION_ID: QuizSession()}
        self._lock = threading.Lock()

    def create_session(self) -> str:
        session_id = _sid()
        with self._lock:
            while session_id in self._sessions:
                session_id = _sid()
            self._sessions[session_id] = QuizSession()
        logger.debug("quiz session created", extra={"session_id": session_id})
        return session_id

    async def create_session_async(self) -> str:
        return await run_blocking(self.create_session)

    def discard_session(self, session_id: str) -> None:
        if session_id == DEFAULT_SESSION_ID:
            raise ValueError("the shared session cannot be discarded")
        with self._lock:
            self._require_session(session_id)
            del self._sessions[session_id]
        logger.debug("quiz session discarded", extra={"session_id": session_id})

    async def discard_session_async(self, session_id: str) -> None:
        await run_blocking(self.discard_session, session_id)

    def submit_learning_style(self, session_id: str, option: int) -> None:
        with self._lock:
            state = self._require_session(session_id)
            try:
                state.submit_learning_style(option)
            except ValueError:
                logger.warning(
                    "learning-style answer rejected",
                    extra={"session_id": session_id, "option": option},
                )
                raise

    async def submit_learning_style_async(self, session_id: str, option: int) -> None:
        await run_blocking(self.submit_learning_style, session_id, option)

    def submit_wellbeing(self, session_id: str, option: int) -> None:
        with self._lock:
            state = self._require_session(session_id)
            try:
                state.submit_wellbeing(option)
            except ValueError:
                logger.warning(
                    "well-being answer rejected",
                    extra={"session_id": session_id, "option": option},
                )
                raise

    async def submit_wellbeing_async(self, session_id: str, option: int) -> None:
        await run_blocking(self.submit_wellbeing, session_id, option)

    def summary(self, session_id: str) -> SummaryPayload:
        with self._lock:
            state = self._require_session(session_id)
            summary = state.summarize()
            passes = state.passes
        logger.debug("quiz summary issued", extra={"session_id": session_id, "passes": passes})
        return _summary_payload(summary)

    async def summary_async(self, session_id: str) -> SummaryPayload:
        return await run_blocking(self.summary, session_id)

    def recommendation(self, interest_area: str, learning_style: str) -> WorkshopPayload:
        return WorkshopPayload.model_validate(recommend_workshop(interest_area, learning_style))

    def _require_session(self, session_id: str) -> QuizSession:
        state = self._sessions.get(session_id)
        if state is None:
            raise KeyError(f"session '{session_id}' not found")
        return state


def _sid(length: int = 10) -> str:
    alphabet = string.ascii_lowercase + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def _summary_payload(summary: QuizSummary) -> SummaryPayload:
    return SummaryPayload(
        learning_style=summary.learning_style.as_vector(),
        wellbeing_results={
            result.label: CategoryPayload(score=result.score, recommendation=result.recommendation)
            for result in summary.wellbeing
        },
    )
