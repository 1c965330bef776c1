from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from .errors import InvalidOptionError, OutOfRangeError

__all__ = [
    "FIRST_QUESTION",
    "LAST_QUESTION",
    "LearningStyle",
    "LearningStyleResult",
    "LearningStyleState",
    "dominant_style",
    "percentage_breakdown",
]

FIRST_QUESTION = 1
LAST_QUESTION = 5
MIN_OPTION = 1
MAX_OPTION = 4

# Returned verbatim when no answers were collected.
EVEN_SPLIT: tuple[float, float, float, float] = (25.0, 25.0, 25.0, 25.0)


class LearningStyle(IntEnum):
    VISUAL = 0
    AUDITORY = 1
    READING_WRITING = 2
    KINESTHETIC = 3

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    LearningStyle.VISUAL: "Visual",
    LearningStyle.AUDITORY: "Auditory",
    LearningStyle.READING_WRITING: "Reading/Writing",
    LearningStyle.KINESTHETIC: "Kinesthetic",
}

STYLE_COUNT = len(LearningStyle)


def _zero_counters() -> list[float]:
    return [0.0] * STYLE_COUNT


def dominant_style(counters: Sequence[float]) -> int:
    """Return the 1-indexed style with the highest count.

    Ties resolve to the lowest index, so all-zero counters report style 1.
    """

    max_index = 0
    for idx in range(1, len(counters)):
        if counters[idx] > counters[max_index]:
            max_index = idx
    return max_index + 1


def percentage_breakdown(counters: Sequence[float]) -> tuple[float, ...]:
    total = float(sum(counters))
    if total == 0:
        return EVEN_SPLIT
    return tuple(float(count) / total * 100 for count in counters)


@dataclass(frozen=True)
class LearningStyleResult:
    dominant: int
    breakdown: tuple[float, ...]

    @property
    def dominant_style(self) -> LearningStyle:
        return LearningStyle(self.dominant - 1)

    def as_vector(self) -> list[float]:
        """Wire shape: ``[dominant, pct_visual, pct_auditory, pct_rw, pct_kinesthetic]``."""

        return [float(self.dominant), *self.breakdown]


@dataclass
class LearningStyleState:
    counters: list[float] = field(default_factory=_zero_counters)
    next_question: int = FIRST_QUESTION

    def record(self, option: int) -> None:
        if not (FIRST_QUESTION <= self.next_question <= LAST_QUESTION):
            raise OutOfRangeError(
                "learning-style question",
                f"Learning style question count out of range ({FIRST_QUESTION}-{LAST_QUESTION}).",
            )
        if not (MIN_OPTION <= option <= MAX_OPTION):
            raise InvalidOptionError(
                "learning-style option",
                f"Learning style option must be between {MIN_OPTION} and {MAX_OPTION}.",
            )
        self.counters[option - 1] += 1
        self.next_question += 1

    def result(self) -> LearningStyleResult:
        return LearningStyleResult(
            dominant=dominant_style(self.counters),
            breakdown=percentage_breakdown(self.counters),
        )

    def reset(self) -> None:
        self.counters = _zero_counters()
        self.next_question = FIRST_QUESTION

    @property
    def is_pristine(self) -> bool:
        return self.next_question == FIRST_QUESTION and not any(self.counters)
