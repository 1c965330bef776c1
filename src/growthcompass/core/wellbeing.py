"""Well-being quiz scoring.

Questions 6-9 each feed one category.  The answered option (1-4) is added to
that category's score, and the score picks one of three canned
recommendations.

Two naming tables exist: ``display_name`` is used inside the
recommendation text, ``SUMMARY_LABELS`` keys the summary payload.  They
disagree on the second category ("Work Problems" vs "Conflict Handling") and
front-end consumers depend on both strings exactly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .errors import InvalidOptionError, OutOfRangeError

__all__ = [
    "FIRST_QUESTION",
    "LAST_QUESTION",
    "SUMMARY_LABELS",
    "CategoryResult",
    "WellbeingCategory",
    "WellbeingState",
    "display_name",
    "recommendation_for",
]

FIRST_QUESTION = 6
LAST_QUESTION = 9
MIN_OPTION = 1
MAX_OPTION = 4

GREAT_THRESHOLD = 3
WELL_THRESHOLD = 2


class WellbeingCategory(IntEnum):
    STRESS_MANAGEMENT = 0
    WORK_PROBLEMS = 1
    STRESS_LEVELS = 2
    WORK_SATISFACTION = 3


_DISPLAY_NAMES = {
    WellbeingCategory.STRESS_MANAGEMENT: "Stress Management",
    WellbeingCategory.WORK_PROBLEMS: "Work Problems",
    WellbeingCategory.STRESS_LEVELS: "Stress Levels",
    WellbeingCategory.WORK_SATISFACTION: "Work Satisfaction",
}

SUMMARY_LABELS: dict[WellbeingCategory, str] = {
    WellbeingCategory.STRESS_MANAGEMENT: "Stress Management",
    WellbeingCategory.WORK_PROBLEMS: "Conflict Handling",
    WellbeingCategory.STRESS_LEVELS: "Stress Levels",
    WellbeingCategory.WORK_SATISFACTION: "Work Satisfaction",
}

CATEGORY_COUNT = len(WellbeingCategory)


def display_name(index: int) -> str:
    try:
        return _DISPLAY_NAMES[WellbeingCategory(index)]
    except ValueError:
        return "Unknown Category"


def recommendation_for(index: int, score: int) -> str:
    name = display_name(index)
    if score >= GREAT_THRESHOLD:
        return f"You're doing great in {name}! Keep up the good work."
    if score >= WELL_THRESHOLD:
        return f"You're doing well in {name}, but there's room for improvement."
    return f"You may want to focus on improving your {name}. Consider seeking resources for help."


@dataclass(frozen=True)
class CategoryResult:
    category: WellbeingCategory
    score: int
    recommendation: str

    @property
    def label(self) -> str:
        return SUMMARY_LABELS[self.category]


def _zero_scores() -> list[int]:
    return [0] * CATEGORY_COUNT


@dataclass
class WellbeingState:
    scores: list[int] = field(default_factory=_zero_scores)
    next_question: int = FIRST_QUESTION

    def record(self, option: int) -> None:
        if not (FIRST_QUESTION <= self.next_question <= LAST_QUESTION):
            raise OutOfRangeError(
                "well-being question",
                f"Well-being question count out of range ({FIRST_QUESTION}-{LAST_QUESTION}).",
            )
        if not (MIN_OPTION <= option <= MAX_OPTION):
            raise InvalidOptionError(
                "well-being option",
                f"Well-being option must be between {MIN_OPTION} and {MAX_OPTION}.",
            )
        self.scores[self.next_question - FIRST_QUESTION] += option
        self.next_question += 1

    def results(self) -> list[CategoryResult]:
        return [
            CategoryResult(
                category=category,
                score=self.scores[category],
                recommendation=recommendation_for(category, self.scores[category]),
            )
            for category in WellbeingCategory
        ]

    def reset(self) -> None:
        self.scores = _zero_scores()
        self.next_question = FIRST_QUESTION

    @property
    def is_pristine(self) -> bool:
        return self.next_question == FIRST_QUESTION and not any(self.scores)
