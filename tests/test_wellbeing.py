from __future__ import annotations

import pytest

from growthcompass.core.errors import InvalidOptionError, OutOfRangeError
from growthcompass.core.wellbeing import (
    SUMMARY_LABELS,
    WellbeingCategory,
    WellbeingState,
    display_name,
    recommendation_for,
)


def test_option_value_is_added_to_the_current_category() -> None:
    state = WellbeingState()
    for option in (4, 2, 1, 3):
        state.record(option)

    assert state.scores == [4, 2, 1, 3]
    assert state.next_question == 10


def test_fifth_answer_is_out_of_range() -> None:
    state = WellbeingState()
    for option in (1, 1, 1, 1):
        state.record(option)

    with pytest.raises(OutOfRangeError) as excinfo:
        state.record(2)

    assert excinfo.value.subject == "well-being question"
    assert str(excinfo.value) == "Well-being question count out of range (6-9)."
    assert state.scores == [1, 1, 1, 1]


def test_invalid_option_leaves_cursor_in_place() -> None:
    state = WellbeingState()

    with pytest.raises(InvalidOptionError) as excinfo:
        state.record(5)

    assert excinfo.value.subject == "well-being option"
    assert str(excinfo.value) == "Well-being option must be between 1 and 4."
    assert state.is_pristine


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (4, "You're doing great in Stress Levels! Keep up the good work."),
        (3, "You're doing great in Stress Levels! Keep up the good work."),
        (2, "You're doing well in Stress Levels, but there's room for improvement."),
        (1, "You may want to focus on improving your Stress Levels. Consider seeking resources for help."),
        (0, "You may want to focus on improving your Stress Levels. Consider seeking resources for help."),
        (-1, "You may want to focus on improving your Stress Levels. Consider seeking resources for help."),
    ],
)
def test_recommendation_thresholds(score: int, expected: str) -> None:
    assert recommendation_for(WellbeingCategory.STRESS_LEVELS, score) == expected


def test_display_names_and_summary_labels_differ_for_conflict_handling() -> None:
    assert [display_name(idx) for idx in range(4)] == [
        "Stress Management",
        "Work Problems",
        "Stress Levels",
        "Work Satisfaction",
    ]
    assert list(SUMMARY_LABELS.values()) == [
        "Stress Management",
        "Conflict Handling",
        "Stress Levels",
        "Work Satisfaction",
    ]
    assert display_name(7) == "Unknown Category"


def test_results_use_display_name_in_text_and_label_as_key() -> None:
    state = WellbeingState()
    state.record(1)
    state.record(2)

    results = state.results()

    conflict = results[WellbeingCategory.WORK_PROBLEMS]
    assert conflict.label == "Conflict Handling"
    assert conflict.score == 2
    assert conflict.recommendation == "You're doing well in Work Problems, but there's room for improvement."
    assert results[WellbeingCategory.WORK_SATISFACTION].score == 0
