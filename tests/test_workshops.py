from __future__ import annotations

from growthcompass.core.workshops import DEFAULT_WORKSHOPS, INTEREST_AREAS, WORKSHOPS, recommend_workshop


def test_learning_style_argument_does_not_filter() -> None:
    visual = recommend_workshop("Finance", "Visual")
    kinesthetic = recommend_workshop("Finance", "Kinesthetic")

    assert visual == kinesthetic
    assert visual == {
        "Visual": "Financial Modeling & Visualization",
        "Auditory": "Market Trends: Economic Insights",
        "Reading/Writing": "Investment Research & Reports",
        "Kinesthetic": "Budgeting Bootcamp: Practical Finance Tools",
    }


def test_unknown_area_falls_back_to_default_table() -> None:
    assert recommend_workshop("NotARealArea", "anything") == {
        "Visual": "General Skill-Building Workshop",
        "Auditory": "Career Development Seminars",
        "Reading/Writing": "Self-Help Literature Recommendations",
        "Kinesthetic": "Experiential Learning Activities",
    }
    assert recommend_workshop("finance", "Visual") == dict(DEFAULT_WORKSHOPS)


def test_table_covers_all_areas_with_four_styles() -> None:
    assert INTEREST_AREAS == (
        "Admin",
        "Commercial",
        "Corporate Communications",
        "Engineering",
        "Finance",
        "HSS SEA",
        "Human Resource",
        "Infocomm Technology",
        "Logistics",
        "Marketing",
        "Procurement",
    )
    for area in INTEREST_AREAS:
        assert list(WORKSHOPS[area]) == ["Visual", "Auditory", "Reading/Writing", "Kinesthetic"]
    assert recommend_workshop("HSS SEA", "")["Visual"] == "3D Modeling of Surveillance Systems"


def test_result_is_a_fresh_copy() -> None:
    first = recommend_workshop("Admin", "Visual")
    first["Visual"] = "changed"

    assert recommend_workshop("Admin", "Visual")["Visual"] == "Digital Tools for Administrative Efficiency"
