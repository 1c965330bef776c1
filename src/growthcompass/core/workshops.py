"""Workshop titles per interest area, one per learning style."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

__all__ = ["DEFAULT_WORKSHOPS", "INTEREST_AREAS", "WORKSHOPS", "recommend_workshop"]

_STYLE_KEYS: Final = ("Visual", "Auditory", "Reading/Writing", "Kinesthetic")


def _row(visual: str, auditory: str, reading_writing: str, kinesthetic: str) -> dict[str, str]:
    return dict(zip(_STYLE_KEYS, (visual, auditory, reading_writing, kinesthetic), strict=True))


WORKSHOPS: Final[Mapping[str, Mapping[str, str]]] = {
    "Admin": _row(
        "Digital Tools for Administrative Efficiency",
        "Effective Communication for Administrative Roles",
        "Documentation Best Practices",
        "Practical Time Management Techniques",
    ),
    "Commercial": _row(
        "Data Visualization for Business Decisions",
        "Sales Pitch Masterclass",
        "Market Analysis Reports",
        "Negotiation Skills Workshop",
    ),
    "Corporate Communications": _row(
        "Visual Storytelling for Corporate Branding",
        "Crisis Communication: Live Simulation",
        "Crafting Effective Press Releases",
        "Public Speaking and Presentation Skills",
    ),
    "Engineering": _row(
        "Blueprint Reading & Design Interpretation",
        "Engineering Podcasts and Seminars",
        "Technical Documentation Writing",
        "Hands-On Prototyping Workshop",
    ),
    "Finance": _row(
        "Financial Modeling & Visualization",
        "Market Trends: Economic Insights",
        "Investment Research & Reports",
        "Budgeting Bootcamp: Practical Finance Tools",
    ),
    "HSS SEA": _row(
        "3D Modeling of Surveillance Systems",
        "System Security Workshops",
        "Security Protocol Documentation",
        "System Installation and Maintenance",
    ),
    "Human Resource": _row(
        "HR Analytics for Talent Management",
        "Leadership & Conflict Resolution",
        "Policy Writing & Employee Handbook Development",
        "Team-Building and Leadership Skills",
    ),
    "Infocomm Technology": _row(
        "Data Visualization for Developers",
        "Technology Trends Roundtable Discussions",
        "Technical Paper Reviews",
        "Software Development Practices Workshop",
    ),
    "Logistics": _row(
        "Supply Chain Management Tools",
        "Logistics Podcast Series",
        "Logistics Process Documentation",
        "Hands-On Supply Chain Management Exercises",
    ),
    "Marketing": _row(
        "Branding and Graphic Design",
        "Marketing Strategies for Business Growth",
        "Content Creation for Marketing",
        "Social Media Engagement Practices",
    ),
    "Procurement": _row(
        "Visual Analytics for Procurement",
        "Supplier Communication Workshops",
        "Contract Management Resources",
        "Hands-On Procurement Exercises",
    ),
}

DEFAULT_WORKSHOPS: Final[Mapping[str, str]] = _row(
    "General Skill-Building Workshop",
    "Career Development Seminars",
    "Self-Help Literature Recommendations",
    "Experiential Learning Activities",
)

INTEREST_AREAS: Final = tuple(WORKSHOPS)


def recommend_workshop(interest_area: str, learning_style: str) -> dict[str, str]:
    """Return the four workshop titles for ``interest_area``.

    ``learning_style`` does not filter the result: every style's title is
    returned.  Unknown areas (matched exactly, case-sensitive) fall back to
    :data:`DEFAULT_WORKSHOPS`.
    """

    row = WORKSHOPS.get(interest_area, DEFAULT_WORKSHOPS)
    return dict(row)
