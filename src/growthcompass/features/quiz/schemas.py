from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "CategoryPayload",
    "SessionCreated",
    "SummaryPayload",
    "WorkshopPayload",
]


class _APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SessionCreated(_APIModel):
    session: str


class CategoryPayload(_APIModel):
    score: int = Field(..., alias="Score")
    recommendation: str = Field(..., alias="Recommendation")


class SummaryPayload(_APIModel):
    learning_style: list[float] = Field(..., alias="learningStyle")
    wellbeing_results: dict[str, CategoryPayload] = Field(..., alias="wellbeingResults")


class WorkshopPayload(_APIModel):
    visual: str = Field(..., alias="Visual")
    auditory: str = Field(..., alias="Auditory")
    reading_writing: str = Field(..., alias="Reading/Writing")
    kinesthetic: str = Field(..., alias="Kinesthetic")
