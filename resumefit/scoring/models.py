"""Relevance scores for profile entries against one job."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

Score = Annotated[float, Field(ge=0.0, le=100.0)]


class RelevanceMap(BaseModel):
    """Per-entry relevance in [0, 100] plus an overall match percentage.

    ``experiences`` and ``projects`` are keyed by entry id, ``skills`` by the
    skill token as written in the profile.
    """

    model_config = ConfigDict(frozen=True)

    experiences: dict[str, Score] = Field(default_factory=dict)
    projects: dict[str, Score] = Field(default_factory=dict)
    skills: dict[str, Score] = Field(default_factory=dict)
    overall_match: Annotated[int, Field(ge=0, le=100)] = 0

    def experience_score(self, entry_id: str) -> float:
        return self.experiences.get(entry_id, 0.0)

    def project_score(self, entry_id: str) -> float:
        return self.projects.get(entry_id, 0.0)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RelevanceMap:
        """Deserialize from dictionary."""
        return cls.model_validate(data)
