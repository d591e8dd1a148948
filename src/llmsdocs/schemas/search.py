"""Search result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from llmsdocs.schemas.sections import DocSection


class SearchHit(BaseModel):
    """A section matched by a fuzzy search.

    ``score`` runs from 0.0 (exact match) to 1.0 (no match); lower is better.
    """

    model_config = ConfigDict(frozen=True)

    section: DocSection
    score: float = Field(..., ge=0.0, le=1.0)
