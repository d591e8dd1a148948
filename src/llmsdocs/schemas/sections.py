"""Documentation section models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DocSection(BaseModel):
    """An addressable section of the documentation corpus.

    Attributes:
        title: Heading path. Sub-sections use "<parent> | <sub-heading>".
        content: Trimmed body text. Sub-section content starts with its
            own "## " heading line.
        path: Slug of the top-level heading, shared by its sub-sections.
        url: Source URL, reserved for callers that know it.
        category: Category label, reserved for callers that know it.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    content: str
    path: str | None = None
    url: str | None = None
    category: str | None = None
