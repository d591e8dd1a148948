"""Render query results as plain text tool replies."""

from __future__ import annotations

from typing import Sequence

from llmsdocs.schemas import DocSection, SearchHit

NOT_LOADED_MESSAGE = "Documentation not loaded. Please check the file path."
RESULT_SEPARATOR = "\n---\n"


def truncate_preview(content: str, length: int) -> str:
    """First ``length`` characters of ``content``, with "..." when cut."""
    if len(content) <= length:
        return content
    return content[:length] + "..."


def format_search_results(
    query: str,
    hits: Sequence[SearchHit] | None,
    *,
    preview_length: int,
) -> str:
    """Numbered title and preview blocks, or a not-loaded / no-results line."""
    if hits is None:
        return NOT_LOADED_MESSAGE
    if not hits:
        return f'No results found for query: "{query}"'

    blocks = []
    for number, hit in enumerate(hits, start=1):
        preview = truncate_preview(hit.section.content, preview_length)
        blocks.append(f"{number}. **{hit.section.title}**\n{preview}\n")
    return RESULT_SEPARATOR.join(blocks)


def format_section(identifier: str, section: DocSection | None) -> str:
    """Full title and content of a section, or a not-found line."""
    if section is None:
        return f'Section not found: "{identifier}"'
    return f"# {section.title}\n\n{section.content}"


def format_section_list(
    sections: Sequence[DocSection],
    *,
    category: str | None,
    max_sections: int,
) -> str:
    """Bulleted titles, capped at ``max_sections``, plus the full match count."""
    header = "Available sections"
    if category:
        header += f" (filtered by: {category})"
    listing = "\n".join(f"- {section.title}" for section in sections[:max_sections])
    return f"{header}:\n\n{listing}\n\nTotal: {len(sections)} sections"
