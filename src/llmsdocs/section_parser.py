"""Split a flat llms-full.txt style document into addressable sections."""

from __future__ import annotations

import re

from llmsdocs.schemas import DocSection

TOP_LEVEL_PREFIX = "# "
SUB_HEADING_PREFIX = "## "
TITLE_SEPARATOR = " | "

_WHITESPACE_RE = re.compile(r"\s+")


def slugify_heading(text: str) -> str:
    """Turn heading text into a lowercase, underscore separated path."""
    return _WHITESPACE_RE.sub("_", text.strip()).lower()


def is_top_level_heading(line: str) -> bool:
    """Return True for "# " lines; "## " and "### " lines are not top-level."""
    return line.startswith(TOP_LEVEL_PREFIX)


def is_sub_heading(line: str) -> bool:
    """Return True for "## " lines. "### " and deeper stay body text."""
    return line.startswith(SUB_HEADING_PREFIX)


def parse_sections(text: str) -> list[DocSection]:
    """Parse document text into sections in document order.

    Top-level headings open a section whose path is the heading slug.
    Sub-headings open a nested section titled "<parent> | <sub-heading>"
    that shares the parent's path and keeps its heading line as the first
    line of its content. Lines before the first top-level heading are
    dropped, as is any section whose trimmed content is empty.
    """
    sections: list[DocSection] = []
    parent_title: str | None = None
    parent_path: str | None = None
    open_title: str | None = None
    buffer: list[str] = []

    def flush() -> None:
        if open_title is None or not buffer:
            return
        content = "\n".join(buffer).strip()
        if content:
            sections.append(DocSection(title=open_title, content=content, path=parent_path))

    for line in text.split("\n"):
        if is_top_level_heading(line):
            flush()
            heading = line[len(TOP_LEVEL_PREFIX):]
            parent_title = heading.strip()
            parent_path = slugify_heading(heading)
            open_title = parent_title
            buffer = []
        elif is_sub_heading(line) and parent_title is not None:
            flush()
            sub_title = line[len(SUB_HEADING_PREFIX):].strip()
            open_title = f"{parent_title}{TITLE_SEPARATOR}{sub_title}"
            buffer = [line]
        elif parent_title is not None:
            buffer.append(line)

    flush()
    return sections
