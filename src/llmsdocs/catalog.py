"""The loaded documentation catalog passed to every query."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from llmsdocs.schemas import DocSection, SearchHit, SearchSettings
from llmsdocs.search_index import SearchIndex, filter_by_category, find_by_identifier


@dataclass(frozen=True)
class DocsCatalog:
    """Sections of one corpus plus the search index built over them.

    A catalog is built once at startup and never changes. When the corpus
    could not be loaded the catalog has no index and ``loaded`` is False for
    the rest of the process lifetime.

    Attributes:
        source: Path or URL the corpus was read from, if any.
        sections: Parsed sections in document order.
        index: Fuzzy index over ``sections``; None when unloaded.
    """

    source: str | None = None
    sections: tuple[DocSection, ...] = field(default_factory=tuple)
    index: SearchIndex | None = None

    @classmethod
    def unloaded(cls, source: str | None = None) -> "DocsCatalog":
        return cls(source=source)

    @classmethod
    def from_sections(
        cls,
        sections: Iterable[DocSection],
        settings: SearchSettings,
        *,
        source: str | None = None,
    ) -> "DocsCatalog":
        ordered = tuple(sections)
        return cls(source=source, sections=ordered, index=SearchIndex.build(ordered, settings))

    @property
    def loaded(self) -> bool:
        return self.index is not None

    def search(self, query: str, limit: int) -> list[SearchHit] | None:
        """Fuzzy search; returns None when unloaded, [] when nothing matches."""
        if self.index is None:
            return None
        return self.index.search(query, limit)

    def get_section(self, identifier: str) -> DocSection | None:
        return find_by_identifier(self.sections, identifier)

    def list_sections(self, category: str | None = None) -> list[DocSection]:
        return filter_by_category(self.sections, category)
