"""Fuzzy search index and lookups over parsed documentation sections."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

from llmsdocs.fuzzy import match_lowercase
from llmsdocs.schemas import DocSection, SearchHit, SearchSettings

SEARCH_KEYS = ("title", "content", "path")

# Exact key matches still multiply in, so they must not collapse the product to 0.
_EXACT_KEY_SCORE = sys.float_info.epsilon


@dataclass(frozen=True)
class _IndexedField:
    """Lowercased field text and its length norm."""

    text: str
    norm: float


@dataclass(frozen=True)
class _IndexedRecord:
    position: int
    section: DocSection
    fields: tuple[_IndexedField, ...]


def field_norm(text: str) -> float:
    """Field length norm: 1/sqrt(word count), rounded to three decimals."""
    word_count = sum(1 for token in text.split(" ") if token)
    if not word_count:
        return 1.0
    return round(1 / word_count**0.5, 3)


class SearchIndex:
    """Read-only fuzzy index over section title, content and path.

    Built once from the final section list; never updated afterwards. Query
    methods only read the index, so concurrent readers need no locking.
    """

    def __init__(self, records: Sequence[_IndexedRecord], settings: SearchSettings) -> None:
        self._records = tuple(records)
        self._settings = settings
        self._key_weight = 1 / len(SEARCH_KEYS)

    @classmethod
    def build(cls, sections: Iterable[DocSection], settings: SearchSettings) -> "SearchIndex":
        """Index the given sections without reordering or modifying them."""
        records = []
        for position, section in enumerate(sections):
            fields = []
            for key in SEARCH_KEYS:
                value = getattr(section, key) or ""
                fields.append(_IndexedField(text=value.lower(), norm=field_norm(value)))
            records.append(_IndexedRecord(position=position, section=section, fields=tuple(fields)))
        return cls(records, settings)

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    def __len__(self) -> int:
        return len(self._records)

    def search(self, query: str, limit: int) -> list[SearchHit]:
        """Return up to ``limit`` sections matching ``query``, best first.

        A section matches when at least one of its keys clears the fuzzy
        threshold. Key scores combine as a weighted, length-normalised
        product, so a section matching in several short fields outranks one
        matching in a single long field. Equal scores keep document order.
        """
        if limit <= 0 or not query:
            return []

        needle = query.lower()
        scored: list[tuple[float, int, DocSection]] = []
        for record in self._records:
            score = self._score_record(needle, record)
            if score is not None:
                scored.append((score, record.position, record.section))

        scored.sort(key=lambda item: (item[0], item[1]))
        return [SearchHit(section=section, score=score) for score, _, section in scored[:limit]]

    def _score_record(self, needle: str, record: _IndexedRecord) -> float | None:
        total = 1.0
        matched = False
        for field in record.fields:
            if not field.text:
                continue
            score = match_lowercase(
                needle,
                field.text,
                threshold=self._settings.threshold,
                min_match_char_length=self._settings.min_match_char_length,
            )
            if score is None:
                continue
            matched = True
            base = _EXACT_KEY_SCORE if score == 0 else score
            total *= base ** (self._key_weight * field.norm)
        return total if matched else None


def _contains(haystack: str | None, needle: str) -> bool:
    return bool(haystack) and needle in haystack.lower()


def find_by_identifier(sections: Iterable[DocSection], identifier: str) -> DocSection | None:
    """Return the first section whose title or path contains ``identifier``.

    Case-insensitive substring containment, not fuzzy matching.
    """
    needle = identifier.lower()
    for section in sections:
        if _contains(section.title, needle) or _contains(section.path, needle):
            return section
    return None


def filter_by_category(
    sections: Iterable[DocSection], category: str | None = None
) -> list[DocSection]:
    """Return sections whose path or title contains ``category``.

    All sections are returned, in order, when ``category`` is empty or None.
    """
    if not category:
        return list(sections)
    needle = category.lower()
    return [
        section
        for section in sections
        if _contains(section.path, needle) or _contains(section.title, needle)
    ]
