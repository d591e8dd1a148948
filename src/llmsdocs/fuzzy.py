"""Approximate substring matching (Bitap with k errors)."""

from __future__ import annotations

import math
from functools import partial
from typing import Final, Iterator

# Non-exact matches never score below this, so only true substrings rank as 0.
MIN_FUZZY_SCORE: Final[float] = 0.001


def fuzzy_match(
    pattern: str,
    text: str,
    *,
    threshold: float,
    min_match_char_length: int = 1,
) -> float | None:
    """Score how well ``pattern`` matches anywhere inside ``text``.

    Matching is case-insensitive and ignores where in the text the match
    occurs. The score is the fraction of pattern characters that had to be
    edited (inserted, deleted or substituted), so 0.0 means the pattern is
    a literal substring.

    Args:
        pattern: The search pattern.
        text: The text to search in.
        threshold: Highest accepted score in the range 0.0 to 1.0.
        min_match_char_length: A match counts only if the matched window
            contains a run of at least this many characters that occur in
            the pattern.

    Returns:
        The score of the best match, or None if nothing clears the threshold.
    """
    return match_lowercase(
        pattern.lower(),
        text.lower(),
        threshold=threshold,
        min_match_char_length=min_match_char_length,
    )


def match_lowercase(
    pattern: str,
    text: str,
    *,
    threshold: float,
    min_match_char_length: int = 1,
) -> float | None:
    """Same as :func:`fuzzy_match` for a pattern and text already lowercased."""
    pattern_len = len(pattern)

    if not pattern_len:
        return 0.0 if not text else None
    if pattern_len < min_match_char_length:
        return None
    if pattern in text:
        return 0.0

    max_errors = min(math.floor(threshold * pattern_len), pattern_len - 1)
    if max_errors < 1:
        return None

    alphabet = frozenset(pattern)
    best: int | None = None
    for start, stop in candidate_windows(pattern, text, max_errors):
        window = text[start:stop]
        errors = _bitap_search(
            pattern,
            window,
            max_errors=max_errors if best is None else best - 1,
            accept=partial(_has_alphabet_run, window, pattern_len, alphabet, min_match_char_length),
        )
        if errors is not None:
            best = errors
            if best == 1:
                break

    if best is None:
        return None

    score = max(best / pattern_len, MIN_FUZZY_SCORE)
    return score if score <= threshold else None


def candidate_windows(pattern: str, text: str, max_errors: int) -> Iterator[tuple[int, int]]:
    """Yield sorted, disjoint ``(start, stop)`` slices of ``text`` that may hold a match.

    The pattern is cut into ``max_errors + 1`` pieces. A match with at most
    ``max_errors`` edits leaves at least one piece intact, so only text
    around an exact piece occurrence needs the full scan. Each slice also
    covers the lookbehind of the alphabet-run check.
    """
    pattern_len = len(pattern)
    piece_len = pattern_len // (max_errors + 1)
    reach = pattern_len + max_errors
    text_len = len(text)

    spans: list[tuple[int, int]] = []
    for index in range(max_errors + 1):
        offset = index * piece_len
        piece = pattern[offset : offset + piece_len]
        found = text.find(piece)
        while found != -1:
            anchor = found - offset
            spans.append((max(0, anchor - max_errors - reach), min(text_len, anchor + reach)))
            found = text.find(piece, found + 1)

    if not spans:
        return

    spans.sort()
    start, stop = spans[0]
    for next_start, next_stop in spans[1:]:
        if next_start <= stop:
            stop = max(stop, next_stop)
        else:
            yield start, stop
            start, stop = next_start, next_stop
    yield start, stop


def _bitap_search(pattern, text, *, max_errors, accept) -> int | None:
    """Return the fewest edits with which ``pattern`` occurs in ``text``.

    Shift-and over Python ints: bit ``i`` of ``rows[d]`` is set when the
    first ``i + 1`` pattern characters match a suffix of the text read so
    far with at most ``d`` edits.
    """
    if max_errors < 1:
        return None

    pattern_len = len(pattern)
    full_mask = (1 << pattern_len) - 1
    match_bit = 1 << (pattern_len - 1)

    char_masks: dict[str, int] = {}
    for index, char in enumerate(pattern):
        char_masks[char] = char_masks.get(char, 0) | (1 << index)

    rows = [(1 << errs) - 1 for errs in range(max_errors + 1)]
    best: int | None = None

    for end, char in enumerate(text):
        char_mask = char_masks.get(char, 0)
        previous_old = rows[0]
        rows[0] = ((previous_old << 1) | 1) & char_mask
        limit = max_errors if best is None else best - 1

        for errs in range(1, limit + 1):
            old = rows[errs]
            rows[errs] = (
                (((old << 1) | 1) & char_mask)
                | previous_old
                | ((previous_old << 1) | 1)
                | ((rows[errs - 1] << 1) | 1)
            ) & full_mask
            previous_old = old

        for errs in range(1, limit + 1):
            if rows[errs] & match_bit and accept(end, errs):
                best = errs
                break

        if best == 1:
            break

    return best


def _has_alphabet_run(
    text: str, pattern_len: int, alphabet: frozenset[str], min_run: int, end: int, errs: int
) -> bool:
    window = text[max(0, end - pattern_len - errs + 1) : end + 1]
    return _longest_alphabet_run(window, alphabet) >= min_run


def _longest_alphabet_run(window: str, alphabet: frozenset[str]) -> int:
    longest = current = 0
    for char in window:
        if char in alphabet:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest
