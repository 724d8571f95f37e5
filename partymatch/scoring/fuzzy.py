"""
Tag normalization and fuzzy matching.

Category and vibe tags arrive from forms and backend rows in mixed case and
with either dashes, underscores or spaces ("High-Energy", "high_energy").
Everything is compared in a normalized form.
"""

import re

# Similarity levels, highest first
EXACT_MATCH_SCORE = 1.0
SUBSTRING_MATCH_SCORE = 0.8
TOKEN_OVERLAP_SCALE = 0.6  # Jaccard similarity is scaled down by this

_SEPARATORS = re.compile(r"[-_]")
_WHITESPACE = re.compile(r"\s+")


def normalize_tag(tag: str) -> str:
    """
    Return the canonical comparable form of a tag.

    Lower-cases, trims, turns every '-' or '_' into a space and collapses
    whitespace runs.

    Examples:
        >>> normalize_tag("  Small_Group ")
        'small group'
        >>> normalize_tag("high-energy")
        'high energy'
    """
    text = tag.lower().strip()
    text = _SEPARATORS.sub(" ", text)
    return _WHITESPACE.sub(" ", text)


def _tokens(normalized: str) -> set[str]:
    # A trailing separator leaves a trailing space; that is not a word.
    return {token for token in normalized.split(" ") if token}


def fuzzy_match(preferred: str, candidate: str) -> float:
    """
    Similarity between a preferred tag and a package tag, 0.0 to 1.0.

    Rules, first one that applies wins:
    - identical after normalization: 1.0
    - one contains the other: 0.8
    - shared words: Jaccard overlap of the word sets, scaled by 0.6
    - nothing in common: 0.0
    """
    a = normalize_tag(preferred)
    b = normalize_tag(candidate)

    if a == b:
        return EXACT_MATCH_SCORE

    if a in b or b in a:
        return SUBSTRING_MATCH_SCORE

    tokens_a = _tokens(a)
    tokens_b = _tokens(b)
    shared = tokens_a & tokens_b
    if not shared:
        return 0.0

    return (len(shared) / len(tokens_a | tokens_b)) * TOKEN_OVERLAP_SCALE
