"""
Similarity scoring for typo-tolerant filename matching.

The fuzzy score blends three independent measures, each normalized to
[0.0, 1.0]:

- edit distance (Levenshtein), which tolerates substitutions and swaps,
- in-order subsequence coverage, which rewards abbreviations such as
  ``mn`` for ``main``,
- bigram overlap, which rewards shared fragments regardless of position.

Every component is bounded by construction, so the combined score is always
a finite number in [0.0, 1.0] and ranking can use a plain total order.
"""

from typing import Set

from rapidfuzz.distance import Levenshtein

from .case_policy import fold_case


LEVENSHTEIN_WEIGHT = 0.4
SUBSEQUENCE_WEIGHT = 0.4
NGRAM_WEIGHT = 0.2

# Combined scores below this are treated as non-matches
MIN_FUZZY_SCORE = 0.3

# Substring matches score within [SUBSTRING_BASE - SUBSTRING_SPREAD, SUBSTRING_BASE]
SUBSTRING_BASE = 0.9
SUBSTRING_SPREAD = 0.1

NGRAM_SIZE = 2


def fuzzy_score(filename: str, query: str, case_sensitive: bool) -> float:
    """
    Score how likely ``filename`` is what the user meant by ``query``.

    Args:
        filename: Filename to score (not a full path)
        query: Query text as typed by the user
        case_sensitive: Whether comparisons respect case

    Returns:
        1.0 for an exact match, 0.8 to 0.9 when the query occurs in the
        filename (shorter filenames score higher), the weighted blend of the
        three similarity measures otherwise, or 0.0 when that blend falls
        below MIN_FUZZY_SCORE.
    """
    filename = fold_case(filename, case_sensitive)
    query = fold_case(query, case_sensitive)

    if filename == query:
        return 1.0

    if query in filename:
        # filename is non-empty here: an empty filename only contains the
        # empty query, which the equality check already handled
        extra = (len(filename) - len(query)) / len(filename)
        return SUBSTRING_BASE - extra * SUBSTRING_SPREAD

    combined = (
        LEVENSHTEIN_WEIGHT * levenshtein_similarity(filename, query)
        + SUBSEQUENCE_WEIGHT * subsequence_similarity(filename, query)
        + NGRAM_WEIGHT * ngram_similarity(filename, query)
    )

    if combined < MIN_FUZZY_SCORE:
        return 0.0
    return combined


def levenshtein_similarity(a: str, b: str) -> float:
    """
    Normalized edit-distance similarity: ``1 - distance / max(len(a), len(b))``.

    Two empty strings are identical (1.0); an empty and a non-empty string
    share nothing (0.0).
    """
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    distance = Levenshtein.distance(a, b)
    return 1.0 - distance / max(len(a), len(b))


def subsequence_similarity(filename: str, query: str) -> float:
    """
    Score how well the query characters appear, in order, within the filename.

    The filename is scanned left to right; each character that equals the
    next unmatched query character advances the query and earns
    ``1.0 + run * 0.1``, where ``run`` counts consecutive advances. If the
    scan ends before every query character is found, the score is 0.0.

    Args:
        filename: Case-folded filename
        query: Case-folded query

    Returns:
        ``coverage * 0.4 + completeness * 0.4 + consecutiveness * 0.2``
    """
    if not query:
        return 1.0

    query_idx = 0
    run = 0
    max_run = 0
    raw_score = 0.0

    for ch in filename:
        if query_idx < len(query) and ch == query[query_idx]:
            query_idx += 1
            run += 1
            max_run = max(max_run, run)
            raw_score += 1.0 + run * 0.1
        else:
            run = 0

    if query_idx < len(query):
        return 0.0

    # Long consecutive runs can push the raw score past the filename length
    coverage = min(raw_score / len(filename), 1.0)
    completeness = query_idx / len(query)
    consecutiveness = max_run / len(query)

    return coverage * 0.4 + completeness * 0.4 + consecutiveness * 0.2


def bigrams(text: str) -> Set[str]:
    """
    Get the set of contiguous two-character windows of ``text``.

    Text shorter than two characters yields a set holding the text itself.
    """
    if len(text) < NGRAM_SIZE:
        return {text}
    return {text[i:i + NGRAM_SIZE] for i in range(len(text) - NGRAM_SIZE + 1)}


def ngram_similarity(a: str, b: str) -> float:
    """Bigram overlap: shared bigrams divided by the larger bigram set size."""
    grams_a = bigrams(a)
    grams_b = bigrams(b)

    if not grams_a and not grams_b:
        return 1.0
    if not grams_a or not grams_b:
        return 0.0

    common = grams_a & grams_b
    return len(common) / max(len(grams_a), len(grams_b))
