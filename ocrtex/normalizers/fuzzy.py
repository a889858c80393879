"""
Edit-distance matching against a fixed vocabulary.

The distance itself comes from rapidfuzz; this module adds the length
shortcut and the first-wins nearest-match search used by the command
repair pass.
"""

from collections.abc import Iterable

from rapidfuzz.distance import Levenshtein

# Length gap beyond which strings are considered unrelated
MAX_LENGTH_GAP = 100
# Returned instead of a real distance when the gap is exceeded
UNRELATED_DISTANCE = MAX_LENGTH_GAP + 1


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Calculate Levenshtein edit distance between two strings.

    Insertions, deletions and substitutions each cost 1. Strings whose
    lengths differ by more than MAX_LENGTH_GAP are not compared and get
    UNRELATED_DISTANCE, which is larger than any budget used for matching.
    """
    if abs(len(s1) - len(s2)) > MAX_LENGTH_GAP:
        return UNRELATED_DISTANCE
    return Levenshtein.distance(s1, s2)


def find_best_match(query: str, candidates: Iterable[str], max_distance: int = 2) -> str | None:
    """
    Find the closest candidate within ``max_distance`` of ``query``.

    Candidates are scanned in order; on equal distance the earlier one
    wins, and an exact match returns immediately.

    Example:
        >>> find_best_match("alpba", ["alpha", "beta"], max_distance=1)
        'alpha'
    """
    best_match = None
    best_distance = max_distance + 1

    for candidate in candidates:
        # Length gap is a lower bound on the distance
        if abs(len(candidate) - len(query)) > max_distance:
            continue

        distance = levenshtein_distance(query, candidate)
        if distance < best_distance:
            best_distance = distance
            best_match = candidate
            if distance == 0:
                return candidate

    return best_match
