"""Edit distance and similarity functions for identifier matching.

This module provides the Damerau-Levenshtein distance (restricted to adjacent
transpositions) and a normalized similarity score derived from it.
"""


def damerau_levenshtein_distance(a: str, b: str) -> int:
    """Calculate the restricted Damerau-Levenshtein distance between two strings.

    Insertions, deletions, substitutions and swaps of two adjacent characters
    each cost one operation. Only a single adjacent pair is considered per
    transposition (optimal string alignment variant).

    The comparison is case-sensitive. Use similarity_score for identifier
    comparison, which lower-cases both inputs first.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Edit distance (>= 0).
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    len_a, len_b = len(a), len(b)

    # Dynamic programming table for edit distance
    d = [[0] * (len_b + 1) for _ in range(len_a + 1)]
    for i in range(len_a + 1):
        d[i][0] = i
    for j in range(len_b + 1):
        d[0][j] = j

    for i in range(1, len_a + 1):
        for j in range(1, len_b + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1

            d[i][j] = min(
                d[i - 1][j] + 1,  # deletion
                d[i][j - 1] + 1,  # insertion
                d[i - 1][j - 1] + cost,  # substitution
            )

            # Adjacent transposition
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                d[i][j] = min(d[i][j], d[i - 2][j - 2] + cost)

    return d[len_a][len_b]


def similarity_from_distance(distance: int, len_a: int, len_b: int) -> float:
    """Normalize an edit distance to a similarity score in [0, 1].

    Args:
        distance: Edit distance between the two strings.
        len_a: Length of the first string.
        len_b: Length of the second string.

    Returns:
        1 - distance / max(len_a, len_b), clamped to [0, 1].
        Two empty strings are identical (1.0).
    """
    max_len = max(len_a, len_b)
    if max_len == 0:
        return 1.0
    return min(1.0, max(0.0, 1.0 - distance / max_len))


def similarity_score(a: str, b: str) -> float:
    """Calculate case-insensitive similarity between two identifiers.

    Args:
        a: First identifier.
        b: Second identifier.

    Returns:
        Similarity score (0.0 = completely different, 1.0 = identical).
    """
    if a == b:
        return 1.0
    distance = damerau_levenshtein_distance(a.lower(), b.lower())
    return similarity_from_distance(distance, len(a), len(b))
