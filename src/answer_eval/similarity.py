from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    """Edit distance over code points; insert, delete and substitute cost 1."""
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)
    row = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        diag, row[0] = row[0], i
        for j, cb in enumerate(b, start=1):
            diag, row[j] = row[j], min(row[j] + 1, row[j - 1] + 1, diag + (ca != cb))
    return row[-1]


def similarity(a: str, b: str) -> float:
    """Edit-distance similarity in [0, 1]; 1.0 for equal strings, 0.0 if one side is empty."""
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    longest = max(len(a), len(b))
    return 1.0 - levenshtein(a, b) / longest
