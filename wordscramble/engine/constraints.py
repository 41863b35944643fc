"""
Letter-availability constraint.

A candidate is spellable from a root iff, for every character, the
candidate uses it no more times than the root contains it (multiset subset).

Given:
  - a root word (the pool of letters for the session)
  - one candidate, or a pool of candidates

Return:
  - whether the candidate can be spelled / the candidates that can.

Solvers and the harness use `spellable_words` to turn a dictionary into the
set of words still worth trying for a given root.
"""

from collections import Counter
from typing import Iterable, List

# Shortest admissible word, in normalized characters.
MIN_WORD_LENGTH = 3


def is_spellable(word: str, root: str) -> bool:
    """
    True if `word` can be built from the letters of `root`, using each
    occurrence in `root` at most once.

    Scans `word` left to right, consuming one remaining occurrence per letter
    and failing on the first letter with nothing left. The outcome does not
    depend on letter order.

    Examples:
      is_spellable("silk", "silkworm")  -> True
      is_spellable("silos", "silkworm") -> False  (needs two 's')
    """
    remaining = Counter(root)
    for ch in word:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True


def spellable_words(words: Iterable[str], root: str, min_length: int = 1) -> List[str]:
    """
    Keep only words (length >= min_length) that are spellable from `root`.

    Words are normalized (strip + lowercase); the root itself is excluded.
    Order of first appearance is preserved and duplicates are dropped.
    """
    root = root.strip().lower()
    out: List[str] = []
    seen = set()

    for w in words:
        w = w.strip().lower()

        # Basic hygiene: skip blanks, short tokens and the root itself
        if len(w) < min_length or w == root or w in seen:
            continue

        if is_spellable(w, root):
            seen.add(w)
            out.append(w)

    return out
