"""
Candidate word validation.

This module answers the question: "May this word be added right now?"
A candidate is accepted iff, after normalization (strip + lowercase), it
passes every rule below. Rules run in this exact order and the first
failure decides the rejection reason; later rules are not evaluated (so the
dictionary is never consulted for a word that already failed a cheap check).

  1. TOO_SHORT                at least MIN_WORD_LENGTH characters
  2. SAME_AS_ROOT             not the root word itself
  3. ALREADY_USED             not in the history of accepted words
  4. NOT_SPELLABLE_FROM_ROOT  letters are a multiset subset of the root's
  5. NOT_A_REAL_WORD          known to the dictionary in `language`

Rejections are ordinary return values, not exceptions: they are expected,
user-facing outcomes. Nothing here mutates the history or the score; the
caller does that from the accepted branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from wordscramble.dictionary.base import Dictionary
from .constraints import MIN_WORD_LENGTH, is_spellable
from .normalize import normalize


class Rejection(str, Enum):
    TOO_SHORT = "too_short"
    SAME_AS_ROOT = "same_as_root"
    ALREADY_USED = "already_used"
    NOT_SPELLABLE_FROM_ROOT = "not_spellable_from_root"
    NOT_A_REAL_WORD = "not_a_real_word"


@dataclass(frozen=True)
class Verdict:
    """
    Outcome of one validation call.

    `word` is always the normalized candidate. `reason` is None exactly when
    the word was accepted.
    """
    word: str
    reason: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @classmethod
    def accept(cls, word: str) -> "Verdict":
        return cls(word=word)

    @classmethod
    def reject(cls, word: str, reason: Rejection) -> "Verdict":
        return cls(word=word, reason=reason)


def validate_word(
        candidate_raw: str,
        root: str,
        history: Sequence[str],
        dictionary: Dictionary,
        language: str = "en",
) -> Verdict:
    """
    Classify `candidate_raw` against `root` and the accepted-word `history`.

    Args:
      candidate_raw : raw player input (untrimmed, any case)
      root          : the session's root word (expected lowercase)
      history       : words accepted so far, newest first
      dictionary    : anything with is_known_word(word, language) -> bool
      language      : language code passed through to the dictionary

    Returns:
      Verdict.accept(word) or Verdict.reject(word, reason).

    Examples (root="silkworm", empty history):
      "ok"         -> TOO_SHORT
      "Silkworm  " -> SAME_AS_ROOT
      "silos"      -> NOT_SPELLABLE_FROM_ROOT
      "silk"       -> accepted, word == "silk"
    """
    word = normalize(candidate_raw)
    root = normalize(root)

    if len(word) < MIN_WORD_LENGTH:
        return Verdict.reject(word, Rejection.TOO_SHORT)

    if word == root:
        return Verdict.reject(word, Rejection.SAME_AS_ROOT)

    # History entries are stored normalized, so exact match is enough
    if word in history:
        return Verdict.reject(word, Rejection.ALREADY_USED)

    if not is_spellable(word, root):
        return Verdict.reject(word, Rejection.NOT_SPELLABLE_FROM_ROOT)

    if not dictionary.is_known_word(word, language):
        return Verdict.reject(word, Rejection.NOT_A_REAL_WORD)

    return Verdict.accept(word)
