from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

from wordscramble.datasets.io import load_word_list

log = logging.getLogger(__name__)


class WordListDictionary:
    """
    Dictionary backed by in-memory word sets, one per language code.

    Lookups are case-insensitive and whitespace-tolerant. An unknown language
    has no words, so every lookup in it is False.
    """

    def __init__(self, words: Optional[Iterable[str]] = None, language: str = "en"):
        self._words: Dict[str, Set[str]] = {}
        if words is not None:
            self.add_words(words, language)

    @classmethod
    def from_file(cls, path: Path | str, language: str = "en") -> "WordListDictionary":
        """Build from a newline-separated word list. Raises FileNotFoundError."""
        return cls(load_word_list(path), language=language)

    def add_words(self, words: Iterable[str], language: str = "en") -> None:
        bucket = self._words.setdefault(language.lower(), set())
        before = len(bucket)
        bucket.update(w.strip().lower() for w in words if w.strip())
        log.debug("dictionary[%s]: +%d words (%d total)", language, len(bucket) - before, len(bucket))

    def is_known_word(self, word: str, language: str = "en") -> bool:
        if not word:
            return False
        bucket = self._words.get(language.lower())
        if not bucket:
            return False
        return word.strip().lower() in bucket

    def languages(self) -> List[str]:
        return sorted(self._words)

    def words(self, language: str = "en") -> List[str]:
        """Sorted snapshot of the words known in `language`."""
        return sorted(self._words.get(language.lower(), ()))

    def __len__(self) -> int:
        return sum(len(b) for b in self._words.values())
