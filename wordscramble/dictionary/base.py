"""
Dictionary capability consumed by the engine.

The engine never decides on its own whether a string is a real word; it asks
an injected dictionary. Anything with a matching `is_known_word` method works
(a static word list, a spell-checker binding, a remote service wrapper).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Dictionary(Protocol):
    def is_known_word(self, word: str, language: str) -> bool:
        """
        Return True if `word` is a recognized word in `language`.

        Unknown or misspelled input must yield False rather than raise.
        """
        ...
