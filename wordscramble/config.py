"""Configuration helpers for wordscramble sessions and tools."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from wordscramble.datasets.io import DICTIONARY_PATH, START_WORDS_PATH

# Root used when the start-word list is missing or empty.
DEFAULT_ROOT = "silkworm"


@dataclass
class Settings:
    """Runtime settings with environment overrides."""

    start_words_path: Path = START_WORDS_PATH
    dictionary_path: Path = DICTIONARY_PATH
    language: str = "en"
    default_root: str = DEFAULT_ROOT
    seed: Optional[int] = None

    @classmethod
    def load(cls) -> "Settings":
        """Construct settings from environment variables when available."""

        seed = os.environ.get("WORDSCRAMBLE_SEED")
        return cls(
            start_words_path=Path(
                os.environ.get("WORDSCRAMBLE_START_WORDS", cls.start_words_path.as_posix())
            ),
            dictionary_path=Path(
                os.environ.get("WORDSCRAMBLE_DICTIONARY", cls.dictionary_path.as_posix())
            ),
            language=os.environ.get("WORDSCRAMBLE_LANGUAGE", cls.language),
            default_root=os.environ.get("WORDSCRAMBLE_DEFAULT_ROOT", cls.default_root).strip().lower(),
            seed=int(seed) if seed else None,
        )


__all__ = ["DEFAULT_ROOT", "Settings"]
