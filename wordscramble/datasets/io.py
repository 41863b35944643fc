from __future__ import annotations

import logging
from pathlib import Path
from typing import List

log = logging.getLogger(__name__)

# Bundled word lists (start words + an English dictionary)
DATA_DIR = Path(__file__).resolve().parent / "data"
START_WORDS_PATH = DATA_DIR / "start.txt"
DICTIONARY_PATH = DATA_DIR / "words_en.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_word_list(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks.

    Blank lines (including the trailing one most editors leave) never become
    words, so a random pick can't land on "".
    """
    words = [w.strip().lower() for w in read_lines(p) if w.strip()]
    log.debug("loaded %d words from %s", len(words), p)
    return words
