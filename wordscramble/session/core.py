"""
Game session lifecycle.

A session holds the only mutable game state: the root word, the accepted
words (newest first) and the score. The engine functions stay pure; this
module is the single writer that applies their results.

- start_session:            NotStarted -> InProgress (fresh root, score 0, no words)
- start_session_from_file:  same, reading the root list from disk
- submit_word:              InProgress -> InProgress (state changes only on acceptance)
- restart:                  discard progress and re-roll the root in place

A missing or empty root list is not fatal: the default root is used and a
warning is logged.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from wordscramble.config import DEFAULT_ROOT
from wordscramble.datasets.io import load_word_list
from wordscramble.dictionary.base import Dictionary
from wordscramble.engine import Verdict, apply_increment, normalize, score_increment, validate_word

log = logging.getLogger(__name__)


@dataclass
class Session:
    root: str
    used_words: List[str] = field(default_factory=list)  # newest first
    score: int = 0
    language: str = "en"


def _pick_root(word_list: Optional[Sequence[str]], rng: random.Random, default_root: str) -> str:
    pool = [normalize(w) for w in (word_list or []) if w.strip()]
    if not pool:
        log.warning("start word list is empty; falling back to %r", default_root)
        return normalize(default_root)
    return pool[rng.randrange(len(pool))]


def start_session(
        word_list: Optional[Sequence[str]],
        *,
        rng: Optional[random.Random] = None,
        default_root: str = DEFAULT_ROOT,
        language: str = "en",
) -> Session:
    """
    Begin a new session with a root drawn uniformly from `word_list`.

    `word_list` may be None or empty (collaborator failure); the default root
    is used then. Pass a seeded `rng` for reproducible roots.
    """
    rng = rng or random.Random()
    root = _pick_root(word_list, rng, default_root)
    log.debug("session started with root %r", root)
    return Session(root=root, language=language)


def load_start_words(path: Path | str) -> List[str]:
    """
    Load the root word list, returning [] when it can't be read.

    Callers that restart sessions keep the list around; an empty list makes
    start_session fall back to the default root.
    """
    try:
        return load_word_list(path)
    except (OSError, UnicodeDecodeError) as e:
        log.warning("could not load start words from %s (%s)", path, e)
        return []


def start_session_from_file(
        path: Path | str,
        *,
        rng: Optional[random.Random] = None,
        default_root: str = DEFAULT_ROOT,
        language: str = "en",
) -> Session:
    """Like start_session, but loads the root list from `path`. Never raises for I/O problems."""
    words = load_start_words(path)
    return start_session(words, rng=rng, default_root=default_root, language=language)


def restart(
        session: Session,
        word_list: Optional[Sequence[str]],
        *,
        rng: Optional[random.Random] = None,
        default_root: str = DEFAULT_ROOT,
) -> Session:
    """Reset `session` in place: new root, empty history, score 0. Returns it for chaining."""
    fresh = start_session(word_list, rng=rng, default_root=default_root, language=session.language)
    session.root = fresh.root
    session.used_words = []
    session.score = 0
    return session


def submit_word(session: Session, raw: str, dictionary: Dictionary) -> Verdict:
    """
    Validate `raw` against the session and apply it if accepted.

    On acceptance the normalized word goes to the front of `used_words` and
    the score grows by len(word) + number of words accepted before it.
    Rejections leave the session untouched.
    """
    verdict = validate_word(raw, session.root, session.used_words, dictionary, session.language)
    if not verdict.accepted:
        log.debug("rejected %r: %s", verdict.word, verdict.reason.value)
        return verdict

    inc = score_increment(len(verdict.word), len(session.used_words))
    session.used_words.insert(0, verdict.word)
    session.score = apply_increment(session.score, inc)
    log.debug("accepted %r (+%d, score=%d)", verdict.word, inc, session.score)
    return verdict
