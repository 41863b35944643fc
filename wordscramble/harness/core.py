"""
Experiment harness core primitives.

- run_case:  play one session (one root word) with an automated player.
- run_batch: play many roots in sequence (optionally a sample prefix).
- summarize: aggregate score statistics over a batch.

Every submission goes through session.submit_word, so the harness exercises
exactly the rules a human player faces. These functions are UI-agnostic so
they can be reused by a CLI app, a notebook, or tests.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional

import numpy as np

from wordscramble.dictionary.base import Dictionary
from wordscramble.engine import MIN_WORD_LENGTH, normalize, spellable_words
from wordscramble.session import start_session, submit_word

log = logging.getLogger(__name__)


def run_case(
        player,
        root: str,
        *,
        words: Iterable[str],
        dictionary: Dictionary,
        language: str = "en",
        max_turns: Optional[int] = None,
        seed: Optional[int] = None,
) -> Dict:
    """
    Play one session until the player runs out of candidates or turns.

    Args:
        player:     a BasePlayer implementing next_word(state)
        root:       root word for this case
        words:      word pool candidates are drawn from (usually the dictionary list)
        dictionary: dictionary the session validates against
        language:   dictionary language code
        max_turns:  cap on submissions (None = until candidates run out)
        seed:       RNG seed to make player tie-breaks reproducible

    Returns:
        dict with keys:
            root, score, words_found, rejected, turns, time_ms,
            history (list[(word, verdict)]) in submission order

    Raises:
        ValueError if the player proposes a word outside "candidates".
    """
    if max_turns is not None and max_turns < 1:
        raise ValueError(f"max_turns must be positive; got {max_turns}")

    session = start_session([root], language=language)
    player.reset(root=session.root, seed=seed)

    # Everything the player could legally try, minus what's been used
    candidates = spellable_words(words, session.root, min_length=MIN_WORD_LENGTH)
    history: List[tuple] = []
    rejected = 0

    t0 = time.perf_counter()
    turn = 0
    while candidates and (max_turns is None or turn < max_turns):
        turn += 1
        state = {
            "turn": turn,
            "root": session.root,
            "used_words": list(session.used_words),
            "score": session.score,
            "candidates": list(candidates),
        }
        word = player.next_word(state)
        if normalize(word) not in candidates:
            raise ValueError(f"player {getattr(player, 'id', '?')} returned non-candidate {word!r}")
        verdict = submit_word(session, word, dictionary)
        history.append((verdict.word, verdict.reason.value if verdict.reason else "accepted"))

        if not verdict.accepted:
            rejected += 1
        # Spent either way: a rejected pool word would be rejected again
        candidates.remove(verdict.word)

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "root": session.root,
        "score": session.score,
        "words_found": len(session.used_words),
        "rejected": rejected,
        "turns": turn,
        "time_ms": dt,
        "history": history,
    }


def run_batch(
        player,
        roots: List[str],
        *,
        words: List[str],
        dictionary: Dictionary,
        language: str = "en",
        max_turns: Optional[int] = None,
        seed: Optional[int] = None,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K roots
    are used to speed up quick experiments.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    pool = [r.strip().lower() for r in roots if r.strip()]
    if sample is not None:
        pool = pool[:sample]
    log.info("running %d case(s) with player %s", len(pool), getattr(player, "id", "?"))

    out: List[Dict] = []
    for idx, root in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(
            player, root, words=words, dictionary=dictionary, language=language,
            max_turns=max_turns, seed=case_seed,
        )
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Score statistics over a batch: cases, mean/median/p90/max score and mean words found.
    """
    if not results:
        raise ValueError("cannot summarize an empty batch")
    scores = np.array([r["score"] for r in results], dtype=float)
    found = np.array([r["words_found"] for r in results], dtype=float)
    return {
        "cases": len(results),
        "score_mean": round(float(scores.mean()), 3),
        "score_median": round(float(np.median(scores)), 3),
        "score_p90": round(float(np.percentile(scores, 90)), 3),
        "score_max": int(scores.max()),
        "words_found_mean": round(float(found.mean()), 3),
    }
