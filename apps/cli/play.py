# apps/cli/play.py
"""
Interactive text-mode wordscramble.

Draws a root word and keeps asking for words spelled from its letters.
Accepted words are listed newest first with the running score; rejected
words print a short title and message explaining why.

Commands:
  :new   start over with a fresh root (score and words reset)
  :quit  exit (Ctrl-D works too)
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Dict, Tuple

from wordscramble.config import Settings
from wordscramble.dictionary import WordListDictionary
from wordscramble.engine import Rejection
from wordscramble.session import Session, load_start_words, restart, start_session, submit_word

# Title / message shown for each rejection reason.
MESSAGES: Dict[Rejection, Tuple[str, str]] = {
    Rejection.TOO_SHORT: ("Too short", "A word must have at least 3 letters."),
    Rejection.SAME_AS_ROOT: ("Same word as root word", "You cannot use that one!"),
    Rejection.ALREADY_USED: ("Word used already", "Be more original"),
    Rejection.NOT_SPELLABLE_FROM_ROOT: ("Word not possible", "You can't spell that word from '{root}'!"),
    Rejection.NOT_A_REAL_WORD: ("Word not recognized", "You can't just make them up, right?"),
}


def rejection_text(reason: Rejection, root: str) -> str:
    title, message = MESSAGES[reason]
    return f"{title}: {message.format(root=root)}"


def _render(session: Session, out) -> None:
    out.write(f"\n== {session.root} ==  Total Score: {session.score}\n")
    for w in session.used_words:
        out.write(f"  ({len(w)}) {w}\n")


def main(argv=None, stdin=None, stdout=None) -> int:
    """
    Parse CLI args, load word lists, and run the prompt loop until :quit or EOF.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    settings = Settings.load()

    ap = argparse.ArgumentParser(description="wordscramble — spell words from a root word")
    ap.add_argument("--start-words", default=str(settings.start_words_path),
                    help="path to root word list (one per line)")
    ap.add_argument("--dictionary", default=str(settings.dictionary_path),
                    help="path to dictionary word list (one per line)")
    ap.add_argument("--language", default=settings.language, help="dictionary language code")
    ap.add_argument("--seed", type=int, default=settings.seed, help="RNG seed for root selection")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    settings.start_words_path = Path(args.start_words)
    settings.dictionary_path = Path(args.dictionary)
    settings.language = args.language

    # The dictionary is required; without it every word would be "not recognized"
    dictionary = WordListDictionary.from_file(settings.dictionary_path, language=settings.language)
    start_words = load_start_words(settings.start_words_path)
    rng = random.Random(args.seed)

    session = start_session(start_words, rng=rng, default_root=settings.default_root,
                            language=settings.language)
    _render(session, stdout)

    while True:
        stdout.write("Enter your word: ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        cmd = line.strip().lower()
        if cmd == ":quit":
            break
        if cmd == ":new":
            restart(session, start_words, rng=rng, default_root=settings.default_root)
            _render(session, stdout)
            continue

        verdict = submit_word(session, line, dictionary)
        if verdict.accepted:
            _render(session, stdout)
        else:
            stdout.write(rejection_text(verdict.reason, session.root) + "\n")

    stdout.write(f"Final score: {session.score} ({len(session.used_words)} words)\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
