# apps/cli/run.py
"""
CLI entry point for running wordscramble player experiments.

This script:
  1) Validates the word lists (prints counts + SHA, ensures roots ⊆ dictionary).
  2) Loads the lists and instantiates the requested automated player.
  3) Plays one session per root with a progress bar and writes:
       - CSV:  per-root results (score, words found, words played)
       - JSON: manifest with config, word list hashes, summary stats, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from wordscramble.config import Settings
from wordscramble.datasets import load_word_list, pretty_summary, validate_wordlists
from wordscramble.dictionary import WordListDictionary
from wordscramble.harness import run_case, summarize
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordscramble.players import create_player, get_player_ids


def main(argv=None) -> int:
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    settings = Settings.load()
    player_choices = ", ".join(get_player_ids())

    ap = argparse.ArgumentParser(description="wordscramble — run automated player experiments")
    ap.add_argument("--player", default="longest_first",
                    help=f"player id (one of: {player_choices})")
    ap.add_argument("--start-words", default=str(settings.start_words_path),
                    help="path to root word list")
    ap.add_argument("--dictionary", default=str(settings.dictionary_path),
                    help="path to dictionary word list")
    ap.add_argument("--language", default=settings.language, help="dictionary language code")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of roots (deterministic by seed)")
    ap.add_argument("--max-turns", type=int, help="cap on submissions per session")
    ap.add_argument("--seed", type=int, default=settings.seed if settings.seed is not None else 123,
                    help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.start_words, args.dictionary)
    print(pretty_summary(rep))
    if not rep["roots"]["exists"] or not rep["dictionary"]["exists"]:
        print("Word lists missing, nothing to run.", file=sys.stderr)
        return 1

    # 2) Load lists into memory (lowercased, no blanks)
    roots = load_word_list(args.start_words)
    words = load_word_list(args.dictionary)
    dictionary = WordListDictionary(words, language=args.language)

    # 3) Instantiate player by id
    player = create_player(args.player)

    # 4) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    cases = list(roots)
    if args.sample is not None:
        rng.shuffle(cases)
        cases = cases[: args.sample]
    if not cases:
        print("No roots to play.", file=sys.stderr)
        return 1

    # 5) Run batch with live progress
    results = []
    for idx, root in enumerate(tqdm(cases, ncols=80, desc="Playing", unit="root",
                                    disable=args.no_progress), 1):
        r = run_case(player, root, words=words, dictionary=dictionary, language=args.language,
                     max_turns=args.max_turns, seed=args.seed + idx)
        r["player_id"] = player.id  # stamp id for downstream tools
        results.append(r)

    summary = summarize(results)
    print(
        f"cases={summary['cases']} | score mean={summary['score_mean']} "
        f"median={summary['score_median']} p90={summary['score_p90']} max={summary['score_max']} "
        f"| words/root={summary['words_found_mean']}"
    )

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "summary": summary,
        "player_id": player.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
