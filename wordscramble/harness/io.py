"""
I/O utilities for harness runs.

Responsibilities:
- write_csv:      flatten per-case results into a tidy CSV (one row per root).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of session results to CSV.

    Schema (columns):
      player, root, score, words_found, rejected, turns, time_ms, words

    `words` lists the accepted words in the order they were played,
    space-separated.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["player", "root", "score", "words_found", "rejected", "turns", "time_ms", "words"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            accepted = [word for word, outcome in r.get("history", []) if outcome == "accepted"]
            w.writerow({
                "player": r.get("player_id", "?"),
                "root": r["root"],
                "score": r["score"],
                "words_found": r["words_found"],
                "rejected": r["rejected"],
                "turns": r["turns"],
                "time_ms": round(float(r["time_ms"]), 3),
                "words": " ".join(accepted),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (player, paths, seed, sample, max_turns, outdir)
      - wordlists: output of datasets.validate_wordlists(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
