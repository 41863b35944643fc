"""
Dataset validator for wordscramble.

What this module does:
- Validate a pair of word lists: start.txt (root words, one is drawn per
  session) and words_<lang>.txt (the dictionary candidates are checked against).
- Enforce formatting rules (lowercase, alphabetic, one per line; roots also
  need a minimum length).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that roots ⊆ dictionary and that every root admits at least one
  playable word from the dictionary.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("wordscramble/datasets/data/start.txt",
                             "wordscramble/datasets/data/words_en.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordscramble.engine.constraints import MIN_WORD_LENGTH, spellable_words


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int
    invalid_lines: int


@dataclass
class ValidationReport:
    """Top-level validation result for the (roots, dictionary) pair."""
    min_length: int
    roots: FileReport
    dictionary: FileReport
    roots_subset_dictionary: bool
    unplayable_roots: List[str]   # roots with no admissible word in the dictionary
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    A line is valid when, after stripping, it is non-empty, already
    lowercase, alphabetic and at least `min_length` long.

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isalpha() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


def validate_wordlists(roots_path: str, dictionary_path: str, min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate the root-word list against the dictionary.

    Parameters
    ----------
    roots_path : str
        Path to the start words (one root per line).
    dictionary_path : str
        Path to the dictionary word list.
    min_length : int
        Minimum root length; also the shortest word that counts as playable.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with
        counts, SHA-256, invalid/duplicate diagnostics, the subset check,
        unplayable roots, a strict `passed` flag and `issues`.
    """
    issues: List[str] = []

    roots_p = Path(roots_path)
    dict_p = Path(dictionary_path)

    missing = [(name, p) for name, p in (("roots", roots_p), ("dictionary", dict_p)) if not p.exists()]
    if missing:
        for name, p in missing:
            issues.append(f"{name} file not found: {p}")
        rep = ValidationReport(
            min_length=min_length,
            roots=FileReport(roots_path, roots_p.exists(), 0, "", 0, 0),
            dictionary=FileReport(dictionary_path, dict_p.exists(), 0, "", 0, 0),
            roots_subset_dictionary=False,
            unplayable_roots=[],
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    roots, roots_invalid = _load_and_check(roots_p, min_length)
    # Dictionary entries may be any length; only formatting is enforced
    words, dict_invalid = _load_and_check(dict_p, 1)

    roots_set = set(roots)
    words_set = set(words)

    roots_report = _file_report(roots_p, roots, roots_invalid)
    dict_report = _file_report(dict_p, words, dict_invalid)

    subset_ok = roots_set.issubset(words_set)
    if not subset_ok:
        unknown = sorted(roots_set - words_set)[:5]
        issues.append(f"roots not subset of dictionary (e.g., {unknown})")

    # A root with nothing to find makes for a dead session
    unplayable = sorted(r for r in roots_set if not spellable_words(words, r, min_length=min_length))
    if unplayable:
        issues.append(f"{len(unplayable)} root(s) have no playable word (e.g., {unplayable[:5]})")

    if roots_report.count == 0:
        issues.append("roots file contains 0 valid words")
    if dict_report.count == 0:
        issues.append("dictionary file contains 0 valid words")

    if roots_invalid:
        issues.append(f"roots has {roots_invalid} invalid line(s)")
    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} invalid line(s)")

    if roots_report.count != roots_report.unique_count:
        issues.append("roots contains duplicate lines")
    if dict_report.count != dict_report.unique_count:
        issues.append("dictionary contains duplicate lines")

    passed = (
            subset_ok
            and not unplayable
            and roots_invalid == 0
            and dict_invalid == 0
            and roots_report.count > 0
            and dict_report.count > 0
    )

    rep = ValidationReport(
        min_length=min_length,
        roots=roots_report,
        dictionary=dict_report,
        roots_subset_dictionary=subset_ok,
        unplayable_roots=unplayable,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        roots=42 (uniq=42, sha=abc123...) | dictionary=900 (uniq=900, sha=def456...) | roots⊆dictionary=True | unplayable=0 | OK
    """
    a = report["roots"]
    b = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"roots={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| roots⊆dictionary={report['roots_subset_dictionary']} "
        f"| unplayable={len(report['unplayable_roots'])} | {status}"
    )
