from pathlib import Path
from wordscramble.datasets import (
    DICTIONARY_PATH, START_WORDS_PATH, load_word_list, pretty_summary, validate_wordlists,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    roots = tmp_path / "start.txt"
    words = tmp_path / "words_en.txt"
    _write(roots, ["silkworm", "lemonade"])
    _write(words, ["silkworm", "lemonade", "silk", "worm", "lemon"])

    rep = validate_wordlists(str(roots), str(words))
    assert rep["passed"] is True
    assert rep["roots_subset_dictionary"] is True
    assert rep["unplayable_roots"] == []
    s = pretty_summary(rep)
    assert "roots=2" in s and "roots⊆dictionary=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    roots = tmp_path / "start.txt"
    words = tmp_path / "words_en.txt"
    # 'ab' too short for a root, 'Silk' not lowercase, '???' invalid chars
    roots.write_text("silkworm\nab\nSilk\n???\n", encoding="utf-8")
    words.write_text("silkworm\nsilk\n", encoding="utf-8")

    rep = validate_wordlists(str(roots), str(words))
    assert rep["passed"] is False
    assert rep["roots"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_and_playability(tmp_path: Path):
    roots = tmp_path / "start.txt"
    words = tmp_path / "words_en.txt"
    _write(roots, ["silkworm", "lemonade", "rhythm"])
    _write(words, ["silkworm", "silk", "rhythm"])  # missing 'lemonade'

    rep = validate_wordlists(str(roots), str(words))
    assert rep["passed"] is False
    assert rep["roots_subset_dictionary"] is False
    assert rep["unplayable_roots"] == ["lemonade", "rhythm"]
    assert any("subset" in msg for msg in rep["issues"])
    assert any("no playable word" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    rep = validate_wordlists(str(tmp_path / "start.txt"), str(tmp_path / "words.txt"))
    assert rep["passed"] is False
    assert rep["roots"]["exists"] is False
    assert len(rep["issues"]) == 2
    assert "FAIL" in pretty_summary(rep)


def test_load_word_list_drops_blanks(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Silkworm\r\n\n  lemonade \n\n", encoding="utf-8")
    assert load_word_list(p) == ["silkworm", "lemonade"]


def test_bundled_wordlists_pass():
    rep = validate_wordlists(str(START_WORDS_PATH), str(DICTIONARY_PATH))
    assert rep["passed"] is True, rep["issues"]
    assert "silkworm" in load_word_list(START_WORDS_PATH)


def test_validate_wordlists_min_length_bounds_playable_words(tmp_path: Path):
    roots = tmp_path / "start.txt"
    words = tmp_path / "words_en.txt"
    _write(roots, ["silkworm"])
    _write(words, ["silkworm", "silk"])

    assert validate_wordlists(str(roots), str(words))["unplayable_roots"] == []

    # 'silk' is shorter than 5, so nothing playable is left
    rep = validate_wordlists(str(roots), str(words), min_length=5)
    assert rep["min_length"] == 5
    assert rep["unplayable_roots"] == ["silkworm"]
    assert rep["passed"] is False
