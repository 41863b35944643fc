from pathlib import Path

from wordscramble.config import DEFAULT_ROOT, Settings
from wordscramble.datasets import DICTIONARY_PATH, START_WORDS_PATH


def test_defaults(monkeypatch):
    for var in ("WORDSCRAMBLE_START_WORDS", "WORDSCRAMBLE_DICTIONARY", "WORDSCRAMBLE_LANGUAGE",
                "WORDSCRAMBLE_DEFAULT_ROOT", "WORDSCRAMBLE_SEED"):
        monkeypatch.delenv(var, raising=False)
    s = Settings.load()
    assert s.start_words_path == START_WORDS_PATH
    assert s.dictionary_path == DICTIONARY_PATH
    assert s.language == "en"
    assert s.default_root == DEFAULT_ROOT == "silkworm"
    assert s.seed is None


def test_env_overrides(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("WORDSCRAMBLE_START_WORDS", str(tmp_path / "s.txt"))
    monkeypatch.setenv("WORDSCRAMBLE_LANGUAGE", "fr")
    monkeypatch.setenv("WORDSCRAMBLE_DEFAULT_ROOT", " Lemonade ")
    monkeypatch.setenv("WORDSCRAMBLE_SEED", "42")
    s = Settings.load()
    assert s.start_words_path == tmp_path / "s.txt"
    assert s.language == "fr"
    assert s.default_root == "lemonade"
    assert s.seed == 42
