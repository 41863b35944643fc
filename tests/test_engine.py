import pytest
from wordscramble.dictionary import WordListDictionary
from wordscramble.engine import (
    Rejection, apply_increment, is_spellable, normalize, score_increment,
    spellable_words, validate_word,
)

ROOT = "silkworm"
DICT = WordListDictionary(["silk", "worm", "milk", "slim", "work", "silos", "roil"])


class CountingDictionary:
    """Records lookups so tests can see whether the dictionary was consulted."""

    def __init__(self, known):
        self.known = set(known)
        self.calls = []

    def is_known_word(self, word, language):
        self.calls.append((word, language))
        return word in self.known


# --- normalization ---
@pytest.mark.parametrize("raw,expected", [
    ("silk", "silk"),
    ("  Silk\n", "silk"),
    ("\tWORM ", "worm"),
    ("", ""),
    ("   ", ""),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected
    assert normalize(normalize(raw)) == normalize(raw)


# --- spellability (multiset subset) ---
@pytest.mark.parametrize("word,root,expected", [
    ("silk", "silkworm", True),
    ("mrowklis", "silkworm", True),
    ("silos", "silkworm", False),   # needs two 's'
    ("wool", "silkworm", False),    # needs two 'o'
    ("lemon", "lemonade", True),
    ("xyz", "silkworm", False),
    ("", "silkworm", True),
])
def test_is_spellable(word, root, expected):
    assert is_spellable(word, root) is expected


def test_spellable_words_filters_and_keeps_order():
    pool = ["worm", "SILK ", "silos", "silkworm", "ok", "worm", "", "milk"]
    assert spellable_words(pool, ROOT, min_length=3) == ["worm", "silk", "milk"]


# --- validation rules, one per reason ---
@pytest.mark.parametrize("raw,history,reason", [
    ("ok", [], Rejection.TOO_SHORT),
    ("", [], Rejection.TOO_SHORT),
    ("  \n", [], Rejection.TOO_SHORT),
    ("Silkworm  ", [], Rejection.SAME_AS_ROOT),
    ("SILKWORM", [], Rejection.SAME_AS_ROOT),
    ("silk", ["silk"], Rejection.ALREADY_USED),
    (" Silk", ["worm", "silk"], Rejection.ALREADY_USED),
    ("silos", [], Rejection.NOT_SPELLABLE_FROM_ROOT),
    ("wool", [], Rejection.NOT_SPELLABLE_FROM_ROOT),
    ("risk", [], Rejection.NOT_A_REAL_WORD),
])
def test_validate_word_rejections(raw, history, reason):
    v = validate_word(raw, ROOT, history, DICT)
    assert v.accepted is False
    assert v.reason is reason
    assert v.word == normalize(raw)


def test_validate_word_accepts_normalized():
    v = validate_word("  SILK\n", ROOT, [], DICT)
    assert v.accepted is True
    assert v.reason is None
    assert v.word == "silk"


def test_short_word_rejected_even_if_in_history():
    v = validate_word("ok", ROOT, ["ok"], DICT)
    assert v.reason is Rejection.TOO_SHORT


def test_already_used_wins_over_spelling_and_dictionary():
    # "silos" is not spellable; "zzz" is neither spellable nor known
    assert validate_word("silos", ROOT, ["silos"], DICT).reason is Rejection.ALREADY_USED
    assert validate_word("zzz", ROOT, ["zzz"], DICT).reason is Rejection.ALREADY_USED
    # spellable but unknown: only the dictionary rule competes
    assert validate_word("risk", ROOT, [], DICT).reason is Rejection.NOT_A_REAL_WORD
    assert validate_word("risk", ROOT, ["risk"], DICT).reason is Rejection.ALREADY_USED


def test_dictionary_not_consulted_after_earlier_failure():
    d = CountingDictionary({"silk"})
    validate_word("silk", ROOT, ["silk"], d)
    validate_word("silos", ROOT, [], d)
    assert d.calls == []
    assert validate_word("silk", ROOT, [], d).accepted
    assert d.calls == [("silk", "en")]


def test_language_is_passed_to_dictionary():
    d = CountingDictionary({"silk"})
    validate_word("silk", ROOT, [], d, language="fr")
    assert d.calls == [("silk", "fr")]


# --- scoring ---
@pytest.mark.parametrize("length,history_size,expected", [
    (4, 0, 4),
    (4, 1, 5),
    (3, 10, 13),
])
def test_score_increment(length, history_size, expected):
    assert score_increment(length, history_size) == expected


def test_apply_increment_is_strictly_increasing():
    score = 0
    for n, word in enumerate(["silk", "worm", "milk", "slim"]):
        new = apply_increment(score, score_increment(len(word), n))
        assert new > score
        score = new
    assert score == 4 + 5 + 6 + 7


def test_scoring_rejects_negative_operands():
    with pytest.raises(ValueError):
        score_increment(-1, 0)
    with pytest.raises(ValueError):
        apply_increment(0, -3)
