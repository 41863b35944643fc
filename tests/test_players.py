import pytest
from wordscramble.players import BasePlayer, create_player, get_player_ids, register


def _state(candidates):
    return {"turn": 1, "root": "silkworm", "used_words": [], "score": 0, "candidates": candidates}


def test_registry_lists_players():
    assert get_player_ids() == ["longest_first", "random_spellable"]


def test_unknown_player():
    with pytest.raises(ValueError, match="Unknown player id"):
        create_player("nope")


def test_duplicate_registration_rejected():
    class Dup(BasePlayer):
        id = "longest_first"

    with pytest.raises(ValueError, match="Duplicate"):
        register(Dup)


def test_longest_first_breaks_ties_alphabetically():
    p = create_player("longest_first")
    p.reset(root="silkworm")
    assert p.next_word(_state(["silk", "worms", "milk", "works"])) == "works"


def test_random_spellable_is_seeded():
    picks = []
    for _ in range(2):
        p = create_player("random_spellable")
        p.reset(root="silkworm", seed=5)
        picks.append([p.next_word(_state(["silk", "worm", "milk", "slim"])) for _ in range(5)])
    assert picks[0] == picks[1]
    assert set(picks[0]) <= {"silk", "worm", "milk", "slim"}
