from .normalize import normalize
from .constraints import MIN_WORD_LENGTH, is_spellable, spellable_words
from .scoring import score_increment, apply_increment
from .validation import Rejection, Verdict, validate_word

__all__ = [
    "normalize",
    "is_spellable",
    "spellable_words",
    "score_increment",
    "apply_increment",
    "MIN_WORD_LENGTH",
    "Rejection",
    "Verdict",
    "validate_word",
]
