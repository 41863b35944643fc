from .io import read_lines, load_word_list, START_WORDS_PATH, DICTIONARY_PATH
from .validator import validate_wordlists, pretty_summary

__all__ = [
    "read_lines",
    "load_word_list",
    "START_WORDS_PATH",
    "DICTIONARY_PATH",
    "validate_wordlists",
    "pretty_summary",
]
