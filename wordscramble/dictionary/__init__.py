from .base import Dictionary
from .wordlist import WordListDictionary

__all__ = ["Dictionary", "WordListDictionary"]
