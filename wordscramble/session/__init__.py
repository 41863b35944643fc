from .core import Session, load_start_words, start_session, start_session_from_file, restart, submit_word

__all__ = ["Session", "load_start_words", "start_session", "start_session_from_file", "restart", "submit_word"]
