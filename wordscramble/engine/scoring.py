"""
Score keeping for accepted words.

Formula:
  increment = len(accepted_word) + history_size_before_insertion

Length rewards longer words; the running count rewards sustained play, so
each new word is worth more than the previous one at equal length. Since
both operands are non-negative the cumulative score never decreases.

Only call these from the accepted branch of a verdict.
"""


def score_increment(accepted_word_length: int, history_size_before_insertion: int) -> int:
    """
    Points earned by an accepted word.

    Examples:
      score_increment(4, 0) -> 4   # first word "silk"
      score_increment(4, 1) -> 5   # second word "worm"
    """
    if accepted_word_length < 0 or history_size_before_insertion < 0:
        raise ValueError(
            f"score operands must be non-negative; got length={accepted_word_length}, "
            f"history={history_size_before_insertion}"
        )
    return accepted_word_length + history_size_before_insertion


def apply_increment(current_score: int, increment: int) -> int:
    """Return the new cumulative score."""
    if current_score < 0 or increment < 0:
        raise ValueError(
            f"score operands must be non-negative; got score={current_score}, increment={increment}"
        )
    return current_score + increment
