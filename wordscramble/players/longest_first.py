"""
Longest First player.

Strategy:
  - Submit the longest remaining candidate; ties go alphabetically.

Notes:
  - Since every accepted word is worth len(word) + words_so_far, the order of
    play does not change the final score when all candidates are found; it
    only front-loads points, which matters under a turn budget.
"""

from __future__ import annotations

from typing import List
from .base import BasePlayer, register


@register
class LongestFirstPlayer(BasePlayer):
    id = "longest_first"
    name = "Longest First"
    version = "1.0.0"

    def next_word(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        return min(candidates, key=lambda w: (-len(w), w))
