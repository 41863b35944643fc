"""
Random Spellable player.

Strategy:
  - Choose uniformly at random from the admissible candidates still unused.

Deterministic across runs with the same seed (via BasePlayer.rng). A
baseline to check the pipeline end to end.
"""

from __future__ import annotations

from typing import List
from .base import BasePlayer, register


@register
class RandomSpellablePlayer(BasePlayer):
    id = "random_spellable"
    name = "Random Spellable"
    version = "1.0.0"

    def next_word(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        return candidates[self.rng.randrange(len(candidates))]
