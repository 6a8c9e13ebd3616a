"""Combatant: a named fighter with clamped health and an archetype."""
from __future__ import annotations
from duelsim.core.errors import InvalidArgumentError
from duelsim.core.rng import RandomSource
from .archetypes import Archetype, AttackOutcome, perform_attack

class Combatant:
    def __init__(self, name: str, max_health: int, archetype: Archetype):
        if isinstance(max_health, bool) or not isinstance(max_health, int) or max_health <= 0:
            raise InvalidArgumentError(f"max_health must be a positive integer, got {max_health!r}")
        self.name = name
        self.archetype = archetype
        self._max_health = max_health
        self._health = max_health

    @property
    def max_health(self) -> int:
        return self._max_health

    @property
    def health(self) -> int:
        return self._health

    def _set_health(self, value: int):
        self._health = max(0, min(self._max_health, int(value)))

    def take_damage(self, amount: int):
        self._set_health(self._health - max(0, int(amount)))

    def heal(self, amount: int):
        self._set_health(self._health + max(0, int(amount)))

    def is_defeated(self) -> bool:
        return self._health == 0

    def is_fresh(self) -> bool:
        return self._health == self._max_health

    def attack(self, rng: RandomSource) -> AttackOutcome:
        return perform_attack(self.archetype, rng, self)

    def __repr__(self) -> str:
        return f"Combatant({self.name!r}, {self._health}/{self._max_health}, {self.archetype.value})"

__all__ = ["Combatant"]
