"""Archetypes and their randomized attack policies.

Every archetype maps to a pure function ``(rng, actor) -> AttackOutcome``.
Draws happen in a fixed order per archetype so a scripted random source can
reproduce any battle:

  Precise   next_int(15,25)
  Agile     next_int(10,18), next_unit() < 0.2 -> double (critical)
  Heavy     next_unit() < 0.1 -> miss; otherwise next_int(20,30)
  Balanced  next_int(12,22), next_unit() < 0.3 -> self-heal next_int(5,10)
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, TYPE_CHECKING
from duelsim.core.errors import InvalidArgumentError
from duelsim.core.rng import RandomSource

if TYPE_CHECKING:
    from .combatant import Combatant

class Archetype(str, Enum):
    PRECISE = "precise"
    AGILE = "agile"
    HEAVY = "heavy"
    BALANCED = "balanced"

    @property
    def label(self) -> str:
        return ARCHETYPE_PROFILES[self].label

    @property
    def max_health(self) -> int:
        return ARCHETYPE_PROFILES[self].max_health

@dataclass(frozen=True)
class ArchetypeProfile:
    label: str
    max_health: int
    blurb: str

ARCHETYPE_PROFILES: Dict[Archetype, ArchetypeProfile] = {
    Archetype.PRECISE: ArchetypeProfile("CamilleDebugger", 100, "precise and strong, 15-25 damage"),
    Archetype.AGILE: ArchetypeProfile("KensemiCollon", 110, "quick, 10-18 damage, 20% critical for double"),
    Archetype.HEAVY: ArchetypeProfile("LanceBackend", 120, "heavy, 20-30 damage, 10% miss"),
    Archetype.BALANCED: ArchetypeProfile("JeffPancitCanton", 105, "balanced, 12-22 damage, 30% self-heal 5-10"),
}

CRIT_CHANCE = 0.2
MISS_CHANCE = 0.1
HEAL_CHANCE = 0.3

@dataclass(frozen=True)
class AttackOutcome:
    damage: int
    heal: int = 0
    critical: bool = False
    missed: bool = False

# ---------------------------------------------------------------------------
# Attack policies
# ---------------------------------------------------------------------------

def precise_attack(rng: RandomSource, actor: Optional["Combatant"] = None) -> AttackOutcome:
    return AttackOutcome(rng.next_int(15, 25))

def agile_attack(rng: RandomSource, actor: Optional["Combatant"] = None) -> AttackOutcome:
    damage = rng.next_int(10, 18)
    if rng.next_unit() < CRIT_CHANCE:
        return AttackOutcome(damage * 2, critical=True)
    return AttackOutcome(damage)

def heavy_attack(rng: RandomSource, actor: Optional["Combatant"] = None) -> AttackOutcome:
    # Miss is rolled first; a miss consumes no damage draw
    if rng.next_unit() < MISS_CHANCE:
        return AttackOutcome(0, missed=True)
    return AttackOutcome(rng.next_int(20, 30))

def balanced_attack(rng: RandomSource, actor: Optional["Combatant"] = None) -> AttackOutcome:
    damage = rng.next_int(12, 22)
    heal = 0
    if rng.next_unit() < HEAL_CHANCE:
        heal = rng.next_int(5, 10)
    return AttackOutcome(damage, heal=heal)

AttackFn = Callable[[RandomSource, Optional["Combatant"]], AttackOutcome]

ATTACKS: Dict[Archetype, AttackFn] = {
    Archetype.PRECISE: precise_attack,
    Archetype.AGILE: agile_attack,
    Archetype.HEAVY: heavy_attack,
    Archetype.BALANCED: balanced_attack,
}

def perform_attack(archetype: Archetype, rng: RandomSource, actor: Optional["Combatant"] = None) -> AttackOutcome:
    return ATTACKS[archetype](rng, actor)

def parse_archetype(name: str) -> Archetype:
    """Resolve a tag name ("Heavy") or character label ("LanceBackend"), case-insensitive."""
    if isinstance(name, Archetype):
        return name
    key = (name or "").strip().lower()
    for arch, profile in ARCHETYPE_PROFILES.items():
        if key == arch.value or key == profile.label.lower():
            return arch
    raise InvalidArgumentError(f"Invalid character selection: {name!r}")

__all__ = [
    "Archetype","ArchetypeProfile","ARCHETYPE_PROFILES","AttackOutcome","ATTACKS",
    "precise_attack","agile_attack","heavy_attack","balanced_attack",
    "perform_attack","parse_archetype","CRIT_CHANCE","MISS_CHANCE","HEAL_CHANCE",
]
