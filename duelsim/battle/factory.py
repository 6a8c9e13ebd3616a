"""Factory helpers for constructing Combatant instances from archetype names.

Shared across the battle service, the CLI and tests. Names are checked before
character selections, and messages say whose input was rejected.
"""
from __future__ import annotations
from typing import List, Optional, Tuple
from duelsim.core.errors import InvalidArgumentError
from .archetypes import ARCHETYPE_PROFILES, Archetype, parse_archetype
from .combatant import Combatant

def available_archetypes() -> List[Tuple[Archetype, str, int]]:
    return [(arch, p.label, p.max_health) for arch, p in ARCHETYPE_PROFILES.items()]

def require_display_name(display_name: Optional[str], who: str = "Display") -> str:
    display = (display_name or "").strip()
    if not display:
        raise InvalidArgumentError(f"{who} name cannot be empty.")
    return display

def require_archetype(archetype_name: Optional[str], who: str = "Player") -> Archetype:
    if isinstance(archetype_name, Archetype):
        return archetype_name
    if not (archetype_name or "").strip():
        raise InvalidArgumentError(f"{who} must select a character.")
    return parse_archetype(archetype_name)

def create_combatant(archetype_name: str, display_name: str, max_health: Optional[int] = None,
                     *, who: Optional[str] = None) -> Combatant:
    display = require_display_name(display_name, who or "Display")
    archetype = require_archetype(archetype_name, who or "Player")
    profile = ARCHETYPE_PROFILES[archetype]
    hp = profile.max_health if max_health is None else max_health
    # Player input followed by the character label, e.g. "Ana (LanceBackend)"
    return Combatant(f"{display} ({profile.label})", hp, archetype)

__all__ = ["create_combatant","available_archetypes","require_display_name","require_archetype"]
