"""
Battle package.
- archetypes.py (Archetype tags, attack policies, AttackOutcome)
- combatant.py (Combatant with clamped health)
- factory.py (create_combatant by archetype name)
- engine.py (turn loop, events, outcome)
- service.py (factory + engine + logging)
"""
from .archetypes import Archetype, AttackOutcome
from .combatant import Combatant
from .factory import create_combatant, available_archetypes
from .engine import BattleEngine, BattleResult, BattleOutcome, BattleState, TurnEvent, run_battle
from .service import battle_service, BattleService
__all__ = [
    "Archetype","AttackOutcome","Combatant","create_combatant","available_archetypes",
    "BattleEngine","BattleResult","BattleOutcome","BattleState","TurnEvent","run_battle",
    "battle_service","BattleService",
]
