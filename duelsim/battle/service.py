"""Battle service: build two combatants from archetype names and fight them.

The one-call entry used by the CLI. Logging of battle start/end lives here so
the engine itself stays quiet.
"""
from __future__ import annotations
from typing import Callable, Optional, Protocol, runtime_checkable
from duelsim.core.logging import logger
from duelsim.core.rng import RandomSource, SeededRandom
from .engine import BattleEngine, BattleResult
from .factory import create_combatant, require_archetype, require_display_name

@runtime_checkable
class IBattleService(Protocol):
    def prepare(self, archetype1: str, name1: str, archetype2: str, name2: str, *,
                seed: Optional[int] = None, message_cb: Optional[Callable[[str], None]] = None) -> BattleEngine: ...
    def start(self, archetype1: str, name1: str, archetype2: str, name2: str, *,
              seed: Optional[int] = None, message_cb: Optional[Callable[[str], None]] = None) -> BattleResult: ...
    def report(self, result: BattleResult) -> None: ...

class BattleService:
    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng

    def _rng_for(self, seed: Optional[int]) -> Optional[RandomSource]:
        if seed is not None:
            return SeededRandom(seed)
        return self.rng

    def prepare(self, archetype1: str, name1: str, archetype2: str, name2: str, *,
                seed: Optional[int] = None, message_cb: Optional[Callable[[str], None]] = None) -> BattleEngine:
        """Validate both selections and return an engine ready to be stepped.

        Both names are checked before either character selection.
        """
        require_display_name(name1, "Player 1")
        require_display_name(name2, "Player 2")
        require_archetype(archetype1, "Player 1")
        require_archetype(archetype2, "Player 2")
        first = create_combatant(archetype1, name1, who="Player 1")
        second = create_combatant(archetype2, name2, who="Player 2")
        engine = BattleEngine(first, second, self._rng_for(seed), message_cb=message_cb)
        logger.info("BattleStart", first=first.name, second=second.name, seed=seed)
        return engine

    def start(self, archetype1: str, name1: str, archetype2: str, name2: str, *,
              seed: Optional[int] = None, message_cb: Optional[Callable[[str], None]] = None) -> BattleResult:
        engine = self.prepare(archetype1, name1, archetype2, name2, seed=seed, message_cb=message_cb)
        result = engine.run()
        self.report(result)
        return result

    def report(self, result: BattleResult) -> None:
        logger.info("BattleEnd", turns=result.turns, winner=result.winner, draw=result.outcome.draw)

battle_service: IBattleService = BattleService()
