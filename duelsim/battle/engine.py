"""Two-combatant battle engine.

The first combatant always opens and turns strictly alternate. A turn is one
attack: damage goes to the opponent, any self-heal goes to the actor, then
both sides are checked for defeat. The engine never sleeps or prints; callers
either run it to completion or step it one turn at a time and pace it
themselves.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional
from duelsim.core.errors import InvalidArgumentError, InvalidStateError
from duelsim.core.logging import logger
from duelsim.core.rng import RandomSource, resolve
from .combatant import Combatant

DRAW_TEXT = "No one, it's a draw!"

class BattleState(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"

@dataclass(frozen=True)
class TurnEvent:
    turn: int
    actor: str
    target: str
    damage: int
    critical: bool = False
    missed: bool = False
    healed: int = 0
    actor_health: int = 0
    target_health: int = 0

    @property
    def message(self) -> str:
        return f"{self.actor} attacks {self.target} and deals {self.damage} damage."

@dataclass(frozen=True)
class BattleOutcome:
    winner: Optional[str] = None
    draw: bool = False

    @property
    def message(self) -> str:
        return f"Battle ended! Winner: {DRAW_TEXT if self.draw else self.winner}"

@dataclass
class BattleResult:
    events: List[TurnEvent] = field(default_factory=list)
    outcome: BattleOutcome = field(default_factory=BattleOutcome)

    @property
    def turns(self) -> int:
        return len(self.events)

    @property
    def winner(self) -> Optional[str]:
        return self.outcome.winner

    def log_lines(self) -> List[str]:
        return [e.message for e in self.events] + ["", self.outcome.message]

HpChangeCallback = Callable[[Combatant, int, int, dict], None]

class BattleEngine:
    def __init__(self, first: Combatant, second: Combatant, rng: Optional[RandomSource] = None,
                 message_cb: Optional[Callable[[str], None]] = None):
        if first is second:
            raise InvalidArgumentError("A combatant cannot battle itself.")
        for c in (first, second):
            if c.is_defeated():
                raise InvalidStateError(f"{c.name} is already defeated.")
            if not c.is_fresh():
                raise InvalidStateError(f"{c.name} is not at full health ({c.health}/{c.max_health}).")
        self.first = first
        self.second = second
        self.rng = resolve(rng)
        self.message_cb = message_cb
        # Optional callback for UI to observe HP changes
        self.hp_change_cb: Optional[HpChangeCallback] = None
        self.state = BattleState.NOT_STARTED
        self.turn = 0
        self.events: List[TurnEvent] = []
        self.outcome: Optional[BattleOutcome] = None

    def _msg(self, text: str):
        if self.message_cb:
            self.message_cb(text)

    def _notify_hp_change(self, target: Combatant, old_hp: int, meta: dict):
        if self.hp_change_cb and target.health != old_hp:
            self.hp_change_cb(target, old_hp, target.health, dict(meta))

    def is_over(self) -> bool:
        return self.state is BattleState.FINISHED

    def active(self) -> Combatant:
        """Combatant whose turn is next (first on odd turns)."""
        return self.first if self.turn % 2 == 0 else self.second

    def advance_one_turn(self) -> Optional[TurnEvent]:
        if self.state is BattleState.FINISHED:
            return None
        # A combatant knocked out between steps does not get to act
        if self.first.is_defeated() or self.second.is_defeated():
            self._finish()
            return None
        self.state = BattleState.IN_PROGRESS
        actor = self.active()
        target = self.second if actor is self.first else self.first
        self.turn += 1

        outcome = actor.attack(self.rng)
        old = target.health
        target.take_damage(outcome.damage)
        self._notify_hp_change(target, old, {"cause": "attack", "turn": self.turn})
        if outcome.heal:
            old = actor.health
            actor.heal(outcome.heal)
            self._notify_hp_change(actor, old, {"cause": "heal", "turn": self.turn})

        event = TurnEvent(
            turn=self.turn, actor=actor.name, target=target.name, damage=outcome.damage,
            critical=outcome.critical, missed=outcome.missed, healed=outcome.heal,
            actor_health=actor.health, target_health=target.health,
        )
        self.events.append(event)
        logger.debug("Turn", turn=self.turn, actor=actor.name, damage=outcome.damage,
                     heal=outcome.heal, target_hp=target.health)
        self._msg(event.message)

        if self.first.is_defeated() or self.second.is_defeated():
            self._finish()
        return event

    def _finish(self):
        a_down = self.first.is_defeated()
        b_down = self.second.is_defeated()
        if b_down and not a_down:
            self.outcome = BattleOutcome(winner=self.first.name)
        elif a_down and not b_down:
            self.outcome = BattleOutcome(winner=self.second.name)
        else:
            # Only one side takes damage per turn, so this needs a rule that hits both
            self.outcome = BattleOutcome(draw=True)
        self.state = BattleState.FINISHED
        self._msg("")
        self._msg(self.outcome.message)

    def run(self) -> BattleResult:
        while self.advance_one_turn() is not None:
            pass
        return self.result()

    def result(self) -> BattleResult:
        if self.outcome is None:
            raise InvalidStateError("Battle has not finished; no result yet.")
        return BattleResult(list(self.events), self.outcome)

def run_battle(first: Combatant, second: Combatant, rng: Optional[RandomSource] = None) -> BattleResult:
    return BattleEngine(first, second, rng).run()

__all__ = ["BattleEngine","BattleState","BattleResult","BattleOutcome","TurnEvent","run_battle","DRAW_TEXT"]
