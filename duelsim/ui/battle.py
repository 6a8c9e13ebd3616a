"""Terminal battle rendering with rich.

Drives a :class:`BattleEngine` one turn at a time, printing an HP table, one
line per turn and a winner banner. Pacing happens here (``sleep`` between
turns); the engine itself never waits.
"""
from __future__ import annotations
import time
from typing import Callable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.table import Table
from rich.align import Align
from rich.box import ROUNDED, DOUBLE

from duelsim.battle.combatant import Combatant
from duelsim.battle.engine import BattleEngine, BattleOutcome, BattleResult, TurnEvent
from duelsim.battle.archetypes import ARCHETYPE_PROFILES
from duelsim.battle.factory import available_archetypes

console = Console()

def _hp_style(ratio: float) -> str:
    if ratio >= 0.5:
        return "green"
    if ratio >= 0.2:
        return "yellow"
    return "red"

def hp_bar(cur: int, max_hp: int, width: int = 24) -> Text:
    """Block HP bar, green above half, yellow above a fifth, red below."""
    if max_hp <= 0:
        max_hp = 1
    cur = max(0, min(cur, max_hp))
    ratio = cur / max_hp
    filled = max(0, min(width, int(round(ratio * width))))
    bar = Text("[")
    bar.append("█" * filled, style=_hp_style(ratio))
    bar.append("░" * (width - filled), style="grey37")
    bar.append(f"] {cur}/{max_hp}")
    return bar

def status_table(first: Combatant, second: Combatant) -> Table:
    table = Table(box=ROUNDED, show_header=True, header_style="bold bright_cyan")
    table.add_column("Fighter", style="bold")
    table.add_column("Health")
    for c in (first, second):
        table.add_row(c.name, hp_bar(c.health, c.max_health))
    return table

def archetype_table() -> Table:
    table = Table(title="Characters", box=ROUNDED, header_style="bold bright_cyan")
    table.add_column("Class")
    table.add_column("Label")
    table.add_column("HP", justify="right")
    table.add_column("Style")
    for arch, label, hp in available_archetypes():
        table.add_row(arch.value.capitalize(), label, str(hp), ARCHETYPE_PROFILES[arch].blurb)
    return table

def event_line(event: TurnEvent) -> Text:
    line = Text(f"[{event.turn:>2}] ", style="dim")
    line.append(event.message)
    if event.critical:
        line.append("  Critical hit!", style="bold magenta")
    if event.missed:
        line.append("  Missed!", style="bold yellow")
    if event.healed:
        line.append(f"  {event.actor} recovers {event.healed} HP.", style="green")
    return line

def outcome_panel(outcome: BattleOutcome) -> Panel:
    text = Text(outcome.message, justify="center", style="bold gold1")
    return Panel(text, box=DOUBLE, border_style="gold1")

def error_panel(message: str) -> Panel:
    return Panel(Text(message, style="bold red"), title="Error", border_style="red")

def play_battle(engine: BattleEngine, *, out: Optional[Console] = None, delay: float = 0.6,
                sleep: Callable[[float], None] = time.sleep) -> BattleResult:
    out = out or console
    out.print(Align.center(Text("Battle Start!", style="bold bright_white")))
    out.print(status_table(engine.first, engine.second))
    while True:
        event = engine.advance_one_turn()
        if event is None:
            break
        out.print(event_line(event))
        if delay > 0:
            sleep(delay)
    out.print(status_table(engine.first, engine.second))
    result = engine.result()
    out.print(outcome_panel(result.outcome))
    return result

__all__ = ["hp_bar","status_table","archetype_table","event_line","outcome_panel","error_panel","play_battle","console"]
