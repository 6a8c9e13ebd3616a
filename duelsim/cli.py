"""Command-line entry: pick two fighters and watch them battle."""
from __future__ import annotations
import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.prompt import Prompt

from duelsim.core.errors import DuelSimError
from duelsim.core.logging import logger, LEVELS
from duelsim.system.settings import Settings
from duelsim.battle.service import battle_service
from duelsim.ui.battle import archetype_table, error_panel, play_battle, console as default_console

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="duelsim", description="Turn-based two-fighter battle simulator")
    p.add_argument("--name1", help="Player 1 display name")
    p.add_argument("--class1", help="Player 1 character (Precise/Agile/Heavy/Balanced or its label)")
    p.add_argument("--name2", help="Player 2 display name")
    p.add_argument("--class2", help="Player 2 character")
    p.add_argument("--seed", type=int, help="Seed for a reproducible battle")
    p.add_argument("--delay", type=float, help="Seconds between turns (default from settings, 0.6)")
    p.add_argument("--log-level", choices=LEVELS, help="Logger threshold")
    p.add_argument("--settings", type=Path, help="Settings file to use instead of ~/.duelsim_settings.json")
    p.add_argument("--save", action="store_true", help="Persist --seed/--delay/--log-level to the settings file")
    p.add_argument("--list", action="store_true", help="List the available characters and exit")
    return p

def _ask(value: Optional[str], prompt: str, out: Console) -> str:
    if value is not None:
        return value
    return Prompt.ask(prompt, console=out)

def run(argv: Optional[List[str]] = None, out: Optional[Console] = None) -> int:
    out = out or default_console
    args = build_parser().parse_args(argv)
    settings = Settings.load(args.settings)
    settings.update(turn_delay=args.delay, seed=args.seed, log_level=args.log_level)
    settings.apply_log_level()
    if settings.data.debug:
        logger.set_level("DEBUG")
    if args.save:
        settings.save()
    if args.list:
        out.print(archetype_table())
        return 0
    try:
        name1 = _ask(args.name1, "Player 1 name", out)
        class1 = _ask(args.class1, "Player 1 character", out)
        name2 = _ask(args.name2, "Player 2 name", out)
        class2 = _ask(args.class2, "Player 2 character", out)
        engine = battle_service.prepare(class1, name1, class2, name2, seed=settings.data.seed)
    except DuelSimError as e:
        logger.warn("BattleSetupRejected", error=str(e))
        out.print(error_panel(str(e)))
        return 2
    result = play_battle(engine, out=out, delay=settings.data.turn_delay)
    battle_service.report(result)
    return 0
