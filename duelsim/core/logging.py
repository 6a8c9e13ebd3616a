"""
Lightweight logger used across the project.
Colored per level with colorama; extras are rendered as key=value pairs.
"""
from __future__ import annotations
import sys
from datetime import datetime, timezone
from typing import Literal, Any, TextIO, Optional

from colorama import Fore, Style, init as colorama_init

Level = Literal["DEBUG","INFO","WARN","ERROR"]
LEVELS = ("DEBUG","INFO","WARN","ERROR")

colorama_init()
COLORS = {
    "DEBUG": Fore.BLUE,
    "INFO": Fore.GREEN,
    "WARN": Fore.YELLOW,
    "ERROR": Fore.RED
}
RESET = Style.RESET_ALL

class Logger:
    _order = {"DEBUG":10,"INFO":20,"WARN":30,"ERROR":40}
    def __init__(self, level: Level = "INFO", stream: Optional[TextIO] = None):
        self.threshold = self._order[level]
        self.stream = stream

    def set_level(self, level: Level):
        self.threshold = self._order.get(level, 20)

    def is_enabled(self, lvl: Level) -> bool:
        return self._order[lvl] >= self.threshold

    def _emit(self, lvl: Level, msg: str, **extra: Any):
        if not self.is_enabled(lvl):
            return
        ts = datetime.now(timezone.utc).isoformat(timespec="seconds")
        extras = ""
        if extra:
            kv = " ".join(f"{k}={v}" for k,v in extra.items())
            extras = " " + kv
        color = COLORS[lvl]
        # Resolve stdout lazily so redirected/captured streams are honoured
        out = self.stream or sys.stdout
        out.write(f"{color}{ts} [{lvl}] {msg}{extras}{RESET}\n")

    def debug(self, msg: str, **kw): self._emit("DEBUG", msg, **kw)
    def info(self, msg: str, **kw): self._emit("INFO", msg, **kw)
    def warn(self, msg: str, **kw): self._emit("WARN", msg, **kw)
    def error(self, msg: str, **kw): self._emit("ERROR", msg, **kw)

logger = Logger("INFO")
