from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List, Optional
from duelsim.core.logging import logger, LEVELS

SETTINGS_FILENAME = ".duelsim_settings.json"

@dataclass
class SettingsData:
    turn_delay: float = 0.6        # seconds between rendered turns
    log_level: str = "INFO"        # DEBUG / INFO / WARN / ERROR
    seed: Optional[int] = None     # fixed seed for reproducible battles
    debug: bool = False            # Verbose per-turn logging

    def normalize(self):
        try:
            self.turn_delay = max(0.0, float(self.turn_delay))
        except (TypeError, ValueError):
            self.turn_delay = 0.6
        if self.log_level not in LEVELS:
            self.log_level = "INFO"
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            self.seed = None
        self.debug = bool(self.debug)

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = Path(path) if path is not None else cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Backfill missing fields (migration safe)
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def update(self, **changes):
        for k, v in changes.items():
            if v is not None and hasattr(self.data, k):
                setattr(self.data, k, v)
        self.data.normalize()
        self._notify()

    def apply_log_level(self):
        logger.set_level(self.data.log_level)  # type: ignore[arg-type]

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)
