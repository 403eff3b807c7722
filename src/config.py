"""Settings for the board front end.

Resolution order per key: real environment variable > project .env file >
built-in default. Recognised keys:

- KANBAN_CARD_HEIGHT   card height in pixels (default 100)
- KANBAN_CARD_MARGIN   vertical margin above and below a card (default 5)
- KANBAN_ALT_SCREEN    use the terminal alternate screen (default on)
- KANBAN_LOG_LEVEL     logging level name (default WARNING)
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional
from layout import CARD_HEIGHT, CARD_VERTICAL_MARGIN, card_cell_height

logger = logging.getLogger(__name__)

ENV_FILE = Path(__file__).resolve().parent.parent / '.env'
KEYS = ('KANBAN_CARD_HEIGHT', 'KANBAN_CARD_MARGIN', 'KANBAN_ALT_SCREEN', 'KANBAN_LOG_LEVEL')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def read_env_file(path: Path) -> Dict[str, str]:
    """Parse ``KEY=value`` lines for the recognised keys; unknown keys are ignored."""
    overrides: Dict[str, str] = {}
    if not path.exists():
        return overrides
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        if k in KEYS:
            overrides[k] = v.strip().strip('"').strip("'")
    return overrides


def _number(raw: Optional[str], default: float, key: str) -> float:
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {key}={raw!r}: not a number, using {default}")
        return default
    if value < 0:
        logger.warning(f"Ignoring {key}={raw!r}: negative, using {default}")
        return default
    return value


@dataclass
class Settings:
    card_height: float = CARD_HEIGHT
    card_margin: float = CARD_VERTICAL_MARGIN
    alt_screen: bool = True
    log_level: str = 'WARNING'

    @property
    def cell_height(self) -> float:
        return card_cell_height(self.card_height, self.card_margin)


def load_settings(environ: Optional[Mapping[str, str]] = None, env_file: Optional[Path] = None) -> Settings:
    environ = os.environ if environ is None else environ
    file_values = read_env_file(ENV_FILE if env_file is None else env_file)

    def lookup(key: str) -> Optional[str]:
        return environ[key] if key in environ else file_values.get(key)

    level = (lookup('KANBAN_LOG_LEVEL') or 'WARNING').strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Ignoring KANBAN_LOG_LEVEL={level!r}, using WARNING")
        level = 'WARNING'
    settings = Settings(
        card_height=_number(lookup('KANBAN_CARD_HEIGHT'), CARD_HEIGHT, 'KANBAN_CARD_HEIGHT'),
        card_margin=_number(lookup('KANBAN_CARD_MARGIN'), CARD_VERTICAL_MARGIN, 'KANBAN_CARD_MARGIN'),
        alt_screen=truthy_env(lookup('KANBAN_ALT_SCREEN'), True),
        log_level=level,
    )
    if settings.cell_height <= 0:
        logger.warning("Card geometry gives a zero cell height, using defaults")
        settings.card_height = CARD_HEIGHT
        settings.card_margin = CARD_VERTICAL_MARGIN
    return settings
