from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import tomli

from .errors import ConfigError
from .matchers import object as object_matcher, one_of, opt, string
from .shape import Shape, collect_mismatches

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "shapematch.toml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONFIG_SHAPE = Shape({
    "log_level": opt(one_of(LOG_LEVELS)),
    "shapes": opt(object_matcher),
})


@dataclass
class Settings:
    log_level: str = "WARNING"
    shapes: Dict[str, str] = field(default_factory=dict)


def parse_config(text: str, source: str = "<string>", table: str | None = None) -> Settings:
    """Parse TOML settings; ``table`` is a dotted path to a nested table such as ``tool.shapematch``."""
    try:
        raw: Dict[str, Any] = tomli.loads(text)
    except tomli.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {source}: {e}") from e
    if table:
        for part in table.split("."):
            raw = raw.get(part, {}) if isinstance(raw, dict) else {}
    if isinstance(raw, dict) and isinstance(raw.get("log_level"), str):
        raw = {**raw, "log_level": raw["log_level"].upper()}
    mismatches = CONFIG_SHAPE.check(raw)
    if not mismatches and "shapes" in raw:
        aliases = raw["shapes"]
        mismatches = collect_mismatches({alias: string for alias in aliases}, aliases, ("shapes",))
    if mismatches:
        raise ConfigError(f"Invalid config in {source}:\n" + "\n".join(mismatches))
    return Settings(
        log_level=raw.get("log_level", Settings.log_level),
        shapes=dict(raw.get("shapes", {})),
    )


def load_config(directory: Path | None = None) -> Settings:
    """Read ``shapematch.toml``, else ``[tool.shapematch]`` in ``pyproject.toml``, else defaults."""
    directory = Path.cwd() if directory is None else Path(directory)
    candidates = (
        (directory / CONFIG_FILENAME, None),
        (directory / "pyproject.toml", "tool.shapematch"),
    )
    for path, table in candidates:
        if not path.is_file():
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e
        logger.debug(f"Loading config from {path}")
        return parse_config(text, str(path), table)
    return Settings()
