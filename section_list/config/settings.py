from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any
import json
import logging
import os

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def parse_flag(value: Any) -> bool:
    """``True``/``False`` as is; strings are true only for 1/true/yes/on."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def parse_log_level(value: Any, default: str = "INFO") -> str:
    """Upper-cased level name, or *default* when logging does not know it."""
    name = str(value).strip().upper()
    # getLevelName maps known names to their int level and anything else to a str
    if isinstance(logging.getLevelName(name), int):
        return name
    logger.warning("Unknown log level %r, using %s", value, default)
    return default


@dataclass(frozen=True)
class Settings:
    """Application configuration values.

    Built from an optional ``settings.json`` file and/or environment
    variables; anything not given keeps the class default.
    """

    sections_json_path: Path = Path("sections.json")
    strict_categories: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_file(cls, path: Path | str = Path("settings.json")) -> "Settings":
        """Create ``Settings`` reading values from *path* if it exists.

        Any missing values fall back to the class defaults.
        """

        defaults = cls()
        cfg_path = Path(path)
        if not cfg_path.exists():
            return defaults

        data = json.loads(cfg_path.read_text(encoding="utf-8") or "{}")
        if not isinstance(data, dict):
            raise ValueError(f"{cfg_path} must contain a JSON object")

        strict = data.get("strict_categories")
        level = data.get("log_level")
        return cls(
            sections_json_path=Path(
                data.get("sections_json_path", defaults.sections_json_path)
            ),
            strict_categories=(
                defaults.strict_categories if strict is None else parse_flag(strict)
            ),
            log_level=defaults.log_level if level is None else parse_log_level(level),
        )

    @classmethod
    def from_env(cls, path: Path | str = Path("settings.json")) -> "Settings":
        """Create ``Settings`` using environment variables.

        ``SECTIONS_JSON_PATH``, ``STRICT_CATEGORIES`` and
        ``SECTION_LIST_LOG_LEVEL`` override values loaded from
        ``settings.json``.
        """

        base = cls.from_file(path)
        json_path = os.getenv("SECTIONS_JSON_PATH")
        strict = os.getenv("STRICT_CATEGORIES")
        log_level = os.getenv("SECTION_LIST_LOG_LEVEL")

        return cls(
            sections_json_path=Path(json_path) if json_path else base.sections_json_path,
            strict_categories=base.strict_categories if strict is None else parse_flag(strict),
            log_level=(
                parse_log_level(log_level, base.log_level) if log_level else base.log_level
            ),
        )
