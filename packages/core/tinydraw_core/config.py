"""Persistent drawing settings schema and load/save helpers."""

from __future__ import annotations

import json
import logging
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 2

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PngConfig:
    compress_level: int = 6
    optimize: bool = False


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    console: bool = False
    keep_files: int = 7


@dataclass
class DrawConfig:
    config_version: int = CONFIG_VERSION
    png: PngConfig = field(default_factory=PngConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG = DrawConfig()


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "TinyDraw"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "TinyDraw"
    return Path.home() / ".config" / "tinydraw"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_png(cfg: DrawConfig) -> None:
    try:
        level = int(cfg.png.compress_level)
    except (TypeError, ValueError):
        level = PngConfig.compress_level
    cfg.png.compress_level = max(0, min(9, level))
    cfg.png.optimize = bool(cfg.png.optimize)


def _normalize_logging(cfg: DrawConfig) -> None:
    level = str(cfg.logging.level).upper()
    cfg.logging.level = level if level in _LEVEL_NAMES else LoggingConfig.level
    cfg.logging.console = bool(cfg.logging.console)
    try:
        keep = int(cfg.logging.keep_files)
    except (TypeError, ValueError):
        keep = LoggingConfig.keep_files
    cfg.logging.keep_files = max(2, keep)


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 kept the log level at top level as "log_level".
        logging_section = dict(data.get("logging", {}) or {})
        if "log_level" in data:
            logging_section.setdefault("level", data.pop("log_level"))
        data["logging"] = logging_section
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> DrawConfig:
    path = path or config_path()
    if not path.exists():
        return DrawConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logging.getLogger("tinydraw.config").warning(
            "unreadable config, using defaults", extra={"event": "config_unreadable"}
        )
        return DrawConfig()
    if not isinstance(raw, dict):
        return DrawConfig()

    data = _migrate(raw)
    cfg = DrawConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        png=_merge(PngConfig, data.get("png", {})),
        logging=_merge(LoggingConfig, data.get("logging", {})),
    )

    _normalize_png(cfg)
    _normalize_logging(cfg)
    return cfg


def save_config(cfg: DrawConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
