from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


@dataclass(slots=True)
class Settings:
    analysis_config_path: str
    symbols_path: str
    opencc_conversion: str
    log_level: str


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    replaces: dict[str, str]
    aliases: dict[str, str]
    terms: list[str]
    hanzi_percentage: float
    ignore_all_hanzi: bool
    ignore_all_hiragana: bool
    ignore_list_path: str


@dataclass(frozen=True, slots=True)
class SymbolTable:
    fiat_signs: list[str]


def load_dotenv(dotenv_path: str = ".env") -> None:
    path = Path(dotenv_path)
    if not path.exists():
        return
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip().strip("\"").strip("'"))


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        analysis_config_path=os.getenv("ANALYSIS_CONFIG_PATH", "config.json").strip(),
        symbols_path=os.getenv("SYMBOLS_PATH", "cmc.json").strip(),
        opencc_conversion=os.getenv("OPENCC_CONVERSION", "hk2s").strip(),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
    )


def _read_json(path: Path, what: str) -> Any:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {what} at {path}: {exc}") from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{what} at {path} is not valid JSON: {exc}") from exc


def _str_mapping(data: dict[str, Any], key: str) -> dict[str, str]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"{key} must be an object")
    for k, v in value.items():
        if not isinstance(v, str):
            raise ConfigError(f"{key}[{k!r}] must be a string")
    return dict(value)


def _flag(data: dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be a boolean")
    return value


def load_analysis_config(config_path: str) -> AnalysisConfig:
    path = Path(config_path)
    data = _read_json(path, "analysis config")
    if not isinstance(data, dict):
        raise ConfigError("analysis config must be a JSON object")

    terms = data.get("terms", [])
    if not isinstance(terms, list) or not all(isinstance(t, str) for t in terms):
        raise ConfigError("terms must be a list of strings")

    hanzi_percentage = data.get("hanzi_percentage")
    if isinstance(hanzi_percentage, bool) or not isinstance(hanzi_percentage, (int, float)):
        raise ConfigError("hanzi_percentage must be a number")

    ignore_list_path = data.get("ignore_list_path")
    if not isinstance(ignore_list_path, str) or not ignore_list_path.strip():
        raise ConfigError("ignore_list_path is required")
    ignore_path = Path(ignore_list_path)
    if not ignore_path.is_absolute():
        ignore_path = path.parent / ignore_path

    config = AnalysisConfig(
        replaces=_str_mapping(data, "replaces"),
        aliases=_str_mapping(data, "aliases"),
        terms=list(terms),
        hanzi_percentage=float(hanzi_percentage),
        ignore_all_hanzi=_flag(data, "ignore_all_hanzi"),
        ignore_all_hiragana=_flag(data, "ignore_all_hiragana"),
        ignore_list_path=str(ignore_path),
    )
    logger.info(
        "analysis config loaded path=%s replaces=%s aliases=%s terms=%s",
        path,
        len(config.replaces),
        len(config.aliases),
        len(config.terms),
    )
    return config


def load_symbol_table(symbols_path: str) -> SymbolTable:
    data = _read_json(Path(symbols_path), "symbol table")
    if not isinstance(data, dict):
        raise ConfigError("symbol table must be a JSON object")
    fiat = data.get("fiat", [])
    if not isinstance(fiat, list):
        raise ConfigError("symbol table fiat must be a list")

    signs: list[str] = []
    for item in fiat:
        if not isinstance(item, dict) or not isinstance(item.get("sign"), str):
            raise ConfigError(f"fiat entry without a sign: {item!r}")
        if item["sign"]:
            signs.append(item["sign"])
    return SymbolTable(fiat_signs=signs)
