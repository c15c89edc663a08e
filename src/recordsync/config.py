from __future__ import annotations

from datetime import date, datetime, time
import logging
from pathlib import Path
from typing import TypeAlias
import tomllib

from recordsync.records.filters import CONSTRUCTOR_FILTERS, DEFAULT_CONSTRUCTOR_FILTER
from recordsync.records.model import (
    DEFAULT_CONSTRUCTOR_SUMMARY,
    DEFAULT_MODIFIER_NAME,
    DEFAULT_MODIFIER_SUMMARY,
    RecordsConfig,
)

DEFAULT_CONFIG_NAME = "recordsync.toml"

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]

logger = logging.getLogger(__name__)


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError:
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        logger.warning("Ignoring malformed %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def records_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("records", {})
    return section if isinstance(section, dict) else {}


def _normalize_name_list(value: TomlValue) -> list[str]:
    items: list[str] = []
    if value is None:
        return items
    if isinstance(value, str):
        items = [part.strip() for part in value.split(",") if part.strip()]
    elif isinstance(value, (list, tuple, set)):
        for item in value:
            if isinstance(item, str):
                items.extend([part.strip() for part in item.split(",") if part.strip()])
    return [item for item in items if item]


def _text(value: TomlValue, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged


def records_config(section: TomlTable | None) -> RecordsConfig:
    if not isinstance(section, dict):
        return RecordsConfig()
    filter_name = _text(section.get("constructor_filter"), DEFAULT_CONSTRUCTOR_FILTER)
    constructor_filter = CONSTRUCTOR_FILTERS.get(filter_name)
    if constructor_filter is None:
        logger.warning(
            "Unknown constructor_filter %r; using %r", filter_name, DEFAULT_CONSTRUCTOR_FILTER
        )
        constructor_filter = CONSTRUCTOR_FILTERS[DEFAULT_CONSTRUCTOR_FILTER]
    return RecordsConfig(
        modifier_name=_text(section.get("modifier_name"), DEFAULT_MODIFIER_NAME),
        constructor_filter=constructor_filter,
        non_nullable_types=frozenset(_normalize_name_list(section.get("non_nullable_types"))),
        constructor_summary=_text(section.get("constructor_summary"), DEFAULT_CONSTRUCTOR_SUMMARY),
        modifier_summary=_text(section.get("modifier_summary"), DEFAULT_MODIFIER_SUMMARY),
    )
