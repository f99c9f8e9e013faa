"""Configuration loading utilities for utf8text."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .paths import local_config_path, runtime_config_dir
from .scanner import ScannerConfig
from .width import DEFAULT_TABLE

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class WidthConfig(BaseModel):
    table: str = Field(default=DEFAULT_TABLE, description="Registered width table name")

    @field_validator("table")
    @classmethod
    def _validate_table(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Width table name must not be empty")
        return value


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.upper() not in _LEVELS:
            raise ValueError(f"Unknown logging level: {value}")
        return value


class AppConfig(BaseModel):
    width: WidthConfig = Field(default_factory=WidthConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def scanner_config(self) -> ScannerConfig:
        return ScannerConfig(width_table=self.width.table)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield local_config_path()
    yield runtime_config_dir() / "config.yaml"


def find_config_file(path: Optional[Path] = None) -> Optional[Path]:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Optional[Path] = None) -> AppConfig:
    candidate = find_config_file(path)
    if candidate is None:
        return DEFAULT_CONFIG.model_copy(deep=True)
    with candidate.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    try:
        return AppConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
