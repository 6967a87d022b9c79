"""Pydantic-based configuration schemas and helpers."""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from bisectroot.core.settings import (
    DEFAULT_MAX_ITERATION,
    DEFAULT_PRECISION,
    SolverSettings,
)


class SolverConfig(BaseModel):
    """Bisection tolerances parsed from YAML."""

    model_config = ConfigDict(extra="forbid")

    precision: float = Field(
        default=DEFAULT_PRECISION,
        gt=0.0,
        description="Convergence threshold on |f(x)| and on the bracket width",
    )
    max_iteration: int = Field(
        default=DEFAULT_MAX_ITERATION,
        gt=0,
        description="Hard cap on bracketing iterations",
    )

    @field_validator("precision")
    @classmethod
    def validate_precision(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("precision must be finite")
        return value

    def to_settings(self) -> SolverSettings:
        """Convert to the runtime :class:`~bisectroot.core.settings.SolverSettings`."""
        return SolverSettings(precision=self.precision, max_iteration=self.max_iteration)


class LoggingConfig(BaseModel):
    """Arguments forwarded to :func:`logging.basicConfig`."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", description="Root logger level name")
    format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    force: bool = True

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        canonical = value.upper()
        if not isinstance(logging.getLevelName(canonical), int):
            raise ValueError(f"unknown logging level '{value}'")
        return canonical


class JaxConfig(BaseModel):
    """JAX runtime flags relevant to evaluators written with ``jax.numpy``."""

    model_config = ConfigDict(extra="forbid")

    enable_x64: bool = Field(
        default=True, description="Evaluate in double precision"
    )


class AppConfig(BaseModel):
    """Top-level configuration container."""

    model_config = ConfigDict(extra="forbid")

    solver: SolverConfig = Field(default_factory=SolverConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    jax: JaxConfig = Field(default_factory=JaxConfig)


class ConfigValidationError(RuntimeError):
    """Raised when one or more configuration files fail validation."""

    def __init__(self, errors: list[tuple[Path, ValidationError]]):
        message_lines = ["Configuration validation failed:"]
        for path, error in errors:
            message_lines.append(f"- {path}: {error}")
        super().__init__("\n".join(message_lines))
        self.errors = errors


def _load_yaml(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration at {path} must contain a mapping")
    return data


def load_config(path: Path | str) -> AppConfig:
    """Load a configuration file into an :class:`AppConfig`."""
    target = Path(path)
    payload = _load_yaml(target)
    return AppConfig.model_validate(payload)


def discover_config_files(paths: Iterable[Path | str]) -> list[Path]:
    """Discover YAML configuration files from provided paths."""
    discovered: list[Path] = []
    seen = set()
    for raw_path in paths:
        path = Path(raw_path)
        if path.is_file() and path.suffix in {".yml", ".yaml"}:
            resolved = path.resolve()
            if resolved not in seen:
                discovered.append(resolved)
                seen.add(resolved)
        elif path.is_dir():
            for pattern in ("*.yml", "*.yaml"):
                for candidate in sorted(path.rglob(pattern)):
                    resolved = candidate.resolve()
                    if resolved not in seen:
                        discovered.append(resolved)
                        seen.add(resolved)
    return discovered


def collect_and_validate(paths: Iterable[Path | str]) -> list[AppConfig]:
    """Validate all configuration files under the given paths."""
    files = discover_config_files(paths)
    errors: list[tuple[Path, ValidationError]] = []
    configs: list[AppConfig] = []
    for file in files:
        try:
            configs.append(load_config(file))
        except ValidationError as error:
            errors.append((file, error))
    if errors:
        raise ConfigValidationError(errors)
    return configs


__all__ = [
    "SolverConfig",
    "LoggingConfig",
    "JaxConfig",
    "AppConfig",
    "load_config",
    "discover_config_files",
    "collect_and_validate",
    "ConfigValidationError",
]
