"""Configuration utilities for bisectroot."""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping

from bisectroot.core.settings import set_solver_settings

from .schemas import AppConfig

__all__ = ["get_config", "get_default_config", "init_environment"]

logger = logging.getLogger(__name__)


def get_default_config() -> AppConfig:
    """Return the canonical configuration."""
    return AppConfig()


def get_config(overrides: Mapping[str, Any] | None = None) -> AppConfig:
    """Create a configuration, optionally applying ``overrides``.

    ``overrides`` is merged key by key over the defaults, so
    ``{"solver": {"precision": 1e-9}}`` leaves ``max_iteration`` untouched.
    """
    payload = get_default_config().model_dump()
    if overrides:
        _deep_update(payload, overrides)
    return AppConfig.model_validate(payload)


def init_environment(config: AppConfig | Mapping[str, Any] | None = None) -> AppConfig:
    """Configure logging, JAX and the global solver settings from ``config``."""
    if config is None:
        cfg = get_default_config()
    elif isinstance(config, AppConfig):
        cfg = config
    else:
        cfg = get_config(config)

    logging_cfg = cfg.logging
    logging.basicConfig(
        level=getattr(logging, logging_cfg.level, logging.INFO),
        format=logging_cfg.format,
        datefmt=logging_cfg.datefmt,
        force=logging_cfg.force,
    )

    from jax import config as jax_config

    jax_config.update("jax_enable_x64", bool(cfg.jax.enable_x64))

    settings = set_solver_settings(cfg.solver.to_settings())
    logger.debug(
        "Solver settings: precision=%.3e max_iteration=%d",
        settings.precision,
        settings.max_iteration,
    )
    return cfg


def _deep_update(target: MutableMapping[str, Any], updates: Mapping[str, Any]) -> None:
    for key, value in updates.items():
        if isinstance(value, Mapping):
            if key not in target or not isinstance(target[key], MutableMapping):
                target[key] = {}
            _deep_update(target[key], value)
        else:
            target[key] = value
