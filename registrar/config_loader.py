"""Config loader — parse domain-mcp.yaml and apply environment overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from contracts.config import RegistrarConfig
from contracts.errors import ConfigError

CONFIG_ENV = "DOMAIN_MCP_CONFIG"
DEFAULT_PATH = "./domain-mcp.yaml"
SANDBOX_ENV = "DYNADOT_SANDBOX"


def resolve_path(path: str | None = None, env: Mapping[str, str] | None = None) -> tuple[Path, bool]:
    """Return ``(path, explicit)``; a missing non-explicit file means defaults."""
    env = os.environ if env is None else env
    if path:
        return Path(path), True
    if env.get(CONFIG_ENV):
        return Path(env[CONFIG_ENV]), True
    return Path(DEFAULT_PATH), False


def load_config(path: str | None = None, env: Mapping[str, str] | None = None) -> RegistrarConfig:
    """Load and validate the runtime config, then apply environment overrides."""
    env = os.environ if env is None else env
    p, explicit = resolve_path(path, env)

    if p.exists():
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a YAML mapping, got {type(data).__name__}")
    elif explicit:
        raise FileNotFoundError(f"Config not found: {p}")
    else:
        data = {}

    try:
        config = RegistrarConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {p}: {exc}") from exc
    return apply_env(config, env)


def apply_env(config: RegistrarConfig, env: Mapping[str, str]) -> RegistrarConfig:
    """Fill the API key and sandbox flag from the environment."""
    api = config.api
    updates: dict[str, object] = {}
    if not api.api_key and env.get(api.api_key_env):
        updates["api_key"] = env[api.api_key_env]
    if env.get(SANDBOX_ENV, "").lower() == "true":
        updates["sandbox"] = True
    if not updates:
        return config
    return config.model_copy(update={"api": api.model_copy(update=updates)})
