"""Configuration loading from CLI args, env vars, and optional YAML file."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping

import yaml

from endpoint_extractor.reader import default_log_dir

logger = logging.getLogger(__name__)


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    log_dir: str | None = None
    output_dir: str = "."
    strict: bool = True
    workers: int = 1
    encoding: str = "utf-8"
    log_level: str = "INFO"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(cli_args=None, yaml_data: dict | None = None,
                environ: Mapping[str, str] | None = None) -> Config:
    """Build Config with precedence CLI flag > env var > YAML key > default."""
    env = os.environ if environ is None else environ
    yaml_data = yaml_data or {}

    def pick(arg_name: str, env_name: str, default):
        value = getattr(cli_args, arg_name, None) if cli_args is not None else None
        if value is not None:
            return value
        if env.get(env_name):
            return env[env_name]
        return yaml_data.get(arg_name, default)

    log_dir = pick("log_dir", "EXTRACTOR_LOG_DIR", None) or default_log_dir(env)

    # --lenient is a store_true flag, so only an explicit True overrides.
    strict = _parse_bool(pick("strict", "EXTRACTOR_STRICT", Config.strict))
    if cli_args is not None and getattr(cli_args, "lenient", False):
        strict = False

    workers = int(pick("workers", "EXTRACTOR_WORKERS", Config.workers))
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    return Config(
        log_dir=log_dir,
        output_dir=pick("output_dir", "EXTRACTOR_OUTPUT_DIR", Config.output_dir),
        strict=strict,
        workers=workers,
        encoding=pick("encoding", "EXTRACTOR_ENCODING", Config.encoding),
        log_level=str(pick("log_level", "EXTRACTOR_LOG_LEVEL", Config.log_level)).upper(),
    )
