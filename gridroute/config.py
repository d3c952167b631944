"""Run settings — gridroute.yml lookup and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gridroute.logger import logger
from gridroute.model import RouteConfig

CONFIG_FILENAME = "gridroute.yml"


def find_config(search_dir: Path | None = None) -> Path | None:
    """Return ``gridroute.yml`` in *search_dir* (default: cwd) if it exists."""
    candidate = (search_dir or Path.cwd()) / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_config(path: Path | None = None, search_dir: Path | None = None) -> RouteConfig:
    """Load run settings.

    With no *path*, ``gridroute.yml`` in *search_dir* is used when present.
    Settings that fail validation are dropped one by one and fall back to
    their defaults; the rest of the file still applies.
    """
    if path is None:
        path = find_config(search_dir)
        if path is None:
            logger.debug("No %s found, using defaults", CONFIG_FILENAME)
            return RouteConfig()
        logger.debug("Using settings from %s", path)

    raw = _read_mapping(Path(path))
    if raw is None:
        return RouteConfig()
    return _validate(raw, path)


def _read_mapping(path: Path) -> dict[str, Any] | None:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning("Config file not found: %s, using defaults", path)
        return None
    except OSError as e:
        logger.warning("Cannot read config file %s: %s, using defaults", path, e)
        return None
    except yaml.YAMLError as e:
        logger.warning("Malformed YAML in %s: %s, using defaults", path, e)
        return None

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        logger.warning("Config file %s is not a YAML mapping, using defaults", path)
        return None
    return raw


def _validate(raw: dict[str, Any], path: Path) -> RouteConfig:
    try:
        return RouteConfig.model_validate(raw)
    except ValidationError as e:
        rejected = {err["loc"][0] for err in e.errors() if err["loc"]}
        for key in sorted(map(str, rejected)):
            logger.warning("Ignoring setting %r in %s: %r", key, path, raw.get(key))

    kept = {k: v for k, v in raw.items() if k not in rejected}
    try:
        return RouteConfig.model_validate(kept)
    except ValidationError as e:
        logger.warning("Invalid config in %s: %s, using defaults", path, e)
        return RouteConfig()
