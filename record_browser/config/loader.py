from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from record_browser.config.model import AppSettings
from record_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

VIEW_MODES = ("cards", "table")

ENV_BACKEND_URL = "RECORD_BROWSER_BACKEND_URL"
ENV_TIMEOUT = "RECORD_BROWSER_TIMEOUT"


def _parse_timeout(raw: Any, source: str) -> Optional[float]:
    if raw is None or (isinstance(raw, str) and raw.strip().lower() in ("", "none", "null")):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"{source}: request timeout must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"{source}: request timeout must be positive, got {value}")
    return value


def load_settings(root: Path | str) -> AppSettings:
    """
    Load settings from `root/global.json`, then apply environment overrides.

    Expected structure:

        root/
            global.json

    Recognised keys: ui_title, backend_url, records_path,
    request_timeout_seconds, default_view_mode. Unknown keys are ignored.

    :param root: Directory containing 'global.json'.
    :return: An AppSettings instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if a value is invalid.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw: Dict[str, Any] = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{global_path}: invalid JSON ({e})") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path}: expected a JSON object")

    defaults = AppSettings(config_root=root)

    view_mode = str(raw.get("default_view_mode", defaults.default_view_mode)).lower()
    if view_mode not in VIEW_MODES:
        raise ConfigError(f"{global_path}: default_view_mode must be one of {VIEW_MODES}, got {view_mode!r}")

    timeout = (
        _parse_timeout(raw["request_timeout_seconds"], str(global_path))
        if "request_timeout_seconds" in raw
        else defaults.request_timeout_seconds
    )

    settings = AppSettings(
        config_root=root,
        ui_title=raw.get("ui_title", defaults.ui_title),
        backend_url=raw.get("backend_url", defaults.backend_url),
        records_path=raw.get("records_path", defaults.records_path),
        request_timeout_seconds=timeout,
        default_view_mode=view_mode,
    )

    env_url = os.getenv(ENV_BACKEND_URL)
    if env_url:
        settings.backend_url = env_url

    env_timeout = os.getenv(ENV_TIMEOUT)
    if env_timeout is not None:
        settings.request_timeout_seconds = _parse_timeout(env_timeout, ENV_TIMEOUT)

    logger.info(
        "Settings loaded",
        extra={
            "backend_url": settings.backend_url,
            "records_path": settings.records_path,
            "timeout": settings.request_timeout_seconds,
        },
    )
    return settings
