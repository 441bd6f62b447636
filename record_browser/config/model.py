from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class AppSettings:
    """
    Parsed global.json plus environment overrides.

    - backend_url: scheme + host of the record backend
    - records_path: collection path under backend_url
    - request_timeout_seconds: per-request timeout, None waits forever
    - default_view_mode: "cards" or "table" on startup
    """
    config_root: Path
    ui_title: str = "Record Browser"
    backend_url: str = "http://localhost:8080"
    records_path: str = "/api/pokemons"
    request_timeout_seconds: Optional[float] = 10.0
    default_view_mode: str = "cards"
