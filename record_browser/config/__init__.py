"""
Config package for record_browser.

Responsible for:
- the settings model (AppSettings)
- loading global.json with environment overrides (load_settings)
"""

from .model import AppSettings
from .loader import load_settings
