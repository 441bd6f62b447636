from dataclasses import dataclass

from record_browser.config.model import AppSettings
from record_browser.core.interaction import InteractionController


@dataclass
class AppConfig:
    """
    Shared state for the Dash app, passed into layout + callback
    registration functions instead of using module-level globals.

    `notice` carries the last user-facing action failure (create, update,
    delete); load failures live on the record store's error flag.
    """
    settings: AppSettings
    controller: InteractionController
    notice: str = ""

    @property
    def store(self):
        return self.controller.store
