"""Discord rich presence integration."""

import logging

from modkit.core import Module

logger = logging.getLogger(__name__)


class DiscordModule(Module):
    """Always-on integration; has nothing to persist."""

    application_id = "1063891357000000000"

    def __init__(self):
        self.activity = None

    @property
    def id(self) -> str:
        return "discord"

    @property
    def display_name(self) -> str:
        return "Discord Integration"

    @property
    def description(self) -> str:
        return "Show what you are doing on Discord"

    def init(self) -> bool:
        logger.info(f"Discord presence ready for application {self.application_id}")
        return True

    def set_activity(self, state: str):
        self.activity = state
