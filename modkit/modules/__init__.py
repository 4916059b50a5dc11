"""Built-in modules."""

from typing import List

from modkit.core import Module


def standard_modules() -> List[Module]:
    """Create the built-in module catalogue, in registration order."""
    from .client_config import ClientConfigModule
    from .fps import FpsModule
    from .coordinates import CoordinatesModule
    from .toggle_sprint import ToggleSprintModule
    from .crosshair import CrosshairModule
    from .discord import DiscordModule

    return [
        # general
        ClientConfigModule(),

        # hud
        FpsModule(),
        CoordinatesModule(),

        # utility
        ToggleSprintModule(),

        # visual
        CrosshairModule(),

        # integration
        DiscordModule(),
    ]
