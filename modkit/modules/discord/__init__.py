from .module import DiscordModule

__all__ = ["DiscordModule"]
