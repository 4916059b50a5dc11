from .module import Colour, CrosshairModule

__all__ = ["Colour", "CrosshairModule"]
