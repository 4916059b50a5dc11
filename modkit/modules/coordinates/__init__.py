from .module import CoordinatesModule

__all__ = ["CoordinatesModule"]
