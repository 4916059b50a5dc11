from .module import FpsModule

__all__ = ["FpsModule"]
