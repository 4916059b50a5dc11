from .module import ToggleSprintModule

__all__ = ["ToggleSprintModule"]
