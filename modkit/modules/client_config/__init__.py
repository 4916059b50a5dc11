from .module import ClientConfigModule

__all__ = ["ClientConfigModule"]
