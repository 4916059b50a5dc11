"""Exceptions raised by the module system."""


class ModuleError(Exception):
    """Base class for module registration errors."""


class ConfigError(ModuleError):
    """A persisted configuration could not be applied to a module."""


class ConfigTypeError(ConfigError, TypeError):
    """A persisted value does not have the shape its field declares."""


class ModuleInitError(ModuleError):
    """A module reported that its initialization failed."""


class DuplicateModuleError(ModuleError):
    """A module id is already taken in the registry."""


class UnknownModuleError(ModuleError, ValueError):
    """A module id that must exist is not registered."""
