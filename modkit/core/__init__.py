"""Core system functionality."""

from .config_codec import PersistedField
from .exceptions import (
    ModuleError,
    ConfigError,
    ConfigTypeError,
    ModuleInitError,
    DuplicateModuleError,
    UnknownModuleError,
)
from .hud import HudElement
from .module_system import Module, ConfigurableModule, ModuleRegistry
from .module_loader import ModuleLoader, load_disabled_modules

__all__ = [
    "Module",
    "ConfigurableModule",
    "ModuleRegistry",
    "ModuleLoader",
    "PersistedField",
    "HudElement",
    "load_disabled_modules",
    "ModuleError",
    "ConfigError",
    "ConfigTypeError",
    "ModuleInitError",
    "DuplicateModuleError",
    "UnknownModuleError",
]
