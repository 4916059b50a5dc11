"""Module system for the pluggable feature registry."""

import logging
from typing import Collection, Dict, Iterator, List, Optional, Any, Sequence
from abc import ABC, abstractmethod

from .hud import HudElement
from .config_codec import PersistedField, apply_config, dump_config
from .exceptions import ConfigError, DuplicateModuleError, ModuleInitError, UnknownModuleError

logger = logging.getLogger(__name__)


class Module(ABC):
    """Base class for all modules.

    A plain module has no persisted configuration. Subclass
    :class:`ConfigurableModule` to take part in load/save.
    """

    @property
    @abstractmethod
    def id(self) -> str:
        """Module id (unique, stable, used as the storage key)."""
        pass

    @property
    def display_name(self) -> str:
        """Human-readable module name."""
        return self.id.replace("_", " ").title()

    @property
    def description(self) -> str:
        """Module description."""
        return ""

    @property
    def persistable(self) -> bool:
        return False

    def init(self) -> bool:
        """
        Initialize the module.
        Called exactly once, after the persisted configuration is applied.

        Returns:
            True if initialization succeeded
        """
        logger.debug(f"Initializing module: {self.id}")
        return True

    def get_hud_elements(self) -> List[HudElement]:
        """
        Get the HUD elements this module exposes to the host.

        Queried once, at registration time.
        """
        return []

    def __repr__(self):
        return f"<Module: {self.id}>"


class ConfigurableModule(Module):
    """A module whose declared fields are persisted to the storage file."""

    def __init__(self):
        self.registration_index = -1
        self._enabled = True

    @property
    def persistable(self) -> bool:
        return True

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool):
        if value == self._enabled:
            return

        self._enabled = value
        if value:
            self.on_enable()
        else:
            self.on_disable()

    def on_enable(self):
        pass

    def on_disable(self):
        pass

    def persisted_fields(self) -> List[PersistedField]:
        """
        Get the declared persistence schema of this module.

        Only the fields listed here are read from and written to storage.
        Subclasses extend the list returned by ``super()``.
        """
        return [PersistedField("enabled", bool)]

    def __repr__(self):
        return f"<Module: {self.id} (index={self.registration_index}, enabled={self.enabled})>"


class _ReadOnlyList(Sequence):
    """Zero-copy read-only view over a list owned by the registry."""

    __slots__ = ("_items",)

    def __init__(self, items: list):
        self._items = items

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"{type(self).__name__}({self._items!r})"


class ModuleRegistry:
    """Registry of modules, in registration order."""

    def __init__(self):
        self._modules: List[Module] = []
        self._by_id: Dict[str, Module] = {}
        self._hud_elements: List[HudElement] = []
        self._modules_view = _ReadOnlyList(self._modules)
        self._hud_elements_view = _ReadOnlyList(self._hud_elements)

    def register(self, module: Module, config: Optional[Dict[str, Any]] = None,
                 disabled: Collection[str] = ()) -> bool:
        """
        Register a module.

        Args:
            module: Module instance to register
            config: Persisted configuration for the module, if any
            disabled: Ids of modules that must be skipped

        Returns:
            True if the module is now registered
        """
        if module.id in disabled:
            logger.info(f"Skipping disabled module: {module.id}")
            return False

        try:
            if module.id in self._by_id:
                raise DuplicateModuleError(f"Module {module.id} is already registered")

            if isinstance(module, ConfigurableModule):
                module.registration_index = len(self._modules)

            if config is not None:
                self.configure(module, config)

            if module.init() is False:
                raise ModuleInitError(f"Module {module.id} failed to initialize")

            hud_elements = list(module.get_hud_elements())
        except Exception:
            logger.exception(f"Could not register module {module.id}")
            # an instance registered earlier keeps its live index
            if isinstance(module, ConfigurableModule) and self._by_id.get(module.id) is not module:
                module.registration_index = -1
            return False

        self._modules.append(module)
        self._by_id[module.id] = module
        self._hud_elements.extend(hud_elements)
        logger.debug(f"Registered module: {module.id}")
        return True

    def configure(self, module: Module, config: Dict[str, Any]):
        """Load a JSON configuration object into a module."""
        if not isinstance(module, ConfigurableModule):
            if config:
                raise ConfigError(f"Module {module.id} has no persisted configuration")
            return

        apply_config(module, config, module.persisted_fields())

    def dump(self, module: ConfigurableModule) -> Dict[str, Any]:
        """Dump the persisted configuration of a module."""
        return dump_config(module, module.persisted_fields())

    def get(self, module_id: str) -> Optional[Module]:
        """Get a module by id."""
        return self._by_id.get(module_id)

    def get_or_raise(self, module_id: str) -> Module:
        """Get a module by id, raising if it is not registered."""
        module = self._by_id.get(module_id)
        if module is None:
            raise UnknownModuleError(module_id)
        return module

    def get_all(self) -> Sequence[Module]:
        """Get all registered modules (live, read-only)."""
        return self._modules_view

    def get_enabled(self) -> List[Module]:
        """Get all registered modules whose toggle is on."""
        return [m for m in self._modules if getattr(m, "enabled", True)]

    def get_hud_elements(self) -> Sequence[HudElement]:
        """Get the HUD elements of all registered modules (live, read-only)."""
        return self._hud_elements_view

    def get_module_info(self) -> List[Dict[str, Any]]:
        """Get information about all modules."""
        return [
            {
                "id": m.id,
                "display_name": m.display_name,
                "description": m.description,
                "index": getattr(m, "registration_index", None),
                "enabled": getattr(m, "enabled", True),
                "persistable": m.persistable,
            }
            for m in self._modules
        ]

    def __iter__(self) -> Iterator[Module]:
        return iter(self._modules)

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, module_id: str) -> bool:
        return module_id in self._by_id
