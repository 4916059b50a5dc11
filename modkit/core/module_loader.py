"""Module loader: reads and writes the module storage file."""

import json
import logging
import yaml
from pathlib import Path
from typing import Any, Collection, Dict, Iterable, Optional, Set, Union

from .config_codec import json_type_name
from .module_system import Module, ModuleRegistry, ConfigurableModule

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_disabled_modules(config_path: PathLike = "modules_config.yaml") -> Set[str]:
    """
    Read the ids of modules switched off in the module settings file.

    The file looks like::

        modules:
          fps:
            enabled: false
        disabled: [crosshair]

    Args:
        config_path: Path to the modules configuration file

    Returns:
        Set of disabled module ids
    """
    config_path = Path(config_path)
    if not config_path.exists():
        logger.warning(f"Module config not found: {config_path}, using defaults")
        return set()

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}

    disabled = set(config.get('disabled') or [])
    for module_id, module_config in (config.get('modules') or {}).items():
        if isinstance(module_config, dict) and not module_config.get('enabled', True):
            disabled.add(module_id)

    logger.info(f"Loaded module configuration from {config_path}")
    return disabled


class ModuleLoader:
    """Loads modules into a registry from the storage file, and saves them back."""

    def __init__(self, registry: Optional[ModuleRegistry] = None):
        """
        Initialize the module loader.

        Args:
            registry: Registry to populate (a new one if omitted)
        """
        self.registry = registry if registry is not None else ModuleRegistry()

    def read_storage(self, storage_path: PathLike) -> Optional[Dict[str, Any]]:
        """
        Read the storage document.

        Returns:
            The decoded JSON object, or None if there is no usable document
        """
        storage_path = Path(storage_path)
        if not storage_path.is_file():
            logger.debug(f"No module storage at {storage_path}")
            return None

        try:
            with open(storage_path, 'r', encoding='utf-8') as f:
                storage = json.load(f)
        except (OSError, ValueError, RecursionError):
            logger.exception(f"Could not load module storage {storage_path}")
            return None

        if not isinstance(storage, dict):
            logger.error(
                f"Module storage {storage_path} is not a JSON object - its type is {json_type_name(storage)}"
            )
            return None

        return storage

    def load_all(self, storage_path: PathLike, modules: Iterable[Module],
                 disabled: Collection[str] = ()) -> int:
        """
        Register modules, configuring each from its node in the storage file.

        Args:
            storage_path: Path to the JSON storage file
            modules: Modules to register, in order
            disabled: Ids of modules to skip

        Returns:
            Number of modules registered
        """
        storage = self.read_storage(storage_path) or {}

        loaded = 0
        failed = 0
        for module in modules:
            node = storage.get(module.id)
            if module.id in storage and not isinstance(node, dict):
                logger.warning(
                    f"Storage node for {module.id} is not a JSON object - its type is {json_type_name(node)}"
                )
                node = None

            if self.registry.register(module, node, disabled):
                loaded += 1
            elif module.id not in disabled:
                failed += 1

        logger.info(f"Module loading complete: {loaded} loaded, {failed} failed")
        return loaded

    def load_standard(self, storage_path: PathLike,
                      disabled: Optional[Collection[str]] = None) -> int:
        """
        Load the built-in module catalogue.

        Args:
            storage_path: Path to the JSON storage file
            disabled: Ids of modules to skip (read from modules_config.yaml if None)
        """
        from modkit.modules import standard_modules

        if disabled is None:
            disabled = load_disabled_modules()

        logger.info("Loading modules...")
        self.load_all(storage_path, standard_modules(), disabled)
        logger.info(f"Loaded {len(self.registry)} modules")
        return len(self.registry)

    def save_all(self, storage_path: PathLike) -> Dict[str, Any]:
        """
        Save every registered configurable module to the storage file.

        Raises:
            OSError: if the file could not be written
            TypeError: if a persisted value is not JSON serializable
        """
        result = {}
        for module in self.registry:
            if isinstance(module, ConfigurableModule):
                result[module.id] = self.registry.dump(module)

        # encode first so a bad value never truncates the previous file
        text = json.dumps(result, indent=2)

        storage_path = Path(storage_path)
        storage_path.parent.mkdir(parents=True, exist_ok=True)
        with open(storage_path, 'w', encoding='utf-8') as f:
            f.write(text)

        logger.info(f"Saved {len(result)} modules to {storage_path}")
        return result

    def get_module_status(self) -> Dict:
        """
        Get status of all modules.

        Returns:
            Dict with module status information
        """
        return {
            "total_modules": len(self.registry),
            "enabled_modules": len(self.registry.get_enabled()),
            "modules": self.registry.get_module_info(),
        }
