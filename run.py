#!/usr/bin/env python3
"""Main entry point: load the built-in modules, report their status, save."""

import argparse
import logging
import sys
from pathlib import Path

from modkit import config
from modkit.core import ModuleLoader, load_disabled_modules

project_root = Path(__file__).parent

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: str = None):
    """Configure root logging."""
    handlers = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Load, inspect and save modules")
    parser.add_argument("--config", help="Path to config.yaml")
    parser.add_argument("--storage", help="Path to the module storage file")
    parser.add_argument("--modules-config", help="Path to modules_config.yaml")
    parser.add_argument("--disable", action="append", default=[], metavar="ID",
                        help="Skip a module (repeatable)")
    parser.add_argument("--save", action="store_true", help="Write the storage file after loading")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Load the module catalogue."""
    args = parse_args(argv)

    app_config = {}
    try:
        app_config = config.load_config(args.config)
    except FileNotFoundError as e:
        if args.config:
            print(f"Error: {e}")
            return 1
        print("No config.yaml found, using defaults")

    logging_config = app_config.get("logging") or {}
    storage_config = app_config.get("storage") or {}
    setup_logging(logging_config.get("level", "INFO"), logging_config.get("file"))

    storage_path = args.storage or storage_config.get("path", str(project_root / "data" / "modules.json"))
    modules_config = args.modules_config or storage_config.get(
        "modules_config", str(project_root / "modules_config.yaml")
    )

    disabled = load_disabled_modules(modules_config) | set(args.disable)

    loader = ModuleLoader()
    loader.load_standard(storage_path, disabled)

    status = loader.get_module_status()
    print(f"Modules: {status['enabled_modules']}/{status['total_modules']} enabled")
    for module in status['modules']:
        mark = "x" if module['enabled'] else " "
        print(f"  [{mark}] {module['display_name']} ({module['id']})")

    hud_elements = loader.registry.get_hud_elements()
    print(f"HUD elements: {', '.join(e.name for e in hud_elements) or 'none'}")

    if args.save:
        try:
            loader.save_all(storage_path)
        except OSError as e:
            logger.error(f"Could not save modules to {storage_path}: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
