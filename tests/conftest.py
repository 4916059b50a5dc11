"""Shared test fixtures for the modkit test suite."""

import pytest

# Add parent directory to path so we can import modkit
import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from modkit.core import (
    ConfigurableModule,
    HudElement,
    Module,
    ModuleLoader,
    ModuleRegistry,
    PersistedField,
)


class SampleModule(ConfigurableModule):
    """Configurable module with two persisted fields and one transient one."""

    def __init__(self, module_id="sample", fail_init=False, hud=0):
        super().__init__()
        self._id = module_id
        self.fail_init = fail_init
        self.a = 0
        self.b = "default"
        self.runtime_counter = 0
        self.init_calls = 0
        self._hud = [HudElement(module_id, f"{module_id}_{i}") for i in range(hud)]

    @property
    def id(self) -> str:
        return self._id

    def persisted_fields(self):
        return [
            PersistedField("a", int),
            PersistedField("b", str),
        ]

    def init(self) -> bool:
        self.init_calls += 1
        if self.fail_init:
            raise RuntimeError("boom")
        return True

    def get_hud_elements(self):
        return self._hud


class PlainModule(Module):
    """Module with nothing to persist."""

    def __init__(self, module_id="plain"):
        self._id = module_id

    @property
    def id(self) -> str:
        return self._id


@pytest.fixture
def registry():
    return ModuleRegistry()


@pytest.fixture
def loader(registry):
    return ModuleLoader(registry)


@pytest.fixture
def storage_path(tmp_path):
    """Path to a storage file that does not exist yet."""
    return tmp_path / "modules.json"
