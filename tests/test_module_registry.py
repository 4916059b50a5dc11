"""Tests for module registration and lookup."""

import pytest

from modkit.core import ConfigTypeError, ModuleRegistry, UnknownModuleError

from conftest import SampleModule, PlainModule


class TestRegistration:
    """Test registering modules into the catalogue."""

    def test_indices_follow_registration_order(self, registry):
        """Test that each module gets its position as registration index."""
        modules = [SampleModule(f"m{i}") for i in range(5)]
        for module in modules:
            assert registry.register(module)

        assert len(registry) == 5
        assert [m.registration_index for m in registry.get_all()] == [0, 1, 2, 3, 4]
        assert list(registry.get_all()) == modules

    def test_failing_init_excludes_module(self, registry):
        """Test that a crashing initializer keeps the module out of the registry."""
        broken = SampleModule("broken", fail_init=True, hud=2)

        assert registry.register(SampleModule("first")) is True
        assert registry.register(broken) is False
        assert registry.register(SampleModule("last")) is True

        assert broken.registration_index == -1
        assert registry.get("broken") is None
        assert "broken" not in registry
        assert [m.id for m in registry] == ["first", "last"]
        assert registry.get("last").registration_index == 1
        assert len(registry.get_hud_elements()) == 0

    def test_init_returning_false_is_a_failure(self, registry):
        """Test that init() returning False excludes the module."""
        module = SampleModule("quiet")
        module.init = lambda: False

        assert registry.register(module) is False
        assert module.registration_index == -1
        assert len(registry) == 0

    def test_failure_is_logged_with_module_id(self, registry, caplog):
        """Test that registration failures are reported."""
        registry.register(SampleModule("broken", fail_init=True))

        assert "Could not register module broken" in caplog.text

    def test_disabled_module_is_skipped_silently(self, registry, caplog):
        """Test that a disabled id never reaches init."""
        module = SampleModule("off")

        assert registry.register(module, disabled={"off"}) is False
        assert module.init_calls == 0
        assert module.registration_index == -1
        assert registry.get("off") is None
        assert "Could not register" not in caplog.text

    def test_duplicate_id_is_rejected(self, registry):
        """Test that a second module with the same id is excluded."""
        first = SampleModule("same")
        second = SampleModule("same")

        assert registry.register(first)
        assert not registry.register(second)

        assert registry.get("same") is first
        assert second.registration_index == -1
        assert second.init_calls == 0
        assert len(registry) == 1

    def test_same_instance_twice_keeps_its_index(self, registry):
        """Test that registering a live module again leaves its entry intact."""
        registry.register(SampleModule("zero"))
        module = SampleModule("again")

        assert registry.register(module)
        assert not registry.register(module)

        assert registry.get("again") is module
        assert module.registration_index == 1
        assert registry.get_all()[module.registration_index] is module
        assert module.init_calls == 1

    def test_config_applied_before_init(self, registry):
        """Test that init sees the persisted values."""
        seen = {}
        module = SampleModule("cfg")
        module.init = lambda: seen.update(a=module.a) or True

        assert registry.register(module, {"a": 7})
        assert seen == {"a": 7}
        assert module.b == "default"

    def test_bad_config_excludes_module(self, registry):
        """Test that a type mismatch fails registration without calling init."""
        module = SampleModule("cfg")

        assert not registry.register(module, {"a": "seven"})
        assert module.init_calls == 0
        assert registry.get("cfg") is None

    def test_partial_config_survives_exclusion(self, registry):
        """Test that fields applied before a mismatch are not rolled back."""
        module = SampleModule("cfg")

        assert not registry.register(module, {"a": 3, "b": 4})
        assert module.a == 3
        assert module.b == "default"

    def test_plain_module_registers(self, registry):
        """Test that a module without persisted fields registers."""
        plain = PlainModule()

        assert registry.register(plain)
        assert registry.get("plain") is plain
        assert not hasattr(plain, "registration_index")

    def test_plain_module_rejects_config(self, registry):
        """Test that persisted values for a plain module fail registration."""
        assert not registry.register(PlainModule(), {"x": 1})
        assert registry.register(PlainModule(), {})


class TestLookup:
    """Test module lookup."""

    def test_get_unknown_returns_none(self, registry):
        assert registry.get("missing") is None

    def test_get_or_raise(self, registry):
        """Test that a known id is returned and an unknown one raises."""
        module = SampleModule("known")
        registry.register(module)

        assert registry.get_or_raise("known") is module
        with pytest.raises(UnknownModuleError):
            registry.get_or_raise("missing")

    def test_unknown_module_error_is_value_error(self, registry):
        with pytest.raises(ValueError):
            registry.get_or_raise("missing")


class TestViews:
    """Test the shared read-only views."""

    def test_get_all_is_live_and_read_only(self, registry):
        """Test that the module view tracks registrations and cannot be mutated."""
        view = registry.get_all()
        assert len(view) == 0

        registry.register(SampleModule("one"))
        assert len(view) == 1
        assert view[0].id == "one"

        with pytest.raises((TypeError, AttributeError)):
            view.append(SampleModule("two"))
        with pytest.raises(TypeError):
            view[0] = SampleModule("two")

    def test_hud_elements_aggregated_in_order(self, registry):
        """Test that HUD elements are collected in registration order."""
        registry.register(SampleModule("a", hud=2))
        registry.register(PlainModule())
        registry.register(SampleModule("b", hud=1))

        names = [e.name for e in registry.get_hud_elements()]
        assert names == ["a_0", "a_1", "b_0"]

    def test_hud_elements_queried_once(self, registry):
        """Test that later changes to a module's list do not leak into the aggregate."""
        module = SampleModule("a", hud=1)
        registry.register(module)
        module._hud.append(object())

        assert len(registry.get_hud_elements()) == 1

    def test_get_enabled(self, registry):
        """Test that switched-off modules are left out of get_enabled()."""
        on = SampleModule("on")
        off = SampleModule("off")
        registry.register(on)
        registry.register(off)
        registry.register(PlainModule())
        off.enabled = False

        assert [m.id for m in registry.get_enabled()] == ["on", "plain"]

    def test_module_info(self, registry):
        registry.register(SampleModule("sample"))
        registry.register(PlainModule())

        info = registry.get_module_info()

        assert info[0]["id"] == "sample"
        assert info[0]["index"] == 0
        assert info[0]["persistable"] is True
        assert info[1]["index"] is None
        assert info[1]["persistable"] is False


class TestConfigureAndDump:
    """Test the registry's codec helpers."""

    def test_configure_raises_on_mismatch(self, registry):
        with pytest.raises(ConfigTypeError):
            registry.configure(SampleModule(), {"b": 1})

    def test_dump_round_trip(self):
        """Test dumping then configuring a fresh module reproduces the values."""
        registry = ModuleRegistry()
        source = SampleModule()
        source.a = 1
        source.b = "x"
        source.runtime_counter = 99

        dumped = registry.dump(source)
        assert dumped == {"a": 1, "b": "x"}

        target = SampleModule()
        registry.configure(target, dumped)
        assert (target.a, target.b) == (1, "x")
        assert target.runtime_counter == 0
