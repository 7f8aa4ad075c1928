"""Test package version and basic imports."""

import importlib
import types

import waitfor


def test_version():
    """Verify package version is set."""
    assert waitfor.__version__ == "0.1.0"


def test_package_exports():
    """Verify the public types are exported."""
    assert waitfor.WaitMode.WAIT_FOR_UP.value == "wait-for-up"
    assert waitfor.WaitConfig(target="db:5432").timeout == 3600


def test_submodules_are_not_shadowed():
    """Verify engine modules stay reachable as modules for patching."""
    for name in ("dispatch", "poll", "probes", "handoff"):
        module = importlib.import_module(f"waitfor.{name}")
        assert isinstance(module, types.ModuleType)
        assert getattr(waitfor, name) is module
