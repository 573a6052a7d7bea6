"""Smoke tests for unified entry points.

These tests assert that `python -m earworm` and the console script
both resolve to the CLI's `main` function exposed under `earworm.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m earworm` path exposes a `main` callable."""
    m = import_module("earworm.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `earworm.ui.cli:main` and is importable."""
    m = import_module("earworm.ui.cli")
    assert hasattr(m, "main")


def test_package_exposes_core_interface() -> None:
    """The top-level package re-exports the operations the game shell uses."""
    earworm = import_module("earworm")
    for name in ("new_library", "scan_directory", "start_round", "EmptyLibraryError", "GameSession"):
        assert hasattr(earworm, name), name
