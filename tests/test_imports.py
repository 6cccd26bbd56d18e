"""Tests for EasyTime package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_easytime() -> None:
    """Import easytime package succeeds."""
    import easytime

    assert hasattr(easytime, "__version__")
    assert easytime.__version__ == "0.1.0"


def test_import_convert_module() -> None:
    """Import easytime.convert submodule succeeds."""
    from easytime import convert

    assert hasattr(convert, "__all__")
    assert len(convert.__all__) == 12


def test_import_format_module() -> None:
    """Import easytime.format submodule succeeds."""
    from easytime import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_units_module() -> None:
    """Import easytime.units submodule succeeds."""
    from easytime import units

    assert hasattr(units, "__all__")


def test_import_arithmetic_module() -> None:
    """Import easytime.arithmetic submodule succeeds."""
    from easytime import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_internal_module() -> None:
    """Import easytime._internal submodule succeeds."""
    from easytime import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Import easytime.errors succeeds with all exception classes."""
    from easytime.errors import EasyTimeError, ParseError, ValidationError

    assert issubclass(ValidationError, EasyTimeError)
    assert issubclass(ParseError, EasyTimeError)
    assert issubclass(ParseError, ValueError)
    assert issubclass(ValidationError, ValueError)
    assert issubclass(EasyTimeError, Exception)


def test_public_names_are_exported() -> None:
    """Every name in easytime.__all__ is an attribute of the package."""
    import easytime

    for name in easytime.__all__:
        assert hasattr(easytime, name), name


def test_import_constants() -> None:
    """Import easytime._internal.constants succeeds."""
    from easytime._internal.constants import UNIX_EPOCH, UTC_OFFSET_HOURS

    assert UTC_OFFSET_HOURS == 8
    assert UNIX_EPOCH.year == 1970
