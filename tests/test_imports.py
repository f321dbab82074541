"""Smoke tests for package import and version."""

import multitok


def test_import_package() -> None:
    assert isinstance(multitok, object)


def test_version() -> None:
    assert multitok.__version__ == "0.1.0"
