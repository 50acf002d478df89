from __future__ import annotations

import importlib

import pytest


@pytest.mark.unit
def test_import_package() -> None:
    importlib.import_module("epochtime")


@pytest.mark.unit
def test_public_names_resolve() -> None:
    epochtime = importlib.import_module("epochtime")
    missing = [name for name in epochtime.__all__ if not hasattr(epochtime, name)]
    assert missing == []
