"""Sanity tests ensuring the package imports correctly."""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "fireflower",
        "fireflower.tiles",
        "fireflower.events",
        "fireflower.hands",
        "fireflower.queues",
        "fireflower.game",
        "fireflower.cli.main",
    ],
)
def test_modules_import(module_name: str) -> None:
    assert importlib.import_module(module_name)
