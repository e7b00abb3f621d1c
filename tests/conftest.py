"""Shared fixtures for enum designer tests."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from enum_designer import EnumDesigner, EnumDesignerConfig


class RecordingHook:
    """Collects every path passed to the record hook."""

    def __init__(self) -> None:
        self.calls: List[Path] = []

    def __call__(self, path: Path) -> None:
        self.calls.append(path)


@pytest.fixture
def hook() -> RecordingHook:
    return RecordingHook()


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "Enums"


@pytest.fixture
def config(output_dir: Path) -> EnumDesignerConfig:
    return EnumDesignerConfig(output_dir=str(output_dir))


@pytest.fixture
def designer(config: EnumDesignerConfig, hook: RecordingHook) -> EnumDesigner:
    return EnumDesigner(config, hook=hook)


def snapshot(directory: Path) -> dict:
    """File name -> content for every file in ``directory``."""
    return {p.name: p.read_text(encoding="utf-8") for p in directory.iterdir()}
