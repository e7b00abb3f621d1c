"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from enum_designer import EnumDesignerConfig


class TestEnumDesignerConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in (
            "ENUM_DESIGNER_OUTPUT_DIR",
            "ENUM_DESIGNER_NAMESPACE",
            "ENUM_DESIGNER_EXTENSION",
            "ENUM_DESIGNER_ALLOW_EMPTY_VALUES",
            "ENUM_DESIGNER_HOOK_ROOT",
            "ENUM_DESIGNER_PRINT_LEVEL",
        ):
            monkeypatch.delenv(key, raising=False)

        config = EnumDesignerConfig.from_env()

        assert config.output_dir == "Enums"
        assert config.default_namespace == "CC.Enum"
        assert config.file_extension == ".cs"
        assert config.allow_empty_values is True
        assert config.hook_root is None
        assert config.print_level == "WARNING"

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENUM_DESIGNER_OUTPUT_DIR", "/tmp/generated")
        monkeypatch.setenv("ENUM_DESIGNER_NAMESPACE", "My.Game")
        monkeypatch.setenv("ENUM_DESIGNER_EXTENSION", "txt")
        monkeypatch.setenv("ENUM_DESIGNER_ALLOW_EMPTY_VALUES", "false")
        monkeypatch.setenv("ENUM_DESIGNER_HOOK_ROOT", "/tmp")

        config = EnumDesignerConfig.from_env()

        assert config.output_dir == "/tmp/generated"
        assert config.default_namespace == "My.Game"
        assert config.file_extension == ".txt"
        assert config.allow_empty_values is False
        assert config.hook_root == "/tmp"

    def test_empty_extension_rejected(self) -> None:
        with pytest.raises(ValueError):
            EnumDesignerConfig(file_extension="")
