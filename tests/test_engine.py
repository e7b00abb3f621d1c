"""Tests for the EnumDesigner entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from enum_designer import (
    DefinitionNotFoundError,
    EnumDesigner,
    EnumDesignerConfig,
    ValidationReason,
    WriteOutcome,
)

from .conftest import RecordingHook, snapshot


class TestCreate:
    def test_valid_input_is_listed(self, designer: EnumDesigner) -> None:
        result = designer.create("Color", ["Red", "Green", "Blue"], "App")

        assert result.ok
        assert result.outcome is WriteOutcome.CREATED
        assert "Color" in designer.list_definitions()

    def test_writes_rendered_text(self, designer: EnumDesigner, output_dir: Path) -> None:
        result = designer.create("Color", ["Red", "Green", "Blue"], "App")

        assert result.path == output_dir / "Color.cs"
        assert result.path.read_text(encoding="utf-8") == (
            "namespace App {public enum Color{ Red, Green, Blue,  };}\n"
        )

    def test_default_namespace_used_when_omitted(self, designer: EnumDesigner) -> None:
        designer.create("Color", ["Red"])
        assert designer.read_definition("Color").namespace_str == "CC.Enum"

    def test_configured_default_namespace(self, output_dir: Path) -> None:
        designer = EnumDesigner(EnumDesignerConfig(output_dir=str(output_dir), default_namespace="My.Game"))
        designer.create("Color", ["Red"])
        assert designer.read_definition("Color").namespace_str == "My.Game"

    @pytest.mark.parametrize(
        "name, values, namespace",
        [
            ("", ["Red"], "App"),
            ("Color", ["Red", "  "], "App"),
            ("Color", ["Red"], "App."),
        ],
    )
    def test_blank_input_fails_without_writing(
        self,
        designer: EnumDesigner,
        output_dir: Path,
        hook: RecordingHook,
        name: str,
        values: list,
        namespace: str,
    ) -> None:
        designer.create("Existing", ["A"], "App")
        before = snapshot(output_dir)
        calls_before = len(hook.calls)

        result = designer.create(name, values, namespace)

        assert not result.ok
        assert result.validation.reason is ValidationReason.EMPTY_OR_WHITESPACE
        assert result.outcome is None
        assert result.path is None
        assert snapshot(output_dir) == before

    def test_delete_outside_output_dir_rejected(
        self, designer: EnumDesigner, output_dir: Path, hook: RecordingHook
    ) -> None:
        outside = output_dir.parent / "Secret.cs"
        outside.write_text("keep\n", encoding="utf-8")
        calls_before = len(hook.calls)

        with pytest.raises(DefinitionNotFoundError):
            designer.delete("../Secret")

        assert outside.read_text(encoding="utf-8") == "keep\n"
        assert len(hook.calls) == calls_before

    def test_duplicate_values_rejected(self, designer: EnumDesigner) -> None:
        result = designer.create("Letters", ["A", "B", "A"], "App")

        assert result.validation.reason is ValidationReason.DUPLICATE_VALUE
        assert designer.list_definitions() == []

    def test_second_create_overwrites(self, designer: EnumDesigner, output_dir: Path) -> None:
        first = designer.create("Color", ["Red", "Green"], "App")
        second = designer.create("Color", ["Cyan", "Magenta"], "App")

        assert first.outcome is WriteOutcome.CREATED
        assert second.outcome is WriteOutcome.OVERWRITTEN
        assert designer.list_definitions() == ["Color"]
        assert designer.read_definition("Color").values == ("Cyan", "Magenta")

    def test_empty_values_follow_config(self, output_dir: Path) -> None:
        lenient = EnumDesigner(EnumDesignerConfig(output_dir=str(output_dir)))
        assert lenient.create("Nothing", [], "App").ok

        strict = EnumDesigner(EnumDesignerConfig(output_dir=str(output_dir), allow_empty_values=False))
        result = strict.create("Nothing", [], "App")
        assert result.validation.reason is ValidationReason.NO_VALUES

    def test_hook_called_once_per_write(self, designer: EnumDesigner, hook: RecordingHook, output_dir: Path) -> None:
        designer.create("Color", ["Red"], "App")
        assert hook.calls == [(output_dir / "Color.cs").resolve()]

    def test_values_from_iterator(self, designer: EnumDesigner) -> None:
        result = designer.create("Color", iter(["Red", "Green"]), "App")

        assert result.ok
        assert designer.read_definition("Color").values == ("Red", "Green")

    def test_values_from_generator_are_validated(self, designer: EnumDesigner) -> None:
        result = designer.create("Color", (v for v in ["Red", "Red"]), "App")
        assert result.validation.reason is ValidationReason.DUPLICATE_VALUE


class TestDeleteAndList:
    def test_delete_missing(self, designer: EnumDesigner, output_dir: Path) -> None:
        designer.create("Color", ["Red"], "App")
        before = snapshot(output_dir)

        with pytest.raises(DefinitionNotFoundError):
            designer.delete("Shape")

        assert snapshot(output_dir) == before

    def test_sorted_listing(self, designer: EnumDesigner) -> None:
        for name in ("Zeta", "Alpha", "Mid"):
            designer.create(name, ["A"], "App")
        assert designer.list_definitions(sort=True) == ["Alpha", "Mid", "Zeta"]
        assert sorted(designer.list_definitions()) == ["Alpha", "Mid", "Zeta"]

    def test_output_dir_created_on_startup(self, output_dir: Path) -> None:
        assert not output_dir.exists()
        EnumDesigner(EnumDesignerConfig(output_dir=str(output_dir)))
        assert output_dir.is_dir()

    def test_output_dir_not_created_when_disabled(self, output_dir: Path) -> None:
        designer = EnumDesigner(EnumDesignerConfig(output_dir=str(output_dir), create_output_dir=False))
        assert not output_dir.exists()
        with pytest.raises(FileNotFoundError):
            designer.list_definitions()


class TestEndToEnd:
    def test_direction_lifecycle(self, designer: EnumDesigner, output_dir: Path, hook: RecordingHook) -> None:
        result = designer.create("Direction", ["North", "South", "East", "West"], "Game.Movement")
        assert result.ok

        record = output_dir / "Direction.cs"
        content = record.read_text(encoding="utf-8")
        assert content.startswith("namespace Game.Movement {")
        assert "enum Direction{" in content
        assert content.index("North") < content.index("South") < content.index("East") < content.index("West")

        assert "Direction" in designer.list_definitions()

        assert designer.delete("Direction") == record
        assert "Direction" not in designer.list_definitions()
        assert not record.exists()
        assert hook.calls == [record.resolve(), record.resolve()]
