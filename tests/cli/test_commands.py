"""Tests for the mockery CLI commands."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from mockery import __version__
from mockery.cli.main import cli
from tests.fakes import FakeFrontEnd, class_, method, struct, translation_unit

runner = CliRunner()

FOO_MOCK = "struct FooMock : Foo {\n    MOCK_METHOD(void, foo, (), (const, override));\n};\n"


@pytest.fixture
def front_end() -> FakeFrontEnd:
    foo = struct("Foo", method("virtual void foo() const = 0;", "foo", const=True))
    return FakeFrontEnd(translation_unit(foo, class_("Bar")))


def invoke(front_end: FakeFrontEnd, *args: str):
    return runner.invoke(cli, list(args), obj={"front_end": front_end})


class TestGroup:
    """Global options."""

    def test_version(self) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("create", "update", "dump"):
            assert command in result.output

    def test_negative_radius_rejected(self, project: Path, front_end: FakeFrontEnd) -> None:
        result = invoke(front_end, "-r", "-1", "create", str(project / "src" / "Foo.h"))
        assert result.exit_code == 2

    def test_invalid_config_file(
        self, project: Path, front_end: FakeFrontEnd, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A broken project config is reported, not raised."""
        monkeypatch.chdir(project)
        (project / ".mockery.yaml").write_text("search:\n  radius: -4\n")
        result = invoke(front_end, "create", str(project / "src" / "Foo.h"))
        assert result.exit_code == 1
        assert "search.radius" in result.output


class TestCreateCommand:
    """mockery create."""

    def test_prints_mock(self, project: Path, front_end: FakeFrontEnd) -> None:
        result = invoke(front_end, "create", str(project / "src" / "Foo.h"))
        assert result.exit_code == 0, result.output
        assert result.output == FOO_MOCK

    def test_custom_names(self, project: Path, front_end: FakeFrontEnd) -> None:
        result = invoke(
            front_end, "create", str(project / "src" / "Foo.h"), "--interface", "Foo", "-m", "Fake"
        )
        assert result.exit_code == 0, result.output
        assert result.output.startswith("struct Fake : Foo {")

    def test_missing_class_fails_with_name(self, project: Path, front_end: FakeFrontEnd) -> None:
        result = invoke(front_end, "create", str(project / "src" / "Foo.h"), "-i", "Quux")
        assert result.exit_code == 1
        assert "Quux" in result.output

    def test_output_file(self, project: Path, front_end: FakeFrontEnd, tmp_path: Path) -> None:
        target = tmp_path / "FooMock.h"
        result = invoke(front_end, "create", str(project / "src" / "Foo.h"), "-o", str(target))
        assert result.exit_code == 0, result.output
        assert target.read_text() == FOO_MOCK
        assert "Wrote" in result.output

    def test_stdout_overrides_output(
        self, project: Path, front_end: FakeFrontEnd, tmp_path: Path
    ) -> None:
        target = tmp_path / "FooMock.h"
        result = invoke(
            front_end, "create", str(project / "src" / "Foo.h"), "-o", str(target), "--stdout"
        )
        assert result.exit_code == 0, result.output
        assert not target.exists()
        assert result.output == FOO_MOCK

    def test_missing_source(self, tmp_path: Path, front_end: FakeFrontEnd) -> None:
        result = invoke(front_end, "create", str(tmp_path / "Nope.h"))
        assert result.exit_code == 1
        assert "Nope.h" in result.output
        assert front_end.calls == []

    def test_search_radius_option(self, project: Path, front_end: FakeFrontEnd) -> None:
        """The sibling build directory is out of reach at radius 1."""
        result = invoke(front_end, "--search-radius", "1", "create", str(project / "src" / "Foo.h"))
        assert result.exit_code == 1
        assert "compile_commands.json" in result.output

    def test_explicit_compile_commands(
        self, project: Path, front_end: FakeFrontEnd
    ) -> None:
        result = invoke(
            front_end,
            "--compile-commands",
            str(project / "build"),
            "-r",
            "0",
            "create",
            str(project / "src" / "Foo.h"),
        )
        assert result.exit_code == 0, result.output
        assert result.output == FOO_MOCK


class TestUpdateCommand:
    """mockery update."""

    def test_always_fails(self, project: Path, front_end: FakeFrontEnd) -> None:
        result = invoke(front_end, "update", str(project / "src" / "Foo.h"), "--dry-run")
        assert result.exit_code == 1
        assert "Not yet implemented" in result.output


class TestDumpCommand:
    """mockery dump."""

    def test_dump_class(self, project: Path, front_end: FakeFrontEnd) -> None:
        result = invoke(front_end, "dump", str(project / "src" / "Foo.h"), "--class", "Bar")
        assert result.exit_code == 0, result.output
        assert result.output == '"Bar": ClassDecl (None, None, None, None)\n'

    def test_dump_translation_unit(self, project: Path, front_end: FakeFrontEnd) -> None:
        result = invoke(front_end, "dump", str(project / "src" / "Foo.h"))
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0].startswith('"interface.cpp": TranslationUnit')
        assert '\t\t"foo": Method (PUBLIC, "const", None, None)' in lines
