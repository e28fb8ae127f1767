"""Tests for MockeryApp orchestration."""

from pathlib import Path

import pytest

from mockery.app import MockeryApp, canonicalize_source
from mockery.config import MockeryConfig
from mockery.core.errors import (
    CompilationDatabaseError,
    ErrorCode,
    GenerationError,
    InternalError,
    SourceFileError,
)
from tests.fakes import FakeFrontEnd, class_, method, namespace, struct, translation_unit


@pytest.fixture
def foo_front_end() -> FakeFrontEnd:
    """Translation unit holding ``struct Foo { virtual void foo() const = 0; };``."""
    foo = struct("Foo", method("virtual void foo() const = 0;", "foo", const=True))
    return FakeFrontEnd(translation_unit(foo))


class TestCanonicalizeSource:
    def test_resolves_relative_path(self, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(project / "src")
        assert canonicalize_source(Path("Foo.h")) == (project / "src" / "Foo.h").resolve()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceFileError) as exc_info:
            canonicalize_source(tmp_path / "Missing.h")
        assert exc_info.value.code == ErrorCode.SOURCE_UNREADABLE

    def test_directory_is_not_a_source(self, tmp_path: Path) -> None:
        with pytest.raises(SourceFileError):
            canonicalize_source(tmp_path)


class TestOpen:
    """Compile command resolution and parsing."""

    def test_parses_with_sanitized_arguments(
        self, project: Path, foo_front_end: FakeFrontEnd
    ) -> None:
        source = project / "src" / "Foo.h"

        MockeryApp.open(source, front_end=foo_front_end)

        [(filename, arguments)] = foo_front_end.calls
        assert filename == str(source.resolve())
        assert arguments == ["-std=c++17", f"-I{project / 'build' / '../include'}", "-c"]

    def test_extra_args_from_config(self, project: Path, foo_front_end: FakeFrontEnd) -> None:
        config = MockeryConfig(parser={"extra_args": ["-DMOCKING"]})
        MockeryApp.open(project / "src" / "Foo.h", config=config, front_end=foo_front_end)
        assert foo_front_end.calls[0][1][-1] == "-DMOCKING"

    def test_radius_too_small(self, project: Path, foo_front_end: FakeFrontEnd) -> None:
        config = MockeryConfig(search={"radius": 1})
        with pytest.raises(CompilationDatabaseError) as exc_info:
            MockeryApp.open(project / "src" / "Foo.h", config=config, front_end=foo_front_end)
        assert exc_info.value.code == ErrorCode.COMPDB_NOT_FOUND
        assert foo_front_end.calls == []

    def test_explicit_database_directory(self, project: Path, foo_front_end: FakeFrontEnd) -> None:
        config = MockeryConfig(search={"radius": 0})
        app = MockeryApp.open(
            project / "src" / "Foo.h",
            project / "build",
            config=config,
            front_end=foo_front_end,
        )
        assert app.root is foo_front_end.root

    def test_source_not_in_database(self, project: Path, foo_front_end: FakeFrontEnd) -> None:
        other = project / "src" / "Other.h"
        other.write_text("")
        with pytest.raises(CompilationDatabaseError) as exc_info:
            MockeryApp.open(other, front_end=foo_front_end)
        assert exc_info.value.code == ErrorCode.COMPDB_NO_COMMAND


class TestRunCreate:
    """Mock generation entry point."""

    def test_interface_defaults_to_file_stem(self, project: Path, foo_front_end: FakeFrontEnd) -> None:
        app = MockeryApp.open(project / "src" / "Foo.h", front_end=foo_front_end)
        assert app.run_create() == (
            "struct FooMock : Foo {\n    MOCK_METHOD(void, foo, (), (const, override));\n};"
        )

    def test_explicit_names(self, tmp_path: Path) -> None:
        store = class_("Store", method("virtual int size() const = 0;", "size", const=True))
        app = MockeryApp(tmp_path / "x.h", translation_unit(namespace("db", store)), MockeryConfig())

        text = app.run_create("Store", "FakeStore")

        assert text.startswith("struct FakeStore : db::Store {\n")

    def test_suffix_and_indent_from_config(self, tmp_path: Path) -> None:
        foo = struct("Foo", method("virtual void f() = 0;", "f"))
        config = MockeryConfig(generation={"mock_suffix": "Stub", "indent": "  "})
        app = MockeryApp(tmp_path / "Foo.h", translation_unit(foo), config)
        assert app.run_create() == "struct FooStub : Foo {\n  MOCK_METHOD(void, f, (), (override));\n};"

    def test_missing_class_names_it(self, tmp_path: Path) -> None:
        app = MockeryApp(tmp_path / "Foo.h", translation_unit(class_("Bar")), MockeryConfig())
        with pytest.raises(GenerationError) as exc_info:
            app.run_create("Baz")
        assert "Baz" in exc_info.value.message
        assert exc_info.value.code == ErrorCode.CLASS_NOT_FOUND


class TestRunUpdate:
    def test_not_implemented(self, tmp_path: Path) -> None:
        app = MockeryApp(tmp_path / "Foo.h", translation_unit(), MockeryConfig())
        with pytest.raises(InternalError) as exc_info:
            app.run_update()
        assert exc_info.value.code == ErrorCode.NOT_IMPLEMENTED


class TestRunDump:
    def test_named_class(self, tmp_path: Path) -> None:
        app = MockeryApp(
            tmp_path / "Foo.h", translation_unit(class_("Foo"), class_("Bar")), MockeryConfig()
        )
        assert app.run_dump("Bar") == '"Bar": ClassDecl (None, None, None, None)\n'

    def test_unknown_class_dumps_whole_unit(self, tmp_path: Path) -> None:
        app = MockeryApp(tmp_path / "Foo.h", translation_unit(class_("Foo")), MockeryConfig())
        assert app.run_dump("Nope") == app.run_dump()
        assert app.run_dump().startswith('"interface.cpp": TranslationUnit')
