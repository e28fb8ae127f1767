"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local mockery package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of mockery modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("mockery"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Keep user config files and MOCKERY__* env vars out of tests."""
    from mockery.config import loader

    for key in [k for k in os.environ if k.startswith("MOCKERY__")]:
        monkeypatch.delenv(key)
    monkeypatch.setattr(
        loader, "GLOBAL_CONFIG_PATH", tmp_path_factory.mktemp("home") / "config.yaml"
    )
    yield


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A build tree: project/src/Foo.h with project/build/compile_commands.json."""
    from tests.fakes import write_database

    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "build").mkdir()
    source = root / "src" / "Foo.h"
    source.write_text("struct Foo { virtual void foo() const = 0; };\n")
    write_database(
        root / "build",
        [
            {
                "directory": str(root / "build"),
                "file": str(source),
                "command": f"/usr/bin/c++ -std=c++17 -I../include -c {source}",
            }
        ],
    )
    return root



@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers bound to streams captured by earlier tests."""
    import logging

    import structlog

    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
