"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (MOCKERY__SECTION__KEY)
3. Project config (nearest .mockery.yaml in the working directory or an ancestor)
4. Global config (~/.config/mockery/config.yaml)
5. Built-in defaults (lowest priority)
"""

from pathlib import Path
from typing import Any, ClassVar

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from mockery.config.models import (
    GenerationConfig,
    LoggingConfig,
    MockeryConfig,
    ParserConfig,
    SearchConfig,
)
from mockery.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/mockery/config.yaml").expanduser()
PROJECT_CONFIG_NAME = ".mockery.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


def find_project_config(start: Path) -> Path | None:
    """Nearest PROJECT_CONFIG_NAME in ``start`` or one of its ancestors."""
    for directory in (start, *start.parents):
        candidate = directory / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class _YamlFilesSource(PydanticBaseSettingsSource):
    """Layered YAML files; a later file overrides an earlier one key by key."""

    def __init__(self, settings_cls: type[BaseSettings], paths: tuple[Path, ...]) -> None:
        super().__init__(settings_cls)
        data: dict[str, Any] = {}
        for path in paths:
            data = _deep_merge(data, _load_yaml(path))
        self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:  # noqa: ARG002
        value = self._data.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


class _SettingsBase(BaseSettings):
    """Sections of MockeryConfig, overridable as MOCKERY__<SECTION>__<KEY>."""

    model_config = SettingsConfigDict(
        env_prefix="MOCKERY__",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    yaml_files: ClassVar[tuple[Path, ...]] = ()

    logging: LoggingConfig = LoggingConfig()
    search: SearchConfig = SearchConfig()
    parser: ParserConfig = ParserConfig()
    generation: GenerationConfig = GenerationConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, _YamlFilesSource(settings_cls, cls.yaml_files))


def _settings_reading(paths: list[Path]) -> type[_SettingsBase]:
    """Settings class whose YAML layer is ``paths``, lowest precedence first."""

    class MockerySettings(_SettingsBase):
        yaml_files: ClassVar[tuple[Path, ...]] = tuple(paths)

    return MockerySettings


def load_config(project_dir: Path | None = None, **kwargs: Any) -> MockeryConfig:
    """Load config: defaults < global yaml < project yaml < env vars < kwargs.

    Args:
        project_dir: Where to start looking for .mockery.yaml (walking up
                     to the filesystem root). Defaults to the working directory.
        **kwargs: Override values per section (highest precedence), e.g.
                  ``search={"radius": 3}``.

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On invalid YAML syntax or validation errors.
    """
    yaml_files = [GLOBAL_CONFIG_PATH]
    project_config = find_project_config((project_dir or Path.cwd()).resolve())
    if project_config is not None:
        yaml_files.append(project_config)

    try:
        settings = _settings_reading(yaml_files)(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
    return MockeryConfig.model_validate(settings.model_dump())
