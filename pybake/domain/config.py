from pathlib import Path
from typing import Any

import toml
from returns.io import IOFailure, IOResultE, IOSuccess, impure_safe
from returns.pipeline import flow
from returns.pointfree import alt, bind

from pybake.domain.entities import ProjectConfig
from pybake.domain.errors import ConfigError, InvalidProject

CONFIG_FILE = "bake.toml"


@impure_safe
def _read_config_file(config_path: Path) -> str:
    return config_path.read_text()


@impure_safe
def _parse_config_file(content: str) -> dict[str, Any]:
    return toml.loads(content)


def create_project_config(config: dict[str, Any]) -> IOResultE[ProjectConfig]:
    name = config.get("name")
    if not isinstance(name, str):
        return IOFailure(InvalidProject(f"'{CONFIG_FILE}' is missing the project 'name'"))
    return IOSuccess(ProjectConfig(name=name))


def load_config(config_path: Path) -> IOResultE[ProjectConfig]:
    return flow(
        config_path,
        _read_config_file,
        alt(lambda e: ConfigError(f"Failed to read '{config_path.name}'", e)),
        bind(
            lambda content: _parse_config_file(content).alt(
                lambda e: ConfigError(f"Failed to parse '{config_path.name}'", e)
            )
        ),
        bind(create_project_config),
    )
