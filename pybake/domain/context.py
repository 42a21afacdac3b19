from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path

from returns.io import IOResultE

from pybake.domain.config import CONFIG_FILE, load_config
from pybake.domain.entities import BuildMode, BuildStructure, ProjectConfig
from pybake.domain.toolchain import Toolchain


def get_project_structure(
    directory: Path, mode: BuildMode, config: ProjectConfig
) -> BuildStructure:
    output = Path(directory, "bin", str(mode))
    return BuildStructure(
        src=Path(directory, "src"),
        output=output,
        executable=Path(output, config.name),
    )


@dataclass(frozen=True)
class BuildContext:
    config: ProjectConfig
    mode: BuildMode
    toolchain: Toolchain
    files: BuildStructure

    @classmethod
    def create_from_config(
        cls,
        directory: Path,
        mode: BuildMode,
        environ: Mapping[str, str] = os.environ,
    ) -> IOResultE["BuildContext"]:
        toolchain = Toolchain.from_environment(environ)
        return load_config(Path(directory, CONFIG_FILE)).map(
            lambda config: cls(
                config=config,
                mode=mode,
                toolchain=toolchain,
                files=get_project_structure(directory, mode, config),
            )
        )
