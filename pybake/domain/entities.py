from dataclasses import dataclass
from enum import Enum
from pathlib import Path

Cmd = tuple[str, ...]


class BuildMode(str, Enum):
    DEBUG = "debug"
    RELEASE = "release"

    @property
    def flag(self) -> str:
        """The optimisation flag used for compiling and linking."""
        return "-O0" if self is BuildMode.DEBUG else "-O3"

    def __str__(self) -> str:
        return self.value


class SourceLanguage(Enum):
    C = "c"
    CPP = "c++"

    @classmethod
    def from_extension(cls, extension: str) -> "SourceLanguage | None":
        match extension:
            case "c":
                return cls.C
            case "cc" | "cxx" | "cpp" | "c++":
                return cls.CPP
            case _:
                return None


@dataclass(frozen=True)
class SourceEntry:
    path: Path
    language: SourceLanguage
    mtime_ns: int


@dataclass(frozen=True)
class ProjectConfig:
    name: str


@dataclass(frozen=True)
class CommandEntity:
    output_path: Path
    command: Cmd


@dataclass(frozen=True)
class BuildStructure:
    src: Path
    output: Path
    executable: Path
