from collections.abc import Mapping
from dataclasses import dataclass
import os

from pybake.domain.entities import SourceLanguage

DEFAULT_CC = "cc"
DEFAULT_CXX = "c++"


@dataclass(frozen=True)
class Toolchain:
    """Compiler commands used for one build.

    Resolved once when the build context is created, so a single build never
    mixes compilers even if the environment changes while it runs.
    """

    cc: str = DEFAULT_CC
    cxx: str = DEFAULT_CXX

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] = os.environ) -> "Toolchain":
        return cls(
            cc=environ.get("CC", DEFAULT_CC),
            cxx=environ.get("CXX", DEFAULT_CXX),
        )

    def compiler_for(self, language: SourceLanguage) -> str:
        match language:
            case SourceLanguage.C:
                return self.cc
            case SourceLanguage.CPP:
                return self.cxx

    @property
    def linker(self) -> str:
        # The C driver links C++ objects too.
        return self.cc
