from returns.io import IOResultE

from pybake.domain.builder import build_bin
from pybake.domain.context import BuildContext


def build(args) -> IOResultE[int]:
    return (
        BuildContext.create_from_config(args.dir, args.mode)
        .bind(build_bin)
        .map(lambda _: 0)
    )
