from returns.io import IOResultE

from pybake.domain.builder import run_bin
from pybake.domain.context import BuildContext


def run(args, argv) -> IOResultE[int]:
    return BuildContext.create_from_config(args.dir, args.mode).bind(
        lambda context: run_bin(context, argv)
    )
