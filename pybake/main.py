import logging
import sys

from returns.io import IOResultE
from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io

from pybake.args import ArgsConfig, args_parse
from pybake.commands import build, new, run
from pybake.domain.errors import error_chain


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def pybake(args: ArgsConfig, argv: list[str]) -> IOResultE[int]:
    match args.action:
        case "new":
            return new(args)
        case "build":
            return build(args)
        case "run":
            return run(args, argv)
        case action:
            raise NotImplementedError(f"{action} is not implemented yet")


def report_error(error: BaseException) -> None:
    chain = error_chain(error)
    print(f"\033[1;31mError:\033[0m {next(chain)}", file=sys.stderr)
    for cause in chain:
        print(f"\033[1;90mCaused by:\033[0m {cause}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args, extra = args_parse(sys.argv[1:] if argv is None else argv)
    setup_logging(verbose=args.verbose, debug=args.debug_log)

    result = pybake(args, extra)
    if not is_successful(result):
        report_error(unsafe_perform_io(result.failure()))
        return 1
    return unsafe_perform_io(result.unwrap())


if __name__ == "__main__":
    sys.exit(main())
