import argparse
import logging
import sys

from . import __version__
from .builder_api import build
from .errors import BuildError
from .logs import setup_logging
from .project import init_site

log = logging.getLogger("staticurl")

BANNER = f"staticurl v{__version__}\nsimple and fast flat-file based url shortener without any database\n"


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="staticurl")
    parser.add_argument("-b", "--build", action="store_true", help="Build Current Project")
    parser.add_argument("-n", "--name", default="", metavar="NAME", help="Create New staticurl Site")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print warnings and errors")
    parser.add_argument("-V", "--version", action="version", version=f"staticurl v{__version__}")
    return parser


def main(argv=None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)
    setup_logging(quiet=args.quiet)

    if args.build:
        try:
            build()
        except BuildError as e:
            log.error(str(e))
            return 1
        return 0

    if args.name:
        init_site(args.name)
        return 0

    print(BANNER)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
