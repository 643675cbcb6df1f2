import logging
import pathlib
import re
import sys
from argparse import ArgumentParser

LOG_FORMAT = "%(levelname)s:\t%(message)s"
STDIN = "-"
OBJECT_ID = re.compile(r"[0-9a-f]{40}")


def get_parser():
    parser = ArgumentParser(
        prog="objread",
        description="Print a git object in a human-readable format.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="show debug messages"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="hide warnings"
    )
    parser.add_argument(
        "--git-dir",
        type=pathlib.Path,
        help="read SOURCE as an object id from this repository's object store",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=STDIN,
        help="object file, or object id with --git-dir (default: stdin)",
    )
    return parser


def configure_logging(*, verbose: bool = False, quiet: bool = False):
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def object_path(git_dir: pathlib.Path, hash_value: str) -> pathlib.Path:
    hash_value = hash_value.lower()
    if not OBJECT_ID.fullmatch(hash_value):
        raise ValueError(f"Invalid object id: {hash_value}")
    return git_dir / "objects" / hash_value[:2] / hash_value[2:]


def read_source(source: str, *, git_dir: pathlib.Path | None = None) -> bytes:
    if git_dir is not None:
        path = object_path(git_dir, source)
    elif source == STDIN:
        return sys.stdin.buffer.read()
    else:
        path = pathlib.Path(source)
    with path.open("rb") as f:
        return f.read()
