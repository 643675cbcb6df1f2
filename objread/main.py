import logging
import sys

from objread.errors import ObjectReadError
from objread.formatting import render_report
from objread.models import read_object
from objread.utils import configure_logging, get_parser, object_path, read_source

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    if args.git_dir is not None:
        try:
            object_path(args.git_dir, args.source)
        except ValueError as e:
            parser.error(str(e))

    try:
        data = read_source(args.source, git_dir=args.git_dir)
    except OSError as e:
        logger.error("Couldn't read %s: %s", args.source, e.strerror or e)
        return 1

    try:
        obj = read_object(data)
        report = render_report(obj)
    except ObjectReadError as e:
        logger.error("%s", e)
        return 1

    if args.git_dir is not None and obj.signature != args.source.lower():
        logger.warning(
            "Signature mismatch: requested %s, but content hashes to %s",
            args.source,
            obj.signature,
        )

    sys.stdout.buffer.write(report.encode("utf-8", "surrogateescape"))
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
