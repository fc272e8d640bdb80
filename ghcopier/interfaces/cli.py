"""copy a file or folder from a public GitHub repository

examples:
  ghcopier https://github.com/owner/repo/blob/main/file.txt
  ghcopier https://github.com/owner/repo/blob/main/file.txt downloaded_file.txt
  ghcopier https://github.com/owner/repo/tree/main/folder
  ghcopier https://github.com/owner/repo/tree/main/folder ./local_folder
"""

import argparse
import sys
from typing import Optional, Sequence

from ..infrastructure.error_handler import CopierError
from ..models import CopierConfig
from ..version import __version__
from .api import GitHubCopier


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghcopier",
        description=__doc__,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument("url", help="GitHub blob, tree or raw.githubusercontent.com URL")
    parser.add_argument(
        "destination",
        nargs="?",
        default=None,
        help="local path (default: the file or folder name from the URL)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log every request")
    parser.add_argument(
        "--timeout",
        type=float,
        default=CopierConfig.timeout,
        help="per-request timeout in seconds (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = CopierConfig(timeout=args.timeout)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    copier = GitHubCopier(config, verbose=args.verbose)
    try:
        result = copier.copy(args.url, args.destination)
    except CopierError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(
        f"Copied {result.file_count} file(s), {result.bytes_written} bytes "
        f"to {result.destination}",
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
