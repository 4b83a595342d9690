import argparse
import logging
import os
import sys

from .config import DEFAULT_LOG_LEVEL, DESCRIPTION, EPILOG, LOG_LEVEL_ENV, PROG_NAME
from .errors import PdfMergeError
from .io.files import resolve_target_dir, list_pdf_files, print_pdf_listing
from .io.prompts import prompt_for_output_path
from .pdf.merge import resolve_merge_tool, merge_pdfs_in_order


class UsageParser(argparse.ArgumentParser):
    """argparse parser that reports usage errors with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = UsageParser(
        prog=PROG_NAME,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "directory", nargs="?", default=None,
        help="directory to scan for PDF files (default: current directory)",
    )
    return parser


def setup_logging():
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run(directory=None):
    target_dir = resolve_target_dir(directory)
    tool = resolve_merge_tool()

    pdf_files = list_pdf_files(target_dir)
    print_pdf_listing(pdf_files)

    output_path = prompt_for_output_path()
    merge_pdfs_in_order(tool, pdf_files, output_path)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    try:
        run(args.directory)
    except PdfMergeError as e:
        print(e, file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nAborted.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
