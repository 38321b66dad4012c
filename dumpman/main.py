# main.py
import argparse
import logging
from typing import List, Optional

from . import __version__
from .config import get_settings
from .exceptions import DumpmanError, InvalidRootError
from .mapper import Mapper
from .models import MapOpType

DEFAULT_ROOT = "."

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def setup_logging():
    """Configures logging to stderr and, if configured, a log file."""
    settings = get_settings()

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL)

    # Clear any existing handlers to prevent duplicate logs on re-runs
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if settings.LOG_FILE:
        try:
            file_handler = logging.FileHandler(settings.LOG_FILE)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.error(f"Failed to set up file logging to {settings.LOG_FILE}: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dumpman",
        description="Group the files of a camera dump into named output directories.",
    )
    parser.add_argument(
        "-r",
        "--root",
        default=DEFAULT_ROOT,
        help="The root directory of the SD card (default: current directory)",
    )
    parser.add_argument(
        "-o",
        "--out",
        required=True,
        help="The output directory to store the generated groups",
    )
    parser.add_argument(
        "-a", "--auto", action="store_true", help="Enable autogrouping"
    )
    parser.add_argument(
        "-m",
        "--mkdir",
        action="store_true",
        help="Create the output directory if it does not exist",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def run(args: argparse.Namespace, prompt=None) -> dict:
    """Runs the whole grouping workflow for parsed arguments."""
    mapper = Mapper.try_new(args.root, args.out, mkdir=args.mkdir, prompt=prompt)
    mapper.load_media()

    start, end = mapper.get_range()
    logging.debug(f"Filename range: {start} -> {end}")
    print(
        f"» {len(mapper)} videos ({start}..{end})\n"
        f"» Available ops: {', '.join(MapOpType.names())}"
    )

    if args.auto:
        mapper.group_by_day()
    else:
        mapper.prompt_for_ops()

    print("Processing all operations... (this will take a while)")
    summary = mapper.execute()
    print(f"Done! {mapper.out_path}")
    for name, count in summary.items():
        print(f"  {name}: {count} files")
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup_logging()
        run(args)
    except InvalidRootError as e:
        if args.root == DEFAULT_ROOT:
            logging.error("The current directory is not a valid SD mount point.")
            logging.error(
                "Change directories or use the `-r` option to set the mount point root."
            )
        logging.error(e)
        return EXIT_ERROR
    except DumpmanError as e:
        logging.error(e)
        return EXIT_ERROR
    except (KeyboardInterrupt, EOFError):
        print()
        logging.warning("Interrupted, exiting.")
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
