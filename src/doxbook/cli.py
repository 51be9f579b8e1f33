"""Command-line interface for doxbook."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from doxbook.book.host import BOOK_STATE_FILE, Book, load_config, load_state, save_state
from doxbook.book.stores import InMemoryNavigationStore
from doxbook.exceptions import ConfigurationError
from doxbook.pipeline.orchestrator import on_init

DEFAULT_BOOK_ROOT = Path(".")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _state_path(args: argparse.Namespace) -> Path:
    return args.state or args.book / BOOK_STATE_FILE


def generate(args: argparse.Namespace) -> int:
    """Execute the generate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    book_root = args.book.resolve()
    if not book_root.is_dir():
        logger.error(f"Book directory not found: {book_root}")
        return 1

    state_path = _state_path(args)
    overrides = {
        "src": args.src,
        "concurrency": args.concurrency,
        "articles_policy": "merge" if args.merge else None,
    }

    try:
        config = load_config(book_root, overrides)
        state = load_state(state_path)
    except ConfigurationError as e:
        logger.error(e.message)
        return 1

    book = Book.from_state(book_root, config, state, log=logging.getLogger("doxbook"))
    result = asyncio.run(on_init(book))

    if not result.succeeded:
        return 1

    save_state(state, state_path)

    logger.info(f"Generated {len(result.documents)} of {result.source_count} documents")
    logger.info(f"  Output: {book.output_dir}")
    skipped = result.source_count - len(result.documents)
    if skipped:
        logger.warning(f"  Skipped: {skipped}")
    if result.segments:
        logger.info(
            f"  Navigation: {result.segments[0].index}-{result.segments[-1].index}"
        )
    return 0


def show_navigation(args: argparse.Namespace) -> int:
    """Execute the navigation command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        state = load_state(_state_path(args))
    except ConfigurationError as e:
        logger.error(e.message)
        return 1

    store = InMemoryNavigationStore(state.navigation)
    visited = 0
    for segment in store.walk():
        logger.info(f"{segment.index:>4}  {segment.level:<8} {segment.title} ({segment.path})")
        visited += 1

    if visited != len(store):
        logger.warning(f"Navigation chain reaches {visited} of {len(store)} segments")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="doxbook",
        description="Generate API documents from source comments into a book",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate documents and register them in the book",
        description="Render doc comments of the configured sources to Markdown, write them under the book root, and append them to the last chapter and the navigation order.",
    )
    generate_parser.add_argument(
        "--book",
        type=Path,
        default=DEFAULT_BOOK_ROOT,
        help=f"Book root directory (default: {DEFAULT_BOOK_ROOT})",
    )
    generate_parser.add_argument(
        "--src",
        type=str,
        default=None,
        help="Glob pattern of source files (overrides book.json)",
    )
    generate_parser.add_argument(
        "--state",
        type=Path,
        default=None,
        help=f"Existing book state file with at least one chapter (default: <book>/{BOOK_STATE_FILE})",
    )
    generate_parser.add_argument(
        "--merge",
        action="store_true",
        help="Keep the last chapter's existing articles instead of replacing them",
    )
    generate_parser.add_argument(
        "--concurrency",
        type=int,
        default=None,
        help="Maximum number of file reads or writes in flight",
    )
    generate_parser.set_defaults(func=generate)

    navigation_parser = subparsers.add_parser(
        "navigation",
        help="Print the book's navigation order",
        description="Follow the navigation chain from its first segment and print each entry.",
    )
    navigation_parser.add_argument(
        "--book",
        type=Path,
        default=DEFAULT_BOOK_ROOT,
        help=f"Book root directory (default: {DEFAULT_BOOK_ROOT})",
    )
    navigation_parser.add_argument(
        "--state",
        type=Path,
        default=None,
        help=f"Existing book state file (default: <book>/{BOOK_STATE_FILE})",
    )
    navigation_parser.set_defaults(func=show_navigation)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
