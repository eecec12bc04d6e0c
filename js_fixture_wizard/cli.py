"""Command-line interface for js-fixture-wizard."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from js_fixture_wizard.config import DEFAULT_OUTPUT, ScanConfig
from js_fixture_wizard.pipeline import format_summary, run_pipeline
from js_fixture_wizard.store import PersistenceError, load_function_tree
from js_fixture_wizard.wizard import (
    ConsoleAnswerSource,
    RepromptPolicy,
    ScriptedAnswerSource,
    load_answers_file,
)

logger = logging.getLogger(__name__)

COMMANDS = ("run", "summary")


def setup_logging(verbose: bool = False):
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="js-fixture-wizard",
        description="Discover JS/TS function signatures and record test fixtures",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run subcommand
    run_parser = subparsers.add_parser(
        "run",
        help="Scan sources and prompt for test fixtures (default)",
    )
    run_parser.add_argument(
        "--root",
        "-r",
        default=".",
        help="Project root containing client/, server/ and contracts/ (default: .)",
    )
    run_parser.add_argument(
        "--output",
        "-o",
        default=str(DEFAULT_OUTPUT),
        help=f"Path of the function tree artifact (default: ./{DEFAULT_OUTPUT})",
    )
    run_parser.add_argument(
        "--answers",
        "-a",
        default=None,
        help="File with one answer per line, replayed instead of reading stdin",
    )
    run_parser.add_argument(
        "--skip-unchanged",
        action="store_true",
        help="Reuse previous fixtures for functions whose signature is unchanged",
    )
    run_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress details to stderr",
    )

    # summary subcommand
    summary_parser = subparsers.add_parser(
        "summary",
        help="Print the summary of an existing function tree artifact",
    )
    summary_parser.add_argument(
        "--output",
        "-o",
        default=str(DEFAULT_OUTPUT),
        help=f"Path of the function tree artifact (default: ./{DEFAULT_OUTPUT})",
    )

    return parser


def parse_args(args: list[str]) -> argparse.Namespace:
    """Parse command-line arguments, defaulting to the run command."""
    parser = create_parser()

    # No subcommand means "run"; top-level --help still shows all commands
    if not args or (args[0] not in COMMANDS and args[0] not in ("-h", "--help")):
        args = ["run"] + args

    return parser.parse_args(args)


async def run_wizard(
    root: str,
    output: str,
    answers_path: str | None = None,
    skip_unchanged: bool = False,
) -> int:
    """Run the run command.

    Args:
        root: Project root to scan
        output: Path of the JSON artifact
        answers_path: Optional scripted-answers file
        skip_unchanged: Reuse fixtures for unchanged signatures

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    config = ScanConfig.from_args(root=root, output=output)
    policy = RepromptPolicy.SKIP_UNCHANGED if skip_unchanged else RepromptPolicy.ALWAYS

    if answers_path:
        try:
            answers = ScriptedAnswerSource(load_answers_file(Path(answers_path)))
        except OSError as e:
            print(f"Error: could not read answers file: {e}", file=sys.stderr)
            return 1
    else:
        answers = ConsoleAnswerSource()

    print(f"Starting codebase analysis of {config.root}")
    try:
        tree = await run_pipeline(config, answers, policy=policy)
    except PersistenceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"\nFunction tree saved to {config.output_path}")
    print(f"Found {len(tree)} files with functions\n")
    print(format_summary(tree))
    return 0


def run_summary(output: str) -> int:
    """Run the summary command."""
    path = Path(output)
    tree = load_function_tree(path)
    if not tree:
        print(f"No function tree found at {path}", file=sys.stderr)
        return 1

    print(format_summary(tree))
    return 0


async def run_cli(args: list[str]) -> int:
    """Run the CLI with the given arguments.

    Args:
        args: Command-line arguments (without program name)

    Returns:
        Exit code (0 for success, non-zero for fatal errors)
    """
    try:
        parsed = parse_args(args)
    except SystemExit as e:
        return e.code if e.code else 0

    setup_logging(getattr(parsed, "verbose", False))

    if parsed.command == "run":
        return await run_wizard(
            parsed.root, parsed.output, parsed.answers, parsed.skip_unchanged
        )
    elif parsed.command == "summary":
        return run_summary(parsed.output)

    return 1


def main():
    """Entry point for the CLI."""
    try:
        exit_code = asyncio.run(run_cli(sys.argv[1:]))
    except KeyboardInterrupt:
        print("\nInterrupted; previous function tree left untouched", file=sys.stderr)
        exit_code = 130
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
