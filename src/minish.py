#!/usr/bin/env python3
"""
Command-line entry point for minish.

Without options this starts the interactive prompt. `-c COMMAND` runs a
single line instead and exits with its status.
"""
import argparse
import sys

from constants import DEFAULT_PROMPT
from exceptions import ShellExit
from logging_utils import configure_logging
from shell import Shell, run_line
from shell_state import ShellState


def build_parser():
    parser = argparse.ArgumentParser(
        prog="minish",
        description="A small interactive shell with quoting and PATH lookup"
    )
    parser.add_argument(
        "-c",
        dest="command",
        metavar="COMMAND",
        help="Run COMMAND and exit instead of reading from the terminal"
    )
    parser.add_argument(
        "--prompt",
        default=DEFAULT_PROMPT,
        help=f"Prompt shown before each line (default: {DEFAULT_PROMPT!r})"
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Log level for stderr diagnostics (default: $MINISH_LOG_LEVEL or WARNING)"
    )
    return parser


def run_command(line: str, state: ShellState) -> int:
    try:
        run_line(line.rstrip(), state)
    except ShellExit as e:
        return e.status
    return state.last_status


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    state = ShellState()
    if args.command is not None:
        rc = run_command(args.command, state)
    else:
        rc = Shell(state, prompt=args.prompt).run()
    sys.exit(rc)


if __name__ == "__main__":
    main()
