""" Implement the core of the shell. """
from loguru import logger

from constants import DEFAULT_PROMPT
from exceptions import EmptyCommand, ShellExit
from lexer import tokenize
from parser import resolve
from runner import execute_command
from shell_state import ShellState


def read_command(prompt=DEFAULT_PROMPT):
    """ Read one line, without trailing whitespace. """
    return input(prompt).rstrip()


def run_line(line: str, state: ShellState) -> int | None:
    """
    Tokenize, resolve and execute one line.
    Returns the command status, or None when the line was blank.
    ShellExit from `exit` propagates to the caller.
    """
    tokens = tokenize(line)
    try:
        cmd = resolve(tokens)
    except EmptyCommand:
        return None

    status = execute_command(cmd, state)
    state.set_status(status)
    return status


class Shell:
    def __init__(self, state=None, prompt=DEFAULT_PROMPT):
        self.state = ShellState() if state is None else state
        self.prompt = prompt

    def run(self):
        while True:
            try:
                line = read_command(self.prompt)
                run_line(line, self.state)
            except ShellExit as e:
                logger.debug("exit requested with status {}", e.status)
                return e.status

            except EOFError:
                print(file=self.state.stdout)
                return 0

            except KeyboardInterrupt:
                print(file=self.state.stdout)
