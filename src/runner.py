""" Execute a resolved command. """
from loguru import logger

from command import Command, External
from constants import STATUS_CANNOT_EXECUTE, STATUS_NOT_FOUND
from executable import find_in_path
from shell_builtins import BUILTINS
from shell_state import ShellState


def write_output(data: bytes, stream):
    """ Pass program output through untouched where the stream takes bytes. """
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        print(data.decode("utf-8", errors="replace"), end="", file=stream)
        return
    stream.flush()
    buffer.write(data)
    buffer.flush()


def run_external(cmd: External, state: ShellState) -> int:
    path = find_in_path(cmd.name, state.get_var("PATH"), state.is_file)
    if path is None:
        print(f"{cmd.name}: not found", file=state.stdout)
        return STATUS_NOT_FOUND

    try:
        output = state.spawn(path, cmd.argument)
    except (OSError, ValueError) as e:
        # ValueError: embedded null byte in the argument
        logger.warning("could not run {}: {}", path, e)
        print(f"{cmd.name}: {getattr(e, 'strerror', None) or e}", file=state.stdout)
        return STATUS_CANNOT_EXECUTE

    write_output(output, state.stdout)
    return 0


def execute_command(cmd: Command, shell_state: ShellState) -> int:
    if cmd.is_builtin:
        return BUILTINS[cmd.name](cmd, shell_state) or 0
    return run_external(cmd, shell_state)
