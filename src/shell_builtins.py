""" Registry of builtin commands. """
from loguru import logger

from command import Cd, Echo, Exit, Pwd, Type
from constants import STATUS_FAILURE, STATUS_NOT_FOUND
from exceptions import ShellExit
from executable import find_in_path
from shell_state import ShellState

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


@builtin("cd")
def builtin_cd(cmd: Cd, state: ShellState) -> int:
    target = state.expand_home(cmd.path)
    try:
        state.chdir(target)
        return 0
    except (OSError, ValueError) as e:
        # missing path, a file, no permission, embedded NUL: all reported the same way
        logger.debug("chdir({!r}) failed: {}", target, e)
    print(f"cd: {target}: No such file or directory", file=state.stdout)
    return STATUS_FAILURE


@builtin("echo")
def builtin_echo(cmd: Echo, state: ShellState) -> int:
    print(cmd.text, file=state.stdout)
    return 0


@builtin("exit")
def builtin_exit(cmd: Exit, state: ShellState):
    raise ShellExit(cmd.code)


@builtin("pwd")
def builtin_pwd(cmd: Pwd, state: ShellState) -> int:
    print(state.getcwd(), file=state.stdout)
    return 0


@builtin("type")
def builtin_type(cmd: Type, state: ShellState) -> int:
    """
    Report how a command name would be run, without running it.
    Builtins are named as such; anything else is looked up on PATH.
    """
    target = cmd.target
    if target is None:
        return 0

    if target.is_builtin:
        print(f"{target.name} is a shell builtin", file=state.stdout)
        return 0

    path = find_in_path(target.name, state.get_var("PATH"), state.is_file)
    if path is None:
        print(f"{target.name}: not found", file=state.stdout)
        return STATUS_NOT_FOUND

    print(f"{target.name} is {path}", file=state.stdout)
    return 0
