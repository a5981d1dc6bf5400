""" Resolve token lists into commands. """
from loguru import logger

from command import Cd, Command, Echo, Exit, External, Pwd, Type
from constants import BUILTIN_NAMES, EXIT_CODE_MAX, EXIT_CODE_MIN, EXIT_CODE_RX
from exceptions import EmptyCommand

RESOLVERS = {}


def resolver(name):
    """Decorator to register the constructor for a builtin name"""
    def wrapper(func):
        RESOLVERS[name] = func
        return func
    return wrapper


def parse_exit_code(text: str) -> int:
    """ Parse a signed 32-bit base-10 status; anything else means 0. """
    if not EXIT_CODE_RX.match(text):
        return 0
    code = int(text)
    if not EXIT_CODE_MIN <= code <= EXIT_CODE_MAX:
        return 0
    return code


@resolver("exit")
def resolve_exit(args: list[str]) -> Command:
    return Exit(parse_exit_code(" ".join(args)))


@resolver("echo")
def resolve_echo(args: list[str]) -> Command:
    return Echo(" ".join(args))


@resolver("pwd")
def resolve_pwd(args: list[str]) -> Command:
    return Pwd()


@resolver("cd")
def resolve_cd(args: list[str]) -> Command:
    # bare `cd` goes home
    return Cd(" ".join(args) if args else "~")


@resolver("type")
def resolve_type(args: list[str]) -> Command:
    return Type(resolve(args) if args else None)


def resolve(tokens: list[str]) -> Command:
    """ Build the command for a token list.

    The first token names the command and the rest are its arguments.
    Builtin names get their own command class; any other name becomes an
    External command. Only an empty token list is rejected.
    """
    if not tokens:
        raise EmptyCommand()

    name, args = tokens[0], tokens[1:]
    if name in BUILTIN_NAMES:
        cmd = RESOLVERS[name](args)
    else:
        cmd = External(name, args)

    logger.debug("resolved {!r} -> {!r}", name, cmd)
    return cmd
