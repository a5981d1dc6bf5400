""" Commands produced by the resolver.

Each variant is its own class. `kind` records whether the command name
is a shell builtin; `type` reports it without running anything.
"""
from enum import Enum


class Kind(Enum):
    BUILTIN = "builtin"
    UNKNOWN = "unknown"


class Command:
    """ Base class for resolved commands. """
    kind = Kind.BUILTIN

    def __init__(self, name):
        self.name = name

    @property
    def is_builtin(self) -> bool:
        return self.kind is Kind.BUILTIN

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items() if k != "name")
        return f"{type(self).__name__}({fields})"


class Exit(Command):
    def __init__(self, code: int):
        super().__init__("exit")
        self.code = code


class Echo(Command):
    def __init__(self, text: str):
        super().__init__("echo")
        self.text = text


class Pwd(Command):
    def __init__(self):
        super().__init__("pwd")


class Cd(Command):
    def __init__(self, path: str):
        super().__init__("cd")
        self.path = path


class Type(Command):
    """ Classify another command line. `target` is None for a bare `type`. """
    def __init__(self, target: Command | None):
        super().__init__("type")
        self.target = target


class External(Command):
    """ A program looked up on PATH when executed. """
    kind = Kind.UNKNOWN

    def __init__(self, name: str, args: list[str]):
        super().__init__(name)
        self.args = list(args)

    @property
    def argument(self) -> str:
        """ The arguments joined into the single string handed to the program. """
        return " ".join(self.args)

    def __repr__(self):
        return f"External(name={self.name!r}, args={self.args!r})"
