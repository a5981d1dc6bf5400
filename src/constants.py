import re

BUILTIN_NAMES = frozenset({"exit", "echo", "pwd", "cd", "type"})
SEPARATORS = frozenset(" \t")
EXIT_CODE_RX = re.compile(r"^[+-]?[0-9]+$")
EXIT_CODE_MIN = -2 ** 31
EXIT_CODE_MAX = 2 ** 31 - 1
DEFAULT_PROMPT = "$ "

STATUS_FAILURE = 1
STATUS_CANNOT_EXECUTE = 126
STATUS_NOT_FOUND = 127
