""" Exceptions raised by the shell. """


class ShellError(Exception):
    """ Base class for shell errors. """


class EmptyCommand(ShellError):
    """ Raised when resolving a line that holds no tokens. """
    def __init__(self):
        super().__init__("empty command")


class ShellExit(ShellError):
    """ Raised by `exit` to stop the read/eval loop. """
    def __init__(self, status: int):
        super().__init__(f"exit {status}")
        self.status = status
