""" Current state of the shell.

Everything a command may touch outside itself goes through here: the
environment, the working directory, the output stream, the filesystem
probe used by PATH search and the program spawner. Tests swap these out.
"""
import os
import sys

from executable import is_regular_file, spawn_captured


class ShellState:
    def __init__(self, environ=None, stdout=None, is_file=is_regular_file, spawn=spawn_captured):
        self.environ = os.environ if environ is None else environ
        self.is_file = is_file
        self.spawn = spawn
        self._stdout = stdout
        self.last_status = 0

    @property
    def stdout(self):
        # resolved late so a patched sys.stdout is honored
        return self._stdout if self._stdout is not None else sys.stdout

    def get_var(self, name: str) -> str | None:
        return self.environ.get(name)

    def set_status(self, status: int):
        self.last_status = int(status) if status is not None else 0

    def getcwd(self) -> str:
        return os.getcwd()

    def chdir(self, path: str):
        os.chdir(path)

    def expand_home(self, path: str) -> str:
        """ Replace a leading `~` with HOME; left alone when HOME is unset. """
        home = self.get_var("HOME")
        if home is None or not path.startswith("~"):
            return path
        return home + path[1:]
