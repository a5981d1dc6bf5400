""" Locate and run external programs. """
import os
import subprocess

from loguru import logger


def is_regular_file(path: str) -> bool:
    return os.path.isfile(path)


def find_in_path(name: str, path_var: str | None, is_file=is_regular_file) -> str | None:
    """
    Return the first `dir/name` along `path_var` that is a regular file.

    `path_var` is the raw PATH value, split on the platform separator and
    searched in order. A missing PATH or no match gives None.
    """
    if path_var is None:
        return None

    for directory in path_var.split(os.pathsep):
        candidate = os.path.join(directory, name)
        if is_file(candidate):
            logger.debug("found {!r} at {}", name, candidate)
            return candidate

    logger.debug("{!r} not found on PATH", name)
    return None


def spawn_captured(path: str, argument: str) -> bytes:
    """ Run `path` with `argument` as its only argument and return its stdout. """
    argv = [path, argument] if argument else [path]
    logger.debug("spawning {}", argv)
    completed = subprocess.run(argv, stdout=subprocess.PIPE, check=False)
    logger.debug("{} exited with {}", path, completed.returncode)
    return completed.stdout
