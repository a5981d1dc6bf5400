""" Lexical analysis for shell commands.

The lexer is a small state machine driven one character at a time:

    START          between tokens
    UNQUOTED       building a token from literal characters
    SINGLE_QUOTED  inside '...', everything is literal
    DOUBLE_QUOTED  inside "...", everything but the closing quote is literal

A closing quote drops back to START without flushing, so quoted regions
join whatever sits next to them (ab'c d'ef -> "abc def"). Only unquoted
whitespace ends a token. Backslash has no special meaning anywhere.
"""
from enum import Enum

from loguru import logger

from constants import SEPARATORS


class State(Enum):
    START = "start"
    UNQUOTED = "unquoted"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"


OPENERS = {"'": State.SINGLE_QUOTED, '"': State.DOUBLE_QUOTED}
CLOSERS = {State.SINGLE_QUOTED: "'", State.DOUBLE_QUOTED: '"'}


def flush(token: str, tokens: list[str]) -> str:
    """ Emit the token in progress (empty ones are dropped) and reset it. """
    if token:
        tokens.append(token)
    return ""


def step(state: State, ch: str, token: str, tokens: list[str]) -> tuple[State, str]:
    """ Consume one character and return the next state and token. """
    closer = CLOSERS.get(state)
    if closer is not None:
        if ch == closer:
            return State.START, token
        return state, token + ch

    if ch in SEPARATORS:
        return State.START, flush(token, tokens)

    opened = OPENERS.get(ch)
    if opened is not None:
        return opened, token

    return State.UNQUOTED, token + ch


def tokenize(line: str) -> list[str]:
    tokens = []
    state = State.START
    token = ""

    for ch in line:
        state, token = step(state, ch, token, tokens)

    if state in CLOSERS:
        logger.debug("unterminated {} region, keeping partial token {!r}", state.value, token)
    flush(token, tokens)

    logger.debug("tokens: {}", tokens)
    return tokens
