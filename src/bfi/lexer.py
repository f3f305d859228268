from __future__ import annotations

import logging

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Union

logger = logging.getLogger(__name__)


class Command(IntEnum):
    # Values are the glyph code points so a program exports straight to an opcode array.
    MOVE_RIGHT = ord('>')
    MOVE_LEFT = ord('<')
    INCREMENT = ord('+')
    DECREMENT = ord('-')
    OUTPUT = ord('.')
    INPUT = ord(',')
    LOOP_OPEN = ord('[')
    LOOP_CLOSE = ord(']')

    @property
    def glyph(self) -> str:
        return chr(self.value)

    @property
    def is_jump(self) -> bool:
        return self in (Command.LOOP_OPEN, Command.LOOP_CLOSE)


GLYPHS = {c.glyph: c for c in Command}


@dataclass(frozen=True)
class Position:
    offset: int  # 1-based character index into the source
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


@dataclass(frozen=True)
class Token:
    command: Command
    position: Position


def tokenize(source: Union[str, bytes]) -> List[Token]:
    """Scan source text into command tokens.

    Every character that is not one of the eight command glyphs is
    commentary and produces nothing. Bytes are decoded as latin-1 so
    that each byte counts as one character for positions.
    """
    if isinstance(source, (bytes, bytearray)):
        source = bytes(source).decode('latin-1')

    tokens: List[Token] = []
    line = 1
    column = 1
    for offset, ch in enumerate(source, start=1):
        command = GLYPHS.get(ch)
        if command is not None:
            tokens.append(Token(command, Position(offset, line, column)))
        if ch == '\n':
            line += 1
            column = 1
        else:
            column += 1

    logger.debug("lexed %d tokens from %d characters", len(tokens), len(source))
    return tokens
