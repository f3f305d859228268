from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Type, TypeVar

from .lexer import Position


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = min(max(1, line_no_1), len(lines))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"  {'':4} | {' ' * (column - 1)}^")
    return "\n".join(out)


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'parse':
        if "no matching '['" in msg:
            return "Every ']' must close an earlier '['. Remove the stray ']' or add the missing '['."
        if "never closed" in msg:
            return "Add the missing ']' or remove the extra '['. Brackets inside comments count too."
        return None
    if kind == 'runtime':
        if 'left of cell 0' in msg:
            return 'The data pointer starts at cell 0; move right before moving left.'
        if 'past the last cell' in msg:
            return 'The tape has a fixed size. Use a larger --tape-size if the program needs more cells.'
        return None
    return None


@dataclass
class BFError(Exception):
    message: str

    stage: ClassVar[str] = 'core'

    def __str__(self) -> str:
        return self.message


@dataclass
class BFSyntaxError(BFError):
    position: Position
    context: str

    stage: ClassVar[str] = 'parser'

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column


class UnmatchedCloseDelimiter(BFSyntaxError):
    pass


class UnmatchedOpenDelimiter(BFSyntaxError):
    pass


@dataclass
class BFRuntimeError(BFError):
    ip: int
    pointer: int

    stage: ClassVar[str] = 'interpreter'


@dataclass
class TapeBoundsExceeded(BFRuntimeError):
    direction: str  # '<' or '>'


SyntaxErrorT = TypeVar('SyntaxErrorT', bound=BFSyntaxError)


def make_syntax_error(
    error_cls: Type[SyntaxErrorT],
    *,
    message: str,
    position: Position,
    source: Optional[str] = None,
) -> SyntaxErrorT:
    ctx = ''
    if source is not None:
        ctx = _build_context(source.split('\n'), position.line, position.column)
    hint = _hint_for(message, kind='parse')
    ctx_block = f"\n{ctx}" if ctx else ""
    hint_block = f"\nHint: {hint}" if hint else ""
    return error_cls(
        message=f"{error_cls.__name__}: {message} ({position}){ctx_block}{hint_block}",
        position=position,
        context=ctx,
    )


def make_runtime_error(*, message: str, ip: int, pointer: int, direction: str) -> TapeBoundsExceeded:
    hint = _hint_for(message, kind='runtime')
    hint_block = f"\nHint: {hint}" if hint else ""
    return TapeBoundsExceeded(
        message=f"TapeBoundsExceeded: {message} (instruction {ip}, cell {pointer}){hint_block}",
        ip=ip,
        pointer=pointer,
        direction=direction,
    )
