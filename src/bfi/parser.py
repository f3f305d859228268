from __future__ import annotations

import logging

from typing import List, Optional, Sequence

from .errors import UnmatchedCloseDelimiter, UnmatchedOpenDelimiter, make_syntax_error
from .lexer import Command, Token

logger = logging.getLogger(__name__)


def parse(tokens: Sequence[Token], *, source: Optional[str] = None) -> List[Token]:
    """Check that loop delimiters nest properly.

    The tokens come back unchanged. ``source`` is only used to render the
    context excerpt of an error.

    Raises:
        UnmatchedCloseDelimiter: a ']' with no open '[' before it.
        UnmatchedOpenDelimiter: a '[' still open at end of input; the
            innermost one is reported.
    """
    stack: List[int] = []
    for index, token in enumerate(tokens):
        if token.command is Command.LOOP_OPEN:
            stack.append(index)
        elif token.command is Command.LOOP_CLOSE:
            if not stack:
                raise make_syntax_error(
                    UnmatchedCloseDelimiter,
                    message="']' has no matching '['",
                    position=token.position,
                    source=source,
                )
            stack.pop()

    if stack:
        token = tokens[stack[-1]]
        raise make_syntax_error(
            UnmatchedOpenDelimiter,
            message=f"'[' is never closed ({len(stack)} unclosed in total)",
            position=token.position,
            source=source,
        )

    logger.debug("parsed %d tokens, loop delimiters balanced", len(tokens))
    return list(tokens)
