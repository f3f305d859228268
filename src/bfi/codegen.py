from __future__ import annotations

import logging

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .lexer import Command, Token

logger = logging.getLogger(__name__)

NO_TARGET = -1


@dataclass(frozen=True)
class Instruction:
    command: Command
    target: Optional[int] = None  # index of the matching delimiter, jumps only


@dataclass(frozen=True)
class Program:
    """Flat instruction sequence with every loop jump already resolved."""

    instructions: Tuple[Instruction, ...] = ()

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    @property
    def loop_count(self) -> int:
        return sum(1 for ins in self.instructions if ins.command is Command.LOOP_OPEN)

    def to_source(self) -> str:
        return ''.join(ins.command.glyph for ins in self.instructions)

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Export (opcodes, targets) as int32 arrays for the execution loop.

        Opcodes are glyph code points; non-jump targets hold NO_TARGET.
        """
        opcodes = np.array([int(ins.command) for ins in self.instructions], dtype=np.int32)
        targets = np.array(
            [NO_TARGET if ins.target is None else ins.target for ins in self.instructions],
            dtype=np.int32,
        )
        return opcodes, targets


def generate(tokens: Sequence[Token]) -> Program:
    # Tokens must have passed parse(); an unbalanced sequence is not checked here.
    commands = [token.command for token in tokens]
    targets: List[Optional[int]] = [None] * len(commands)
    stack: List[int] = []

    for index, command in enumerate(commands):
        if command is Command.LOOP_OPEN:
            stack.append(index)
        elif command is Command.LOOP_CLOSE:
            start = stack.pop()
            targets[start] = index
            targets[index] = start

    program = Program(tuple(Instruction(c, t) for c, t in zip(commands, targets)))
    logger.debug("generated %d instructions (%d loops)", len(program), program.loop_count)
    return program
