from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

import numpy as np

TAPE_SIZE = 30000


@dataclass
class ExecutionState:
    stdin: BinaryIO
    stdout: BinaryIO
    tape: np.ndarray = field(default_factory=lambda: np.zeros(TAPE_SIZE, dtype=np.uint8))
    pointer: int = 0
    ip: int = 0
    steps: int = 0

    @classmethod
    def create(cls, stdin: BinaryIO, stdout: BinaryIO, *, tape_size: int = TAPE_SIZE) -> "ExecutionState":
        return cls(stdin=stdin, stdout=stdout, tape=np.zeros(tape_size, dtype=np.uint8))

    @property
    def cell(self) -> int:
        return int(self.tape[self.pointer])

    def write_cell(self) -> None:
        self.stdout.write(bytes((self.cell,)))

    def read_cell(self) -> None:
        # Blocks until a byte arrives; end of input stores 0.
        self.flush()
        data = self.stdin.read(1)
        self.tape[self.pointer] = data[0] if data else 0

    def flush(self) -> None:
        flush = getattr(self.stdout, 'flush', None)
        if flush is not None:
            flush()
