from __future__ import annotations

import logging

from dataclasses import dataclass
from typing import BinaryIO

from numba import njit

from .codegen import Program
from .errors import make_runtime_error
from .state import TAPE_SIZE, ExecutionState

logger = logging.getLogger(__name__)

DEFAULT_BATCH_STEPS = 50000

# Reasons for _execute_batch to hand control back to Python.
STOP_BATCH = 0
STOP_OUTPUT = 1
STOP_INPUT = 2
STOP_END = 3
STOP_BOUNDS = 4


@njit
def _execute_batch(opcodes, targets, tape, ip, pointer, max_steps):
    """
    Run up to max_steps instructions of the flat program.

    Output, input and tape-boundary faults are left to the caller: the loop
    stops with ip still on the instruction that needs handling.

    Returns:
        tuple: (ip, pointer, stop_reason, steps)
    """
    stop_reason = STOP_BATCH
    tape_len = len(tape)
    prog_len = len(opcodes)
    steps = 0

    while ip < prog_len and steps < max_steps:
        command = opcodes[ip]

        if command == 62:  # '>'
            if pointer + 1 >= tape_len:
                stop_reason = STOP_BOUNDS
                break
            pointer += 1
        elif command == 60:  # '<'
            if pointer == 0:
                stop_reason = STOP_BOUNDS
                break
            pointer -= 1
        elif command == 43:  # '+'
            tape[pointer] = (tape[pointer] + 1) & 255
        elif command == 45:  # '-'
            tape[pointer] = (tape[pointer] - 1) & 255
        elif command == 46:  # '.'
            stop_reason = STOP_OUTPUT
            break
        elif command == 44:  # ','
            stop_reason = STOP_INPUT
            break
        elif command == 91:  # '['
            if tape[pointer] == 0:
                ip = targets[ip]
        elif command == 93:  # ']'
            if tape[pointer] != 0:
                ip = targets[ip]

        ip += 1
        steps += 1

    if ip >= prog_len:
        stop_reason = STOP_END

    return ip, pointer, stop_reason, steps


@dataclass(frozen=True)
class RunResult:
    steps: int
    pointer: int
    tape: bytes


class Interpreter:
    """
    Executes a flat Program against a fixed-size byte tape.

    The tape never grows: moving left of cell 0 or right of the last cell
    raises TapeBoundsExceeded. Cells wrap modulo 256. Reading past the end
    of input stores 0. Programs that never finish run forever.
    """

    def __init__(self, *, tape_size: int = TAPE_SIZE, batch_steps: int = DEFAULT_BATCH_STEPS):
        if tape_size < 1:
            raise ValueError(f"tape_size must be at least 1, got {tape_size}")
        if batch_steps < 1:
            raise ValueError(f"batch_steps must be at least 1, got {batch_steps}")
        self.tape_size = tape_size
        self.batch_steps = batch_steps

    def run(self, program: Program, stdin: BinaryIO, stdout: BinaryIO) -> RunResult:
        state = ExecutionState.create(stdin, stdout, tape_size=self.tape_size)
        opcodes, targets = program.to_arrays()
        logger.debug("running %d instructions on a %d-cell tape", len(program), self.tape_size)

        try:
            while True:
                ip, pointer, stop_reason, steps = _execute_batch(
                    opcodes, targets, state.tape, state.ip, state.pointer, self.batch_steps
                )
                state.ip = int(ip)
                state.pointer = int(pointer)
                state.steps += int(steps)

                if stop_reason == STOP_END:
                    break
                if stop_reason == STOP_BATCH:
                    continue
                if stop_reason == STOP_BOUNDS:
                    self._raise_bounds(state, program)

                if stop_reason == STOP_OUTPUT:
                    state.write_cell()
                else:
                    state.read_cell()
                state.ip += 1
                state.steps += 1
        finally:
            state.flush()

        logger.debug("run finished after %d steps, pointer at cell %d", state.steps, state.pointer)
        return RunResult(steps=state.steps, pointer=state.pointer, tape=state.tape.tobytes())

    def _raise_bounds(self, state: ExecutionState, program: Program) -> None:
        direction = program[state.ip].command.glyph
        if direction == '<':
            message = "'<' moved the data pointer left of cell 0"
        else:
            message = f"'>' moved the data pointer past the last cell ({self.tape_size - 1})"
        raise make_runtime_error(message=message, ip=state.ip, pointer=state.pointer, direction=direction)
