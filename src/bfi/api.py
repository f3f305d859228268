from __future__ import annotations

import io
import logging

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .codegen import Program, generate
from .interpreter import DEFAULT_BATCH_STEPS, Interpreter, RunResult
from .lexer import tokenize
from .parser import parse
from .state import TAPE_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    tape_size: int = TAPE_SIZE
    batch_steps: int = DEFAULT_BATCH_STEPS


def compile_string(source: Union[str, bytes]) -> Program:
    if isinstance(source, (bytes, bytearray)):
        source = bytes(source).decode('latin-1')
    tokens = parse(tokenize(source), source=source)
    return generate(tokens)


def compile_file(path: str | Path, *, encoding: str = "utf-8") -> Program:
    p = Path(path)
    logger.debug("reading %s", p)
    return compile_string(p.read_text(encoding=encoding, errors="replace"))


def run_program(
    program: Program,
    *,
    stdin: BinaryIO,
    stdout: BinaryIO,
    options: Optional[RunOptions] = None,
) -> RunResult:
    opts = RunOptions() if options is None else options
    interpreter = Interpreter(tape_size=opts.tape_size, batch_steps=opts.batch_steps)
    return interpreter.run(program, stdin, stdout)


def run_string(
    source: Union[str, bytes],
    *,
    stdin: BinaryIO,
    stdout: BinaryIO,
    options: Optional[RunOptions] = None,
) -> RunResult:
    return run_program(compile_string(source), stdin=stdin, stdout=stdout, options=options)


def run_file(
    path: str | Path,
    *,
    stdin: BinaryIO,
    stdout: BinaryIO,
    options: Optional[RunOptions] = None,
    encoding: str = "utf-8",
) -> RunResult:
    return run_program(compile_file(path, encoding=encoding), stdin=stdin, stdout=stdout, options=options)


def evaluate(source: Union[str, bytes], input_data: bytes = b"", *, options: Optional[RunOptions] = None) -> bytes:
    """Run source against in-memory streams and return everything it wrote."""
    stdout = io.BytesIO()
    run_string(source, stdin=io.BytesIO(input_data), stdout=stdout, options=options)
    return stdout.getvalue()
