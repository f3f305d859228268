
from .api import RunOptions, compile_file, compile_string, evaluate, run_file, run_program, run_string
from .codegen import Instruction, Program, generate
from .errors import (
    BFError,
    BFRuntimeError,
    BFSyntaxError,
    TapeBoundsExceeded,
    UnmatchedCloseDelimiter,
    UnmatchedOpenDelimiter,
)
from .interpreter import Interpreter, RunResult
from .lexer import Command, Position, Token, tokenize
from .parser import parse

__all__ = [
    'Command',
    'Position',
    'Token',
    'tokenize',
    'parse',
    'Instruction',
    'Program',
    'generate',
    'Interpreter',
    'RunResult',
    'RunOptions',
    'compile_string',
    'compile_file',
    'run_program',
    'run_string',
    'run_file',
    'evaluate',
    'BFError',
    'BFSyntaxError',
    'BFRuntimeError',
    'UnmatchedCloseDelimiter',
    'UnmatchedOpenDelimiter',
    'TapeBoundsExceeded',
]
