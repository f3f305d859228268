#!/usr/bin/env python3
"""
Tests for jump target resolution in the flat program.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np

from bfi import Command, Instruction, compile_string, generate, parse, tokenize
from bfi.codegen import NO_TARGET


def build(source):
    return generate(parse(tokenize(source)))


def test_program_length_matches_token_count():
    source = "x++[>+<-]y."
    assert len(build(source)) == len(tokenize(source))


def test_non_jump_instructions_have_no_target():
    program = build("+-<>.,")
    assert all(ins.target is None for ins in program)


def test_simple_loop_targets():
    program = build("+[-]")
    assert program[1] == Instruction(Command.LOOP_OPEN, 3)
    assert program[3] == Instruction(Command.LOOP_CLOSE, 1)


def test_nested_pairing_is_symmetric():
    source = "[[][[]]]+[]"
    program = build(source)
    expected = {0: 7, 1: 2, 3: 6, 4: 5, 9: 10}
    for open_idx, close_idx in expected.items():
        assert program[open_idx].target == close_idx
        assert program[close_idx].target == open_idx
    for index, ins in enumerate(program):
        if ins.command.is_jump:
            assert program[ins.target].target == index


def test_deep_nesting_does_not_recurse():
    depth = 20000
    program = build("[" * depth + "]" * depth)
    assert program[0].target == 2 * depth - 1
    assert program[depth - 1].target == depth
    assert program.loop_count == depth


def test_to_arrays_exports_opcodes_and_targets():
    opcodes, targets = compile_string("+[.]").to_arrays()
    assert opcodes.dtype == np.int32
    assert opcodes.tolist() == [ord('+'), ord('['), ord('.'), ord(']')]
    assert targets.tolist() == [NO_TARGET, 3, NO_TARGET, 1]


def test_to_source_drops_commentary():
    assert compile_string("print a zero: [-] .").to_source() == "[-]."


def test_empty_program():
    program = compile_string("no commands here")
    assert len(program) == 0
    opcodes, targets = program.to_arrays()
    assert opcodes.size == 0 and targets.size == 0
