#!/usr/bin/env python3
"""
Tests for loop delimiter checking and the rendered syntax errors.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfi import (
    BFSyntaxError,
    UnmatchedCloseDelimiter,
    UnmatchedOpenDelimiter,
    compile_string,
    parse,
    tokenize,
)


def test_balanced_tokens_pass_through_unchanged():
    tokens = tokenize("+[->[+]<]-")
    assert parse(tokens) == tokens


def test_empty_program_is_valid():
    assert parse(tokenize("")) == []


def test_lone_close_reports_position_one():
    with pytest.raises(UnmatchedCloseDelimiter) as exc_info:
        parse(tokenize("]"))
    assert exc_info.value.position.offset == 1
    assert exc_info.value.line == 1
    assert exc_info.value.column == 1


def test_lone_open_reports_position_one():
    with pytest.raises(UnmatchedOpenDelimiter) as exc_info:
        parse(tokenize("["))
    assert exc_info.value.position.offset == 1


def test_close_before_open_reports_the_close():
    with pytest.raises(UnmatchedCloseDelimiter) as exc_info:
        parse(tokenize("+]["))
    assert exc_info.value.position.offset == 2


def test_unclosed_open_reports_innermost():
    with pytest.raises(UnmatchedOpenDelimiter) as exc_info:
        parse(tokenize("[+[-]\n  [ comment"))
    err = exc_info.value
    assert err.line == 2
    assert err.column == 3


def test_syntax_errors_share_a_base_class():
    with pytest.raises(BFSyntaxError) as exc_info:
        compile_string("]")
    assert exc_info.value.stage == 'parser'


def test_error_message_shows_context_and_hint():
    source = "+++\n++]\n..."
    with pytest.raises(UnmatchedCloseDelimiter) as exc_info:
        compile_string(source)
    text = str(exc_info.value)
    assert text.startswith("UnmatchedCloseDelimiter: ")
    assert "(line 2, column 3)" in text
    assert ">    2 | ++]" in text
    assert "       |   ^" in text
    assert "Hint:" in text


def test_error_without_source_has_no_context():
    with pytest.raises(UnmatchedOpenDelimiter) as exc_info:
        parse(tokenize("[["))
    assert exc_info.value.context == ''
    assert "2 unclosed" in str(exc_info.value)
