#!/usr/bin/env python3
"""
Tests for symbol filtering: comments are invisible, positions are byte offsets.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfc.lexer import Symbol, filter_symbols, strip_comments


def test_filter_keeps_only_instructions():
    syms = list(filter_symbols(b"a+b-c>d<e.f,g[h]i"))
    assert ''.join(s.char for s in syms) == "+-><.,[]"


def test_filter_keeps_original_positions():
    syms = list(filter_symbols(b"he+++llo"))
    assert syms == [Symbol('+', 2), Symbol('+', 3), Symbol('+', 4)]


def test_filter_is_lazy():
    it = filter_symbols(b"+" * 10)
    assert next(it) == Symbol('+', 0)


def test_filter_accepts_str_and_counts_bytes():
    # 'é' is two bytes in UTF-8
    syms = list(filter_symbols("é+"))
    assert syms == [Symbol('+', 2)]


def test_filter_never_fails_on_binary():
    data = bytes(range(256))
    assert strip_comments(data) == b"+,-.<>[]"


def test_strip_comments_is_idempotent():
    src = b"Hello! [This is a comment.] ++ > -- < , . \n\t 123"
    once = strip_comments(src)
    assert strip_comments(once) == once


def test_empty_program():
    assert list(filter_symbols(b"")) == []
    assert strip_comments(b"no code here") == b""
