#!/usr/bin/env python3
"""
Tests for the fused validate + run-length merge pass.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfc.errors import UnmatchedClose, UnmatchedOpen
from bfc.ir import CellDelta, Input, LoopClose, LoopOpen, Output, PointerDelta, to_source
from bfc.lexer import Symbol, filter_symbols
from bfc.parser import parse, parse_program


def test_plus_run_merges():
    assert parse_program("++++") == [CellDelta(4)]


@pytest.mark.parametrize("ch,make,sign", [
    ('+', CellDelta, 1),
    ('-', CellDelta, -1),
    ('>', PointerDelta, 1),
    ('<', PointerDelta, -1),
])
@pytest.mark.parametrize("k", [1, 2, 255, 256, 1000])
def test_maximal_run_is_one_instruction(ch, make, sign, k):
    assert parse_program(ch * k) == [make(sign * k)]


def test_different_symbols_are_not_netted():
    assert parse_program("+-") == [CellDelta(1), CellDelta(-1)]
    assert parse_program("><") == [PointerDelta(1), PointerDelta(-1)]


def test_io_is_never_merged():
    assert parse_program("..,,") == [Output(), Output(), Input(), Input()]


def test_comments_do_not_split_runs():
    assert parse_program("+ + +\n+") == [CellDelta(4)]


def test_scenario_simple_loop():
    assert parse_program("+++>+++[-]") == [
        CellDelta(3),
        PointerDelta(1),
        CellDelta(3),
        LoopOpen(0),
        CellDelta(-1),
        LoopClose(0),
    ]


def test_nested_loops_ids_follow_open_order():
    assert parse_program("[[]]") == [LoopOpen(0), LoopOpen(1), LoopClose(1), LoopClose(0)]


def test_sibling_loops_get_distinct_ids():
    assert parse_program("[][]") == [LoopOpen(0), LoopClose(0), LoopOpen(1), LoopClose(1)]


def test_lifo_holds_at_every_prefix():
    program = parse_program("+[>[-]<[>+<-]]>[.[,]]")
    open_ids = []
    for ins in program:
        if isinstance(ins, LoopOpen):
            open_ids.append(ins.id)
        elif isinstance(ins, LoopClose):
            assert open_ids and open_ids[-1] == ins.id
            open_ids.pop()
    assert open_ids == []
    opens = [i for i in program if isinstance(i, LoopOpen)]
    assert len(opens) == len([i for i in program if isinstance(i, LoopClose)])
    assert [i.id for i in opens] == list(range(len(opens)))


def test_label_counter_is_per_call():
    assert parse_program("[]") == parse_program("[]") == [LoopOpen(0), LoopClose(0)]


def test_unmatched_close_alone():
    with pytest.raises(UnmatchedClose) as exc:
        parse_program("]")
    assert exc.value.position == 0
    assert str(exc.value) == "Error at position 0: Unmatched ']'"


def test_unmatched_close_reports_true_offset():
    with pytest.raises(UnmatchedClose) as exc:
        parse_program("ab++]")
    assert exc.value.position == 4


def test_unmatched_close_fails_before_later_opens():
    with pytest.raises(UnmatchedClose):
        parse_program("+]" + "[" * 5)


def test_unmatched_open_alone():
    with pytest.raises(UnmatchedOpen) as exc:
        parse_program("[")
    assert exc.value.position == 0
    assert str(exc.value) == "Error at position 0: Unmatched '['"


def test_unmatched_open_reports_innermost():
    with pytest.raises(UnmatchedOpen) as exc:
        parse_program("[[]  [+")
    assert exc.value.position == 5


def test_bracket_error_has_line_context():
    with pytest.raises(UnmatchedClose) as exc:
        parse_program("+++\n  ]\n")
    err = exc.value
    assert (err.line, err.column) == (2, 3)
    assert ">    2 |   ]" in err.context


def test_parse_takes_symbols_directly():
    assert parse(filter_symbols(b"x.y")) == [Output()]


def test_round_trip_to_canonical_source():
    src = "++>-<[->+<].,"
    assert to_source(parse_program(src)) == src


def test_unmatched_close_stops_reading_input():
    consumed = []

    def symbols():
        for sym in [Symbol(']', 0)] + [Symbol('+', i) for i in range(1, 1000)]:
            consumed.append(sym)
            yield sym

    with pytest.raises(UnmatchedClose):
        parse(symbols())
    assert consumed == [Symbol(']', 0)]


def test_run_reads_one_symbol_past_its_end():
    consumed = []

    def symbols():
        for sym in [Symbol('+', 0), Symbol('+', 1), Symbol(']', 2), Symbol('+', 3)]:
            consumed.append(sym)
            yield sym

    with pytest.raises(UnmatchedClose) as exc:
        parse(symbols())
    assert exc.value.position == 2
    assert len(consumed) == 3


def test_caret_counts_characters_not_bytes():
    with pytest.raises(UnmatchedClose) as exc:
        parse_program("é]")
    err = exc.value
    assert err.position == 2
    assert err.column == 2
    assert err.context.splitlines() == [">    1 | é]", "       |  ^"]
