"""Tests for the line-format parser."""

import pytest

from waveform_ascii.errors import IllegalEdgeCharacterError, MalformedLineError
from waveform_ascii.parsers import parse
from waveform_ascii.parsers.text import LineParser
from waveform_ascii.types import Edge

K, H, L, Z, B = Edge.Keep, Edge.High, Edge.Low, Edge.HighImpedance, Edge.Both


def test_parse_single_line():
    seqs = parse("CLK | LHL\n")
    assert len(seqs) == 1
    assert seqs[0].title == "CLK"
    assert seqs[0].edges == (L, H, L)


def test_parse_all_edge_characters():
    seqs = parse("X | -HL Z B 10")
    assert seqs[0].edges == (K, H, L, K, Z, K, B, K, H, L)


def test_parse_case_insensitive():
    assert parse("X | hlzb")[0].edges == parse("X | HLZB")[0].edges


def test_parse_trims_spaces_and_tabs():
    seqs = parse("\t  data bus \t|\t 01  \t")
    assert seqs[0].title == "data bus"
    assert seqs[0].edges == (L, H)


def test_parse_no_whitespace_around_separator():
    seqs = parse("A|HL")
    assert seqs[0].title == "A"
    assert seqs[0].edges == (H, L)


def test_parse_skips_blank_lines():
    seqs = parse("\n\nA | H\n   \n\t\nB | L\n\n")
    assert [s.title for s in seqs] == ["A", "B"]


def test_hash_line_is_not_a_comment():
    with pytest.raises(MalformedLineError) as exc_info:
        parse("# header\nA | H\n")
    assert exc_info.value.line_no == 1


def test_hash_prefixed_name_is_a_signal():
    seqs = parse("#CS | HL\nA | HL\n")
    assert [s.title for s in seqs] == ["#CS", "A"]
    assert seqs[0].edges == (H, L)


def test_parse_crlf_and_cr_line_endings():
    seqs = parse("A | H\r\nB | L\rC | Z")
    assert [s.title for s in seqs] == ["A", "B", "C"]


def test_parse_preserves_order():
    seqs = parse("Z | H\nA | H\nM | H\n")
    assert [s.title for s in seqs] == ["Z", "A", "M"]


def test_parse_empty_source():
    assert parse("") == []
    assert parse("\n \n") == []


def test_parse_does_not_check_lengths():
    seqs = parse("A | HHH\nB | L\n")
    assert [len(s) for s in seqs] == [3, 1]


def test_parse_empty_edges_allowed():
    seqs = parse("A |   ")
    assert seqs[0].edges == ()


def test_missing_separator():
    with pytest.raises(MalformedLineError) as exc_info:
        parse("A | H\nB H\n")
    assert exc_info.value.line_no == 2
    assert "missing" in str(exc_info.value)


def test_too_many_separators():
    with pytest.raises(MalformedLineError) as exc_info:
        parse("A | H | L")
    assert exc_info.value.line_no == 1
    assert "more than one" in str(exc_info.value)


def test_missing_name():
    with pytest.raises(MalformedLineError):
        parse("   | HL")


def test_illegal_character_reports_position():
    with pytest.raises(IllegalEdgeCharacterError) as exc_info:
        parse("OK | HL\nCLK | LLX")
    err = exc_info.value
    assert err.char == "X"
    assert err.line_no == 2
    assert err.column == 9


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse("A | Q")


def test_line_parser_class():
    seqs = LineParser().parse("A | B")
    assert seqs[0].edges == (B,)
