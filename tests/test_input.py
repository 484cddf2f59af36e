import io

import pytest

from eulerian.errors import InputFormatError
from eulerian.input import parse_file, parse_stream, parse_text


def test_parse_edges_one_per_line():
    assert parse_text("4\n1 2\n2 3\n3 4\n4 1\n") == (4, [(1, 2), (2, 3), (3, 4), (4, 1)])


def test_pairs_may_span_lines_and_ids_may_be_negative():
    assert parse_text("3  1\n-2 -2\t7\n\n1 1") == (3, [(1, -2), (-2, 7), (1, 1)])


def test_count_only_gives_no_edges():
    assert parse_text("0") == (0, [])


def test_missing_node_count():
    with pytest.raises(InputFormatError, match="missing node count"):
        parse_text("   \n")


def test_non_integer_token():
    with pytest.raises(InputFormatError, match=r"line 3"):
        parse_text("3\n1 2\n2 x\n")


def test_non_integer_node_count():
    with pytest.raises(InputFormatError, match=r"line 1"):
        parse_text("three\n1 2\n")


def test_dangling_endpoint():
    with pytest.raises(InputFormatError, match="single endpoint"):
        parse_text("3\n1 2\n3\n")


def test_parse_stream():
    assert parse_stream(io.StringIO("2\n1 2\n")) == (2, [(1, 2)])


def test_parse_file(instance_file):
    assert parse_file(instance_file("3\n1 2\n2 3\n")) == (3, [(1, 2), (2, 3)])


def test_missing_file(tmp_path):
    with pytest.raises(InputFormatError, match="Failed to open file"):
        parse_file(str(tmp_path / "nope.txt"))


def test_only_ascii_decimal_integers():
    assert parse_text("+2 -1 +3") == (2, [(-1, 3)])
    with pytest.raises(InputFormatError, match="line 2"):
        parse_text("2\n1_000 2\n")
    with pytest.raises(InputFormatError, match="line 2"):
        parse_text("2\n١ 2\n")
