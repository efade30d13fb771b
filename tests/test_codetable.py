import io
import random

import pytest

from huffman import PSEUDO_EOF, build_tree, build_codebook, count_frequencies, count_nodes
from codetable import write_table, read_table, read_codes


def _table_text(data: bytes) -> str:
	buf = io.StringIO()
	write_table(buf, build_tree(count_frequencies(data)))
	return buf.getvalue()


def test_write_table_format():
	assert _table_text(b"aaaabbbb") == "98\n0\n256\n10\n97\n11\n"


def test_write_table_empty_source():
	assert _table_text(b"") == "256\n0\n"


@pytest.mark.parametrize("data", [
	b"",
	b"aaaabbbb",
	bytes([65]) * 1000,
	bytes(range(256)),
	b"\x00" * 10 + b"\x01",
])
def test_table_roundtrip(data):
	tree = build_tree(count_frequencies(data))
	buf = io.StringIO()
	write_table(buf, tree)
	buf.seek(0)
	rebuilt = read_table(buf)
	assert build_codebook(rebuilt) == build_codebook(tree)
	assert count_nodes(rebuilt) == count_nodes(tree)


def test_table_roundtrip_random():
	rng = random.Random(99)
	data = bytes(rng.choice(b"abcdefgh\x00\xff") for _ in range(5000))
	tree = build_tree(count_frequencies(data))
	text = _table_text(data)
	assert build_codebook(read_table(io.StringIO(text))) == build_codebook(tree)


def test_read_codes():
	codes = read_codes(io.StringIO("98\n0\n256\n10\n97\n11\n"))
	assert codes == {98: "0", PSEUDO_EOF: "10", 97: "11"}


def test_order_does_not_matter():
	a = read_table(io.StringIO("97\n11\n98\n0\n256\n10\n"))
	assert build_codebook(a) == {98: "0", PSEUDO_EOF: "10", 97: "11"}


def test_crlf_and_blank_lines():
	codes = read_codes(io.StringIO("98\r\n0\r\n\r\n256\r\n1\r\n"))
	assert codes == {98: "0", PSEUDO_EOF: "1"}


@pytest.mark.parametrize("text, msg", [
	("x\n0\n256\n1\n", "bad symbol"),
	("257\n0\n256\n1\n", "out of range"),
	("-1\n0\n256\n1\n", "out of range"),
	("97\n0\n256\n", "no code line"),
	("97\n012\n256\n1\n", "bad code"),
	("97\n\n256\n1\n", "bad code"),
	("97\n0\n", "no pseudo-EOF"),
	("97\n0\n97\n10\n256\n11\n", "duplicate symbol"),
])
def test_malformed_table(text, msg):
	with pytest.raises(ValueError, match=msg):
		read_table(io.StringIO(text))
	with pytest.raises(ValueError, match=msg):
		read_codes(io.StringIO(text))


def test_code_through_leaf_is_rejected():
	with pytest.raises(ValueError, match="passes through leaf"):
		read_table(io.StringIO("1\n0\n2\n01\n256\n1\n"))


def test_code_prefix_of_earlier_code_is_rejected():
	with pytest.raises(ValueError, match="prefix"):
		read_table(io.StringIO("2\n01\n1\n0\n256\n1\n"))


def test_same_code_twice_is_rejected():
	with pytest.raises(ValueError, match="already used"):
		read_table(io.StringIO("1\n0\n2\n0\n256\n1\n"))
