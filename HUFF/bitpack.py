import io
from typing import Iterable, List

EOF_BIT = -1  # returned by BitReader.read_bit once the source is exhausted


class BitWriter:
    """Pack single bits into bytes (LSB-first) and write them to a binary sink."""

    def __init__(self, sink):
        self._sink = sink
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self.bits_written = 0
        self.closed = False

    def write_bit(self, bit: int):
        if self.closed:
            raise ValueError("write to closed BitWriter")
        if bit not in (0, 1):
            raise ValueError(f"Illegal bit: {bit}")
        self._cur |= bit << self._nbits
        self._nbits += 1
        self.bits_written += 1
        if self._nbits == 8:
            self._flush()

    def write_code(self, code: str):
        """Write a '0'/'1' string, first character first."""
        for ch in code:
            self.write_bit(ord(ch) - 48)

    def _flush(self):
        self._sink.write(bytes((self._cur,)))
        self._cur = 0
        self._nbits = 0

    def align(self):
        """Zero-pad and emit a partial byte, if any, without closing the sink."""
        if self._nbits > 0:
            self._flush()

    def close(self):
        """Pad the last partial byte with zeros, then close the sink."""
        if self.closed:
            return
        self.align()
        self.closed = True
        self._sink.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class BitReader:
    def __init__(self, source):
        self._source = source
        self._cur = 0
        self._nbits = 0  # unread bits left in _cur
        self._eof = False
        self.closed = False

    def read_bit(self) -> int:
        if self._nbits == 0:
            if self._eof:
                return EOF_BIT
            b = self._source.read(1)
            if not b:
                self._eof = True
                return EOF_BIT
            self._cur = b[0]
            self._nbits = 8
        bit = self._cur & 1
        self._cur >>= 1
        self._nbits -= 1
        return bit

    def close(self):
        if not self.closed:
            self.closed = True
            self._source.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


def pack_bits(bits: Iterable[int]) -> bytes:
    """
    Pack 0/1 values into bytes (LSB-first), zero-padding the last byte.
    """
    buf = io.BytesIO()
    bw = BitWriter(buf)
    for b in bits:
        bw.write_bit(int(b))
    bw.align()
    return buf.getvalue()


def unpack_bits(data: bytes, nbits: int) -> List[int]:
    """
    Unpack bytes -> list of 0/1 of length nbits (LSB-first).
    """
    br = BitReader(io.BytesIO(data))
    out = []
    for _ in range(nbits):
        b = br.read_bit()
        if b == EOF_BIT:
            raise ValueError("Malformed stream: fewer bits than requested")
        out.append(b)
    return out
