import io
from typing import Dict

from bitpack import BitWriter, BitReader, EOF_BIT
from huffman import Node, PSEUDO_EOF


def _check_codes(data: bytes, codes: Dict[int, str]):
    if PSEUDO_EOF not in codes:
        raise ValueError("code table has no pseudo-EOF code")
    for n in set(data):
        if n not in codes:
            raise ValueError(f"No code for byte {n} (the character {chr(n)!r})")


def _write_codes(data: bytes, codes: Dict[int, str], writer: BitWriter):
    for n in data:
        writer.write_code(codes[n])
    writer.write_code(codes[PSEUDO_EOF])


def encode(data: bytes, codes: Dict[int, str], writer: BitWriter):
    """
    Write the code of every byte of data, then the pseudo-EOF code, and close
    the writer. Codes are checked before anything is written, so a missing code
    never leaves a partial stream behind.
    """
    _check_codes(data, codes)
    with writer:
        _write_codes(data, codes, writer)


def decode(reader: BitReader, root: Node, out):
    """
    Walk the tree one bit at a time: 0 goes left, 1 goes right. Every data leaf
    reached writes its byte to out and restarts at the root; the pseudo-EOF
    leaf ends decoding. Returns the number of bytes written.
    """
    cur = root
    nout = 0
    buf = bytearray()
    while True:
        bit = reader.read_bit()
        if bit == EOF_BIT:
            raise ValueError("Malformed stream: end of input before pseudo-EOF")
        cur = cur.left if bit == 0 else cur.right
        if cur is None:
            raise ValueError("Malformed stream: bit path not in code table")
        if not cur.is_leaf:
            continue
        if cur.sym == PSEUDO_EOF:
            break
        buf.append(cur.sym)
        if len(buf) >= 65536:
            out.write(bytes(buf))
            nout += len(buf)
            buf.clear()
        cur = root
    if buf:
        out.write(bytes(buf))
        nout += len(buf)
    return nout


def encode_bytes(data: bytes, codes: Dict[int, str]) -> bytes:
    buf = io.BytesIO()
    bw = BitWriter(buf)
    _check_codes(data, codes)
    _write_codes(data, codes, bw)
    bw.align()
    return buf.getvalue()


def decode_bytes(payload: bytes, root: Node) -> bytes:
    out = io.BytesIO()
    decode(BitReader(io.BytesIO(payload)), root, out)
    return out.getvalue()


def encode_file(input_path: str, output_path: str, codes: Dict[int, str]) -> int:
    """Compress input_path into output_path. Returns the number of payload bits."""
    with open(input_path, "rb") as f:
        data = f.read()
    _check_codes(data, codes)
    with BitWriter(open(output_path, "wb")) as writer:
        _write_codes(data, codes, writer)
    return writer.bits_written


def decode_file(input_path: str, output_path: str, root: Node) -> int:
    """Decompress input_path into output_path. Returns the number of bytes written."""
    with BitReader(open(input_path, "rb")) as reader, open(output_path, "wb") as out:
        return decode(reader, root, out)
