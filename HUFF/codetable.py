from typing import Dict, Iterator, Tuple

from huffman import Node, PSEUDO_EOF, iter_leaves

# Code table (text):
#   <symbol as decimal>\n
#   <code as '0'/'1' characters>\n
# repeated once per leaf, depth-first order (left before right).


def write_table(f, root: Node):
    """Write one (symbol, code) record per leaf of the tree to a text stream."""
    for sym, code in iter_leaves(root):
        if not code:
            raise ValueError("leaf at the root has an empty code")
        f.write(f"{sym}\n{code}\n")


def _records(f) -> Iterator[Tuple[int, str]]:
    lines = iter(f)
    lineno = 0
    for line in lines:
        lineno += 1
        line = line.strip()
        if not line:
            continue
        try:
            sym = int(line)
        except ValueError:
            raise ValueError(f"Malformed code table: line {lineno}: bad symbol {line!r}") from None
        if not 0 <= sym <= PSEUDO_EOF:
            raise ValueError(f"Malformed code table: line {lineno}: symbol out of range: {sym}")
        code = next(lines, None)
        if code is None:
            raise ValueError(f"Malformed code table: symbol {sym} has no code line")
        lineno += 1
        code = code.strip()
        if not code or code.strip("01"):
            raise ValueError(f"Malformed code table: symbol {sym}: line {lineno}: bad code {code!r}")
        yield sym, code


def read_codes(f) -> Dict[int, str]:
    """Parse a code table into {symbol: code}."""
    codes: Dict[int, str] = {}
    for sym, code in _records(f):
        if sym in codes:
            raise ValueError(f"Malformed code table: duplicate symbol {sym}")
        codes[sym] = code
    if PSEUDO_EOF not in codes:
        raise ValueError("Malformed code table: no pseudo-EOF code")
    return codes


def read_table(f) -> Node:
    """
    Rebuild the tree from a code table. Internal nodes are created on demand
    while walking each code from the root; the node reached at the end of the
    code becomes the leaf. Codes that collide (one a prefix of another, or the
    same path twice) are rejected.
    """
    root = Node()
    seen = set()
    for sym, code in _records(f):
        if sym in seen:
            raise ValueError(f"Malformed code table: duplicate symbol {sym}")
        seen.add(sym)
        cur = root
        for ch in code:
            if cur.sym is not None:
                raise ValueError(f"Malformed code table: code {code} for {sym} passes through leaf {cur.sym}")
            if ch == "0":
                if cur.left is None:
                    cur.left = Node()
                cur = cur.left
            else:
                if cur.right is None:
                    cur.right = Node()
                cur = cur.right
        if cur.sym is not None:
            raise ValueError(f"Malformed code table: code {code} for {sym} already used by {cur.sym}")
        if cur.left is not None or cur.right is not None:
            raise ValueError(f"Malformed code table: code {code} for {sym} is a prefix of another code")
        cur.sym = sym
    if PSEUDO_EOF not in seen:
        raise ValueError("Malformed code table: no pseudo-EOF code")
    return root
