from __future__ import annotations
import heapq
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

CHAR_MAX = 256        # number of byte values
PSEUDO_EOF = CHAR_MAX  # sentinel symbol, one past the last byte value
EOF_WEIGHT = 1

HUFF_EXT = ".huff"
CODE_EXT = ".code"
UNHUFF_EXT = ".unhuff"


@dataclass
class Node:
    sym: Optional[int] = None
    freq: int = 0
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None and self.sym is not None


def count_frequencies(data: bytes) -> np.ndarray:
    """Occurrence count of every byte value 0..255 (int64, length 256)."""
    arr = np.frombuffer(data, dtype=np.uint8)
    return np.bincount(arr, minlength=CHAR_MAX).astype(np.int64)


def count_file_frequencies(path: str) -> np.ndarray:
    with open(path, "rb") as f:
        return count_frequencies(f.read())


def _as_table(freqs) -> np.ndarray:
    # accept {byte: count} as well as a 256-entry sequence
    if isinstance(freqs, dict):
        table = np.zeros(CHAR_MAX, dtype=np.int64)
        for sym, f in freqs.items():
            if not 0 <= int(sym) < CHAR_MAX:
                raise ValueError(f"byte value out of range: {sym}")
            table[int(sym)] = int(f)
        return table
    if len(freqs) != CHAR_MAX:
        raise ValueError(f"frequency table must have {CHAR_MAX} entries, got {len(freqs)}")
    return np.asarray(freqs, dtype=np.int64)


def build_tree(freqs) -> Node:
    """
    Greedy forest merge over the positive-count byte values plus the
    pseudo-EOF leaf (weight 1). The first node popped becomes the left child.
    Equal weights are ordered by insertion, so the result is deterministic.
    """
    freqs = _as_table(freqs)
    pq = []
    seq = 0
    for sym in range(CHAR_MAX):
        f = int(freqs[sym])
        if f < 0:
            raise ValueError(f"negative frequency for byte {sym}: {f}")
        if f > 0:
            pq.append((f, seq, Node(sym=sym, freq=f)))
            seq += 1
    pq.append((EOF_WEIGHT, seq, Node(sym=PSEUDO_EOF, freq=EOF_WEIGHT)))
    seq += 1
    heapq.heapify(pq)

    if len(pq) == 1:
        # Empty source: only the sentinel, hang it left so its code is "0"
        only = pq[0][2]
        return Node(freq=only.freq, left=only)

    while len(pq) > 1:
        fa, _, a = heapq.heappop(pq)
        fb, _, b = heapq.heappop(pq)
        heapq.heappush(pq, (fa + fb, seq, Node(freq=fa + fb, left=a, right=b)))
        seq += 1
    return pq[0][2]


def build_codebook(node: Node, prefix: str = "", code: Optional[Dict[int, str]] = None) -> Dict[int, str]:
    """Map every leaf symbol to its root-to-leaf path ('0' = left, '1' = right)."""
    if code is None:
        code = {}
    if node is None:
        return code
    if node.is_leaf:
        code[node.sym] = prefix
    else:
        build_codebook(node.left, prefix + "0", code)
        build_codebook(node.right, prefix + "1", code)
    return code


def iter_leaves(node: Node, prefix: str = ""):
    """Yield (symbol, code) for every leaf, depth-first, left before right."""
    if node is None:
        return
    if node.is_leaf:
        yield node.sym, prefix
        return
    yield from iter_leaves(node.left, prefix + "0")
    yield from iter_leaves(node.right, prefix + "1")


def count_nodes(node: Node):
    """Return (leaves, internal) node counts."""
    if node is None:
        return 0, 0
    if node.is_leaf:
        return 1, 0
    ll, li = count_nodes(node.left)
    rl, ri = count_nodes(node.right)
    return ll + rl, li + ri + 1


def format_tree(root: Node) -> str:
    """
    Sideways dump of the tree: right subtree above, left below, three spaces
    of indent per level. Nodes print as [freq, sym]; internal nodes use '*'.
    """
    lines: List[str] = []

    def walk(node: Optional[Node], depth: int):
        if node is None:
            return
        walk(node.right, depth + 1)
        sym = node.sym if node.is_leaf else "*"
        label = f"[{node.freq}, {sym}]" if node.freq else f"[{sym}]"
        lines.append("   " * depth + label)
        walk(node.left, depth + 1)

    walk(root, 0)
    return "\n".join(lines)
