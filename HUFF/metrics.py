from typing import Dict

import numpy as np


def entropy_bits(freqs) -> float:
    """Shannon entropy of the byte distribution, in bits per byte."""
    f = np.asarray(freqs, dtype=np.float64)
    total = float(f.sum())
    if total == 0.0:
        return 0.0
    p = f[f > 0] / total
    return float(-(p * np.log2(p)).sum())


def average_code_length(freqs, codes: Dict[int, str]) -> float:
    f = np.asarray(freqs, dtype=np.float64)
    total = float(f.sum())
    if total == 0.0:
        return 0.0
    lengths = np.array([len(codes.get(s, "")) for s in range(f.size)], dtype=np.float64)
    return float((f * lengths).sum() / total)


def compression_ratio(original_size: int, compressed_size: int) -> float:
    """compressed / original (smaller is better)."""
    if original_size == 0:
        return 1.0 if compressed_size == 0 else float("inf")
    return float(compressed_size) / float(original_size)
