import argparse
import numpy as np
import matplotlib.pyplot as plt
from huffman import CHAR_MAX, count_file_frequencies
from codetable import read_codes


def plot_code_lengths(freqs, codes, out_path, title=None):
    """
    Two panels over byte values 0..255: occurrence count (top) and code
    length in bits (bottom). Bytes without a code are left empty.
    """
    f = np.asarray(freqs, dtype=np.int64)
    syms = np.arange(CHAR_MAX)
    lengths = np.array([len(codes.get(s, "")) for s in range(CHAR_MAX)])

    fig, (ax0, ax1) = plt.subplots(2, 1, figsize=(10, 5), sharex=True)
    ax0.bar(syms, f, width=1.0, color="tab:gray")
    ax0.set_ylabel("count")
    ax1.bar(syms, lengths, width=1.0, color="tab:blue")
    ax1.set_ylabel("code length (bits)")
    ax1.set_xlabel("byte value")
    ax1.set_xlim(-1, CHAR_MAX)
    if title:
        ax0.set_title(title, fontsize=9)

    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
    return out_path


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="original (uncompressed) file")
    ap.add_argument("--code", required=True, help="code table written by huff")
    ap.add_argument("--output", default="code_lengths.png", help="figure path")
    args = ap.parse_args(argv)

    freqs = count_file_frequencies(args.input)
    with open(args.code, "r", encoding="ascii") as f:
        codes = read_codes(f)
    plot_code_lengths(freqs, codes, args.output, title=args.input)
    print(f"[plot] wrote {args.output}")


if __name__ == "__main__":
    main()
