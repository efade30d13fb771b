import argparse
import os
import numpy as np
from huffman import HUFF_EXT, CODE_EXT, build_tree, count_file_frequencies, format_tree
from codetable import write_table, read_codes
from codec import encode_file
from metrics import entropy_bits, average_code_length, compression_ratio


def main(argv=None):
    ap = argparse.ArgumentParser(description="Huffman-compress a file into <stem>.huff + <stem>.code")
    ap.add_argument("--input", required=True, help="file to compress")
    ap.add_argument("--output", help="compressed output (default <stem>.huff)")
    ap.add_argument("--code", help="code table output (default <stem>.code)")
    ap.add_argument("--stats", action="store_true", help="print size / entropy / code length")
    ap.add_argument("--show-tree", action="store_true", help="print the Huffman tree sideways")
    args = ap.parse_args(argv)

    stem, _ = os.path.splitext(args.input)
    out_path = args.output or stem + HUFF_EXT
    code_path = args.code or stem + CODE_EXT
    in_abs = os.path.abspath(args.input)
    if os.path.abspath(out_path) == in_abs:
        ap.error(f"output would overwrite input: {out_path}")
    if os.path.abspath(code_path) == in_abs:
        ap.error(f"code table would overwrite input: {code_path}")
    if os.path.abspath(code_path) == os.path.abspath(out_path):
        ap.error(f"code table and output are the same file: {code_path}")

    freqs = count_file_frequencies(args.input)
    tree = build_tree(freqs)
    with open(code_path, "w", encoding="ascii") as f:
        write_table(f, tree)

    # encode with the codes as stored, so the .code file is what unhuff will see
    with open(code_path, "r", encoding="ascii") as f:
        codes = read_codes(f)

    try:
        nbits = encode_file(args.input, out_path, codes)
    except ValueError as exc:
        raise SystemExit(f"[huff] {exc}")

    print(f"[huff] wrote {code_path} ({len(codes)} codes)")
    print(f"[huff] wrote {out_path}")

    if args.show_tree:
        print(format_tree(tree))

    if args.stats:
        n_in = int(np.sum(freqs))
        n_out = os.path.getsize(out_path)
        print(f"[huff] input={n_in}B payload={nbits}bits -> {n_out}B ratio={compression_ratio(n_in, n_out):.4f}")
        print(f"[huff] entropy={entropy_bits(freqs):.4f} bits/byte avg_code={average_code_length(freqs, codes):.4f} bits/byte")


if __name__ == "__main__":
    main()
