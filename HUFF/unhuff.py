import argparse
import os
from codetable import read_table
from huffman import HUFF_EXT, CODE_EXT, UNHUFF_EXT
from codec import decode_file


def main(argv=None):
    ap = argparse.ArgumentParser(description="Restore a file compressed by huff")
    ap.add_argument("--input", required=True, help="path to .huff")
    ap.add_argument("--code", help="code table (default <stem>.code)")
    ap.add_argument("--output", help="restored output (default <stem>.unhuff)")
    args = ap.parse_args(argv)

    if not args.input.endswith(HUFF_EXT):
        ap.error(f"input file name must end with {HUFF_EXT}")
    stem, _ = os.path.splitext(args.input)
    code_path = args.code or stem + CODE_EXT
    out_path = args.output or stem + UNHUFF_EXT
    out_abs = os.path.abspath(out_path)
    if out_abs == os.path.abspath(args.input):
        ap.error(f"output would overwrite input: {out_path}")
    if out_abs == os.path.abspath(code_path):
        ap.error(f"output would overwrite code table: {out_path}")

    try:
        with open(code_path, "r", encoding="ascii") as f:
            root = read_table(f)
        n = decode_file(args.input, out_path, root)
    except ValueError as exc:
        raise SystemExit(f"[unhuff] {exc}")

    print(f"[unhuff] wrote {out_path} ({n} bytes)")


if __name__ == "__main__":
    main()
