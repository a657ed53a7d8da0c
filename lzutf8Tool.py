#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
lzutf8Tool.py: command-line front end for the LZUTF8 text codec.

Commands:
  compress     UTF-8 text -> LZUTF8 stream
  decompress   LZUTF8 stream (or plain UTF-8) -> UTF-8 text
  explain      per-token bit dump with running output size
  stats        token counts and size comparison against zlib/bz2/lzma/zstd

Input is read from --input (default stdin), output written to --output
(default stdout). A compressed stream is not always valid UTF-8, so use
--base64 when it has to travel as text.
"""

from __future__ import annotations

import argparse
import base64
import binascii
import json
import sys
from typing import Any, List, Optional

import lzutf8
from lzutf8 import CompressionError

__version__ = lzutf8.__version__


def eprint(*args: Any) -> None:
    print(*args, file=sys.stderr)


def human_bytes(n: int) -> str:
    units = ["B", "KB", "MB", "GB", "TB"]
    x = float(n)
    for u in units:
        if x < 1024.0:
            return f"{x:.1f}{u}"
        x /= 1024.0
    return f"{x:.1f}PB"


def b64e(b: bytes) -> bytes:
    return base64.b64encode(b)


def b64d(s: bytes) -> bytes:
    try:
        return base64.b64decode(s.strip(), validate=True)
    except binascii.Error as exc:
        raise CompressionError(f"invalid base64 input: {exc}") from exc


def read_input(path: Optional[str]) -> bytes:
    if not path or path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def write_output(path: Optional[str], data: bytes) -> None:
    if not path or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, "wb") as f:
        f.write(data)


def decode_text(raw: bytes) -> str:
    try:
        return raw.decode("utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise CompressionError(f"input is not valid UTF-8: {exc}") from exc


def cmd_compress(args: argparse.Namespace) -> int:
    raw = read_input(args.input)
    comp = lzutf8.compress(decode_text(raw))
    write_output(args.output, b64e(comp) if args.base64 else comp)
    if args.verbose:
        ratio = (len(comp) / len(raw) * 100.0) if raw else 100.0
        eprint(f"[OK] compressed {human_bytes(len(raw))} -> {human_bytes(len(comp))} ({ratio:.1f}%)")
    return 0


def cmd_decompress(args: argparse.Namespace) -> int:
    raw = read_input(args.input)
    if args.base64:
        raw = b64d(raw)
    text = lzutf8.decompress(raw)
    out = text.encode("utf-8")
    write_output(args.output, out)
    if args.verbose:
        eprint(f"[OK] decompressed {human_bytes(len(raw))} -> {human_bytes(len(out))}")
    return 0


def cmd_explain(args: argparse.Namespace) -> int:
    raw = read_input(args.input)
    if args.base64:
        raw = b64d(raw)
    rows = lzutf8.explain(raw)
    if rows:
        write_output(args.output, (lzutf8.format_explain(rows) + "\n").encode("utf-8"))
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    text = decode_text(read_input(args.input))
    stats = dict(lzutf8.compression_stats(text))
    stats["should_compress"] = lzutf8.should_compress(text, min_gain_bytes=args.min_gain)
    stats["codecs"] = lzutf8.compare_codecs(text)
    if args.json:
        write_output(args.output, (json.dumps(stats, indent=2, ensure_ascii=False) + "\n").encode("utf-8"))
        return 0

    lines: List[str] = []
    lines.append("[TOKENS]")
    lines.append(f"  Literals:           {stats['literals']}")
    lines.append(f"  Pointers (2 byte):  {stats['short_pointers']}")
    lines.append(f"  Pointers (3 byte):  {stats['long_pointers']}")
    lines.append("")
    lines.append("[SIZE]")
    lines.append(f"  Plain:       {stats['plain_bytes']}")
    lines.append(f"  Compressed:  {stats['compressed_bytes']}")
    lines.append(f"  Gain:        {stats['gain_pct']:.1f}%")
    lines.append(f"  Worth it:    {'yes' if stats['should_compress'] else 'no'}")
    lines.append("")
    lines.append("[CODECS]")
    for name, size in stats["codecs"].items():
        lines.append(f"  {name:<8} {size}")
    write_output(args.output, ("\n".join(lines) + "\n").encode("utf-8"))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lzutf8Tool.py",
        description="Compress and inspect UTF-8 text with the LZUTF8 codec",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_io(p: argparse.ArgumentParser) -> None:
        p.add_argument("-i", "--input", default=None, help="Input file (default: stdin)")
        p.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
        p.add_argument("-v", "--verbose", action="store_true", help="Print a size summary to stderr")

    p = sub.add_parser("compress", help="Compress UTF-8 text")
    add_io(p)
    p.add_argument("--base64", action="store_true", help="Write the compressed stream as base64")
    p.set_defaults(func=cmd_compress)

    p = sub.add_parser("decompress", help="Decompress an LZUTF8 stream")
    add_io(p)
    p.add_argument("--base64", action="store_true", help="Read the compressed stream as base64")
    p.set_defaults(func=cmd_decompress)

    p = sub.add_parser("explain", help="Dump the token stream bit by bit")
    add_io(p)
    p.add_argument("--base64", action="store_true", help="Read the stream as base64")
    p.set_defaults(func=cmd_explain)

    p = sub.add_parser("stats", help="Show token counts and compare with other codecs")
    add_io(p)
    p.add_argument("--json", action="store_true", help="Print stats as JSON")
    p.add_argument(
        "--min-gain",
        type=int,
        default=2,
        help="Bytes that compression must save to be worth it (default: 2)",
    )
    p.set_defaults(func=cmd_stats)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except CompressionError as exc:
        eprint(f"[ERROR] {exc}")
        return 2
    except OSError as exc:
        eprint(f"[ERROR] {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
