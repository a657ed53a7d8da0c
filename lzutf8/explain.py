#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Bit-level trace of a compressed (or plain) LZUTF8 stream.

Purely diagnostic: it walks the stream the way a reader would when checking a
dump by hand and keeps a running count of the decompressed size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from lzutf8.errors import InvalidInputError
from lzutf8.pointer import decode_pointer

KIND_LITERAL = "literal"
KIND_POINTER = "pointer"
KIND_UNKNOWN = "unknown"


@dataclass(frozen=True)
class TraceRow:
    position: int
    raw: bytes
    kind: str
    output_size: int
    text: Optional[str] = None
    length: Optional[int] = None
    distance: Optional[int] = None

    def meaning(self) -> str:
        if self.kind == KIND_LITERAL:
            return f"literal - {self.text}"
        if self.kind == KIND_POINTER:
            return f"pointer l={self.length} d={self.distance}"
        return "Assumed part of a sequence"


def _is_cont(b: Optional[int]) -> bool:
    return b is not None and (b & 0b11000000) == 0b10000000


def _is_low(b: Optional[int]) -> bool:
    return b is not None and (b & 0b10000000) == 0


def _codepoint_size(seq: Sequence[Optional[int]]) -> int:
    c1, c2, c3, c4 = seq
    if (c1 & 0b10000000) == 0:
        return 1
    if (c1 & 0b11100000) == 0b11000000 and _is_cont(c2):
        return 2
    if (c1 & 0b11110000) == 0b11100000 and _is_cont(c2) and _is_cont(c3):
        return 3
    if (c1 & 0b11111000) == 0b11110000 and _is_cont(c2) and _is_cont(c3) and _is_cont(c4):
        return 4
    return 0


def _pointer_size(seq: Sequence[Optional[int]]) -> int:
    c1, c2, c3, _c4 = seq
    if (c1 & 0b11100000) == 0b11000000 and _is_low(c2):
        return 2
    if (c1 & 0b11100000) == 0b11100000 and _is_low(c2) and c3 is not None:
        return 3
    return 0


def explain(data: Union[str, bytes, bytearray, memoryview]) -> List[TraceRow]:
    if isinstance(data, str):
        raw = data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray, memoryview)):
        raw = bytes(data)
    else:
        raise InvalidInputError("data must be str or bytes")

    rows: List[TraceRow] = []
    outsize = 0
    pos = 0
    n = len(raw)
    while pos < n:
        seq = [raw[pos + j] if pos + j < n else None for j in range(4)]
        size = _codepoint_size(seq)
        if size:
            chunk = raw[pos:pos + size]
            outsize += size
            rows.append(TraceRow(pos, chunk, KIND_LITERAL, outsize,
                                 text=chunk.decode("utf-8", errors="replace")))
            pos += size
            continue
        size = _pointer_size(seq)
        if size:
            chunk = raw[pos:pos + size]
            length, distance = decode_pointer(chunk)
            outsize += length
            rows.append(TraceRow(pos, chunk, KIND_POINTER, outsize, length=length, distance=distance))
            pos += size
            continue
        outsize += 1
        rows.append(TraceRow(pos, raw[pos:pos + 1], KIND_UNKNOWN, outsize))
        pos += 1
    return rows


def format_row(row: TraceRow) -> str:
    bits = "_".join(f"{b:08b}" for b in row.raw)
    return f"{row.position:04d} 0b{bits} {row.meaning()} OS={row.output_size}"


def format_explain(rows: Iterable[TraceRow]) -> str:
    return "\n".join(format_row(r) for r in rows)
