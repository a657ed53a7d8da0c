#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Union

from lzutf8.errors import CorruptStreamError, InvalidInputError
from lzutf8.tokens import Literal, iter_tokens

ByteLike = Union[bytes, bytearray, memoryview]


def _as_bytes(data: Union[str, ByteLike]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise InvalidInputError("data must be str or bytes")


def decompress_bytes(data: Union[str, ByteLike]) -> bytes:
    """Expand a compressed stream into raw bytes.

    Pointers copy one byte at a time from the growing output, so a distance
    shorter than the length repeats the bytes the copy itself produces.
    """
    raw = _as_bytes(data)
    out = bytearray()
    for tok in iter_tokens(raw):
        if isinstance(tok, Literal):
            out.append(tok.value)
            continue
        if tok.distance == 0 or tok.distance > len(out):
            raise CorruptStreamError(
                f"back-reference distance {tok.distance} exceeds output size {len(out)}"
            )
        src = len(out) - tok.distance
        for _ in range(tok.length):
            out.append(out[src])
            src += 1
    return bytes(out)


def decompress(data: Union[str, ByteLike]) -> str:
    """Decompress to text.

    Uncompressed UTF-8 text is returned unchanged.
    """
    raw = decompress_bytes(data)
    try:
        return raw.decode("utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise CorruptStreamError(f"decompressed data is not valid UTF-8: {exc}") from exc
