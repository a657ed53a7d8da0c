#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import bz2
import lzma
import zlib
from typing import Dict

import zstandard

from lzutf8.compressor import compress, compress_tokens
from lzutf8.errors import CompressionError, InvalidInputError
from lzutf8.pointer import SHORT_POINTER_MAX_DISTANCE
from lzutf8.tokens import Pointer

ZSTD_LEVEL = 10


def compression_stats(text: str) -> Dict[str, object]:
    """Return compression telemetry for ``text``.

    This is purely diagnostic and does not alter wire format.
    """
    tokens = compress_tokens(text)
    plain_bytes = len(text.encode("utf-8"))
    literals = 0
    short_pointers = 0
    long_pointers = 0
    for tok in tokens:
        if isinstance(tok, Pointer):
            if tok.distance <= SHORT_POINTER_MAX_DISTANCE:
                short_pointers += 1
            else:
                long_pointers += 1
        else:
            literals += 1
    compressed_bytes = literals + 2 * short_pointers + 3 * long_pointers
    delta = plain_bytes - compressed_bytes
    gain_pct: float
    if plain_bytes > 0:
        gain_pct = (delta / float(plain_bytes)) * 100.0
    else:
        gain_pct = 0.0
    return {
        "plain_bytes": plain_bytes,
        "compressed_bytes": compressed_bytes,
        "literals": literals,
        "pointers": short_pointers + long_pointers,
        "short_pointers": short_pointers,
        "long_pointers": long_pointers,
        "delta_bytes": delta,
        "gain_pct": gain_pct,
    }


def should_compress(text: str, min_gain_bytes: int = 2) -> bool:
    if not isinstance(text, str):
        return False
    plain = text.encode("utf-8")
    if not plain:
        return False
    try:
        comp = compress(text)
    except CompressionError:
        return False
    return len(comp) < (len(plain) - int(min_gain_bytes))


def compare_codecs(text: str) -> Dict[str, int]:
    """Compressed size of ``text`` per codec, LZUTF8 first."""
    if not isinstance(text, str):
        raise InvalidInputError("text must be str")
    raw = text.encode("utf-8")
    return {
        "plain": len(raw),
        "lzutf8": len(compress(text)),
        "zlib": len(zlib.compress(raw, 9)),
        "bz2": len(bz2.compress(raw, 9)),
        "lzma": len(lzma.compress(raw, preset=9)),
        "zstd": len(zstandard.ZstdCompressor(level=ZSTD_LEVEL).compress(raw)),
    }
