#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
lzutf8 package

LZUTF8 text codec: back-reference compression for UTF-8 text whose output needs
no header, and whose decoder passes plain UTF-8 through untouched.
"""

from __future__ import annotations

from lzutf8.compressor import compress, compress_tokens, match_score
from lzutf8.decompressor import decompress, decompress_bytes
from lzutf8.errors import (
    CompressionError,
    CorruptStreamError,
    InvalidInputError,
    PointerRangeError,
)
from lzutf8.explain import TraceRow, explain, format_explain
from lzutf8.pointer import (
    MAXIMUM_MATCH_DISTANCE,
    MAXIMUM_SEQUENCE_LENGTH,
    MINIMUM_SEQUENCE_LENGTH,
    decode_pointer,
    encode_pointer,
)
from lzutf8.stats import compare_codecs, compression_stats, should_compress
from lzutf8.tokens import Literal, Pointer, iter_tokens

__version__ = "0.1.0"

__all__ = [
    "MAXIMUM_MATCH_DISTANCE",
    "MAXIMUM_SEQUENCE_LENGTH",
    "MINIMUM_SEQUENCE_LENGTH",
    "CompressionError",
    "CorruptStreamError",
    "InvalidInputError",
    "Literal",
    "Pointer",
    "PointerRangeError",
    "TraceRow",
    "compare_codecs",
    "compress",
    "compress_tokens",
    "compression_stats",
    "decode_pointer",
    "decompress",
    "decompress_bytes",
    "encode_pointer",
    "explain",
    "format_explain",
    "iter_tokens",
    "match_score",
    "should_compress",
]
