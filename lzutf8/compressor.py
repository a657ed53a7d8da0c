#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Greedy single-pass LZUTF8 encoder.

Every token start with at least 4 bytes ahead is indexed by its 4-byte prefix.
Positions covered by an accepted match are skipped, so the index grows once per
token rather than once per byte.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from lzutf8.errors import InvalidInputError
from lzutf8.pointer import (
    MAXIMUM_MATCH_DISTANCE,
    MAXIMUM_SEQUENCE_LENGTH,
    MINIMUM_SEQUENCE_LENGTH,
    SHORT_POINTER_MAX_DISTANCE,
)
from lzutf8.tokens import Literal, Pointer, Token


def match_score(distance: int, length: int) -> float:
    # 2-byte pointers are worth more than 3-byte ones for the same length.
    if distance <= SHORT_POINTER_MAX_DISTANCE:
        return length * 1.5
    return float(length)


def _match_length(raw: bytes, start: int, pos: int, max_len: int) -> int:
    """Length of the usable match between ``start`` and ``pos``, 0 if none."""
    for k in range(max_len):
        if raw[start + k] != raw[pos + k]:
            break
    else:
        return max_len
    if k <= MINIMUM_SEQUENCE_LENGTH:
        return 0
    return k - 1


def _best_match(raw: bytes, pos: int, candidates: List[int]) -> Optional[Tuple[int, int]]:
    max_len = min(len(raw) - pos, MAXIMUM_SEQUENCE_LENGTH)
    best: Optional[Tuple[int, int]] = None
    best_score = 0.0
    for start in candidates:
        distance = pos - start
        if distance > MAXIMUM_MATCH_DISTANCE:
            continue
        length = _match_length(raw, start, pos, max_len)
        if not length:
            continue
        score = match_score(distance, length)
        if best is None or score > best_score:
            best = (distance, length)
            best_score = score
    return best


def _index_position(index: Dict[bytes, List[int]], key: bytes, pos: int) -> None:
    bucket = index.setdefault(key, [])
    bucket.append(pos)
    stale = 0
    while pos - bucket[stale] >= MAXIMUM_MATCH_DISTANCE:
        stale += 1
    if stale:
        del bucket[:stale]


def _tokenize(raw: bytes) -> List[Token]:
    tokens: List[Token] = []
    index: Dict[bytes, List[int]] = {}
    size = len(raw)
    pos = 0
    while pos < size:
        if size - pos < MINIMUM_SEQUENCE_LENGTH:
            tokens.append(Literal(raw[pos]))
            pos += 1
            continue

        key = raw[pos:pos + MINIMUM_SEQUENCE_LENGTH]
        candidates = index.get(key)
        best = _best_match(raw, pos, candidates) if candidates else None
        _index_position(index, key, pos)

        if best is None:
            tokens.append(Literal(raw[pos]))
            pos += 1
            continue
        distance, length = best
        tokens.append(Pointer(length, distance))
        pos += length
    return tokens


def compress_tokens(text: str) -> List[Token]:
    """Return the token decomposition ``compress`` serializes."""
    if not isinstance(text, str):
        raise InvalidInputError("text must be str")
    return _tokenize(text.encode("utf-8"))


def compress(text: str) -> bytes:
    """Compress UTF-8 text.

    Output is deterministic. Text without repeats of 5+ bytes comes back with
    its exact UTF-8 length.
    """
    out = bytearray()
    for tok in compress_tokens(text):
        out.extend(tok.encode())
    return bytes(out)
