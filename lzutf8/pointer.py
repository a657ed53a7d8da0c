#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Sized pointer codec.

A pointer is a back-reference ``(length, distance)`` packed into 2 or 3 bytes:

    110lllll 0ddddddd                  distance < 128
    111lllll 0ddddddd dddddddd         distance < 32768

The first byte looks like a UTF-8 lead byte, but the second byte starts with 0,
which never happens in valid UTF-8. That is enough for the decoder to tell
pointers from literal text without any escape byte.
"""

from __future__ import annotations

from typing import Optional, Tuple

from lzutf8.errors import CorruptStreamError, PointerRangeError

MINIMUM_SEQUENCE_LENGTH = 4
MAXIMUM_SEQUENCE_LENGTH = 31
MAXIMUM_MATCH_DISTANCE = 32767

SHORT_POINTER_MAX_DISTANCE = 0x7F

POINTER_TAG_MASK = 0b11000000
LONG_POINTER_FLAG = 0b00100000
LENGTH_MASK = 0b00011111
DISTANCE_MASK = 0b01111111


def is_pointer_start(c1: int, c2: Optional[int]) -> bool:
    """True when ``c1`` followed by ``c2`` opens a pointer."""
    if c2 is None:
        return False
    return (c1 & POINTER_TAG_MASK) == POINTER_TAG_MASK and (c2 & 0x80) == 0


def pointer_size(c1: int) -> int:
    return 3 if c1 & LONG_POINTER_FLAG else 2


def encode_pointer(length: int, distance: int) -> bytes:
    if not (MINIMUM_SEQUENCE_LENGTH <= length <= MAXIMUM_SEQUENCE_LENGTH):
        raise PointerRangeError(f"pointer length out of range: {length}")
    if not (1 <= distance <= MAXIMUM_MATCH_DISTANCE):
        raise PointerRangeError(f"pointer distance out of range: {distance}")
    if distance <= SHORT_POINTER_MAX_DISTANCE:
        return bytes([0b11000000 | length, distance])
    return bytes([0b11100000 | length, (distance >> 8) & DISTANCE_MASK, distance & 0xFF])


def decode_pointer(data: bytes) -> Tuple[int, int]:
    """Return ``(length, distance)`` of the pointer at the start of ``data``."""
    c1 = data[0]
    size = pointer_size(c1)
    if len(data) < size:
        raise CorruptStreamError("truncated pointer")
    length = c1 & LENGTH_MASK
    c2 = data[1] & DISTANCE_MASK
    if size == 2:
        return length, c2
    return length, (c2 << 8) + data[2]
