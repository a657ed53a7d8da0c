#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from lzutf8.errors import CorruptStreamError
from lzutf8.pointer import decode_pointer, encode_pointer, is_pointer_start, pointer_size


@dataclass(frozen=True)
class Literal:
    value: int

    def encode(self) -> bytes:
        return bytes([self.value])


@dataclass(frozen=True)
class Pointer:
    length: int
    distance: int

    def encode(self) -> bytes:
        return encode_pointer(self.length, self.distance)


Token = Union[Literal, Pointer]


def iter_tokens(data: bytes) -> Iterator[Token]:
    """Split a compressed stream into literals and pointers.

    Plain UTF-8 text yields literals only.
    """
    n = len(data)
    i = 0
    while i < n:
        c1 = data[i]
        c2 = data[i + 1] if i + 1 < n else None
        if not is_pointer_start(c1, c2):
            yield Literal(c1)
            i += 1
            continue
        size = pointer_size(c1)
        if i + size > n:
            raise CorruptStreamError(f"truncated pointer at offset {i}")
        length, distance = decode_pointer(data[i:i + size])
        yield Pointer(length, distance)
        i += size
