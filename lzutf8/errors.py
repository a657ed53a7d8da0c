#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations


class CompressionError(ValueError):
    pass


class InvalidInputError(CompressionError, TypeError):
    pass


class CorruptStreamError(CompressionError):
    pass


class PointerRangeError(CompressionError):
    pass
