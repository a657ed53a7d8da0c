#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import base64
import contextlib
import io
import json
import os
import tempfile
import unittest

import lzutf8Tool
from lzutf8 import compress


class LzUtf8ToolTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.dir = self._tmp.name

    def _path(self, name: str) -> str:
        return os.path.join(self.dir, name)

    def _write(self, name: str, data: bytes) -> str:
        path = self._path(name)
        with open(path, "wb") as f:
            f.write(data)
        return path

    def _read(self, name: str) -> bytes:
        with open(self._path(name), "rb") as f:
            return f.read()

    def test_compress_decompress_files(self) -> None:
        text = "скинь лог, скинь конфиг, скинь лог ещё раз " * 10
        src = self._write("plain.txt", text.encode("utf-8"))
        rc = lzutf8Tool.main(["compress", "-i", src, "-o", self._path("plain.lz")])
        self.assertEqual(rc, 0)
        self.assertEqual(self._read("plain.lz"), compress(text))

        rc = lzutf8Tool.main(["decompress", "-i", self._path("plain.lz"), "-o", self._path("back.txt")])
        self.assertEqual(rc, 0)
        self.assertEqual(self._read("back.txt").decode("utf-8"), text)

    def test_base64_transport(self) -> None:
        text = "A" * 64
        src = self._write("a.txt", text.encode("utf-8"))
        self.assertEqual(lzutf8Tool.main(["compress", "--base64", "-i", src, "-o", self._path("a.b64")]), 0)
        self.assertEqual(base64.b64decode(self._read("a.b64")), compress(text))

        rc = lzutf8Tool.main(["decompress", "--base64", "-i", self._path("a.b64"), "-o", self._path("a.out")])
        self.assertEqual(rc, 0)
        self.assertEqual(self._read("a.out"), text.encode("utf-8"))

    def test_explain_writes_trace(self) -> None:
        src = self._write("a.lz", compress("A" * 64))
        rc = lzutf8Tool.main(["explain", "-i", src, "-o", self._path("trace.txt")])
        self.assertEqual(rc, 0)
        lines = self._read("trace.txt").decode("utf-8").splitlines()
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[-1].endswith("OS=64"))

    def test_stats_json(self) -> None:
        src = self._write("a.txt", ("A" * 64).encode("utf-8"))
        rc = lzutf8Tool.main(["stats", "--json", "-i", src, "-o", self._path("stats.json")])
        self.assertEqual(rc, 0)
        stats = json.loads(self._read("stats.json").decode("utf-8"))
        self.assertEqual(stats["compressed_bytes"], 6)
        self.assertTrue(stats["should_compress"])
        self.assertIn("zstd", stats["codecs"])

    def test_stats_text_report(self) -> None:
        src = self._write("a.txt", ("A" * 64).encode("utf-8"))
        rc = lzutf8Tool.main(["stats", "-i", src, "-o", self._path("stats.txt")])
        self.assertEqual(rc, 0)
        report = self._read("stats.txt").decode("utf-8")
        self.assertIn("[TOKENS]", report)
        self.assertIn("[CODECS]", report)

    def test_corrupt_stream_reports_error(self) -> None:
        src = self._write("bad.lz", b"ab\xc4\x05")
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            rc = lzutf8Tool.main(["decompress", "-i", src, "-o", self._path("out.txt")])
        self.assertEqual(rc, 2)
        self.assertIn("[ERROR]", err.getvalue())

    def test_invalid_utf8_input_reports_error(self) -> None:
        src = self._write("bad.txt", b"\xff\xfe")
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            rc = lzutf8Tool.main(["compress", "-i", src, "-o", self._path("out.lz")])
        self.assertEqual(rc, 2)
        self.assertIn("not valid UTF-8", err.getvalue())

    def test_missing_input_file(self) -> None:
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            rc = lzutf8Tool.main(["compress", "-i", self._path("missing.txt")])
        self.assertEqual(rc, 2)

    def test_verbose_summary(self) -> None:
        src = self._write("a.txt", ("A" * 64).encode("utf-8"))
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            rc = lzutf8Tool.main(["compress", "-v", "-i", src, "-o", self._path("a.lz")])
        self.assertEqual(rc, 0)
        self.assertIn("[OK] compressed", err.getvalue())


if __name__ == "__main__":
    unittest.main()
