#!/usr/bin/env python3
"""
Byte I/O tests
"""

import io
import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from bf_io import BufferIO, StreamIO
from bf_errors import OutputError


class CountingStream(io.BytesIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


class TestStreamIO(unittest.TestCase):

    def test_reads_one_byte_at_a_time(self):
        stream = StreamIO(io.BytesIO(b"\x00a"), io.BytesIO())
        self.assertEqual(stream.read_byte(), 0)
        self.assertEqual(stream.read_byte(), ord("a"))
        self.assertIsNone(stream.read_byte())

    def test_flushes_every_write(self):
        out = CountingStream()
        stream = StreamIO(io.BytesIO(), out)
        stream.write_byte(72)
        stream.write_byte(105)
        self.assertEqual(out.getvalue(), b"Hi")
        self.assertEqual(out.flushes, 2)

    def test_closed_output(self):
        out = io.BytesIO()
        out.close()
        stream = StreamIO(io.BytesIO(), out)
        with self.assertRaises(OutputError):
            stream.write_byte(0)


class TestBufferIO(unittest.TestCase):

    def test_round_trip(self):
        buf = BufferIO(b"ab")
        buf.write_byte(buf.read_byte())
        buf.write_byte(buf.read_byte())
        self.assertIsNone(buf.read_byte())
        self.assertEqual(buf.output, b"ab")


if __name__ == '__main__':
    unittest.main()
