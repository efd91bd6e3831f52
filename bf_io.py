import sys

from bf_errors import OutputError


class StreamIO:
    """Byte at a time over binary streams. Every write is flushed."""

    def __init__(self, instream, outstream):
        self.instream = instream
        self.outstream = outstream

    @classmethod
    def from_std(cls):
        return cls(sys.stdin.buffer, sys.stdout.buffer)

    def read_byte(self):
        data = self.instream.read(1)
        if not data:
            return None
        return data[0]

    def write_byte(self, value):
        try:
            self.outstream.write(bytes((value,)))
            self.outstream.flush()
        except (OSError, ValueError) as e:
            raise OutputError(str(e)) from e


class BufferIO:
    def __init__(self, data=b""):
        self.data = bytes(data)
        self.pos = 0
        self.out = bytearray()

    @property
    def output(self):
        return bytes(self.out)

    def read_byte(self):
        if self.pos >= len(self.data):
            return None
        value = self.data[self.pos]
        self.pos += 1
        return value

    def write_byte(self, value):
        self.out.append(value)
