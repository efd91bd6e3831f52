from bf_errors import OutOfMemoryError


class Tape:
    """
    Byte cells growing one at a time in either direction.

    Cells at offset >= 0 live in `right`, cells at offset < 0 live in
    `left` (offset -1 is left[0]). The pointer starts on offset 0 with
    nothing materialized on either side of it.
    """

    def __init__(self):
        self.right = [0]
        self.left = []
        self.ptr = 0

    @property
    def position(self):
        return self.ptr

    def __len__(self):
        return len(self.left) + len(self.right)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    def _get(self):
        if self.ptr >= 0:
            return self.right[self.ptr]
        return self.left[-self.ptr - 1]

    def _set(self, value):
        if self.ptr >= 0:
            self.right[self.ptr] = value
        else:
            self.left[-self.ptr - 1] = value

    def current_value(self):
        return self._get()

    def set_value(self, value):
        self._set(value & 0xFF)

    def increment(self):
        self._set((self._get() + 1) % 256)

    def decrement(self):
        self._set((self._get() - 1) % 256)

    def move_right(self):
        nxt = self.ptr + 1
        if nxt >= len(self.right):
            try:
                self.right.append(0)
            except MemoryError:
                raise OutOfMemoryError(f"cannot materialize cell {nxt}") from None
        self.ptr = nxt

    def move_left(self):
        nxt = self.ptr - 1
        if nxt < 0 and -nxt > len(self.left):
            try:
                self.left.append(0)
            except MemoryError:
                raise OutOfMemoryError(f"cannot materialize cell {nxt}") from None
        self.ptr = nxt

    def cells(self):
        # Leftmost first
        return self.left[::-1] + self.right

    def release(self):
        self.right = [0]
        self.left = []
        self.ptr = 0
