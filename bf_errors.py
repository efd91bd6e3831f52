class EngineError(Exception):
    """Base class for every fatal interpreter failure."""
    diagnostic = "execution failed"


class OutOfMemoryError(EngineError):
    diagnostic = "bad memory allocation"


class UnmatchedBracketError(EngineError):
    diagnostic = "unmatched brackets"

    def __init__(self, position, char):
        self.position = position
        self.char = char
        super().__init__(f"Unmatched '{char}' at offset {position}")


class OutputError(EngineError):
    diagnostic = "input/output error"
