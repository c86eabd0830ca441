from contextlib import contextmanager
from io import StringIO
from typing import Iterator

# ==================================================
# Indentation-aware Text Writer
# ==================================================

class CodeWriter:
    """
    Accumulates generated source text line by line at the current indentation.
    """

    def __init__(self, indent: str = "    ") -> None:
        self._buffer = StringIO()
        self._indent = indent
        self._level = 0

    @property
    def level(self) -> int:
        return self._level

    def line(self, *parts: str) -> None:
        """
        Writes one line at the current indentation. An empty line is written
        without trailing whitespace.
        """
        text = "".join(parts)
        if text:
            self._buffer.write(self._indent * self._level)
            self._buffer.write(text)
        self._buffer.write("\n")

    def blank(self, count: int = 1) -> None:
        for _ in range(count):
            self._buffer.write("\n")

    def push_indent(self) -> None:
        self._level += 1

    def pop_indent(self) -> None:
        if self._level == 0:
            raise ValueError("pop_indent called without a matching push_indent")
        self._level -= 1

    @contextmanager
    def indented(self) -> Iterator["CodeWriter"]:
        self.push_indent()
        try:
            yield self
        finally:
            self.pop_indent()

    def getvalue(self) -> str:
        return self._buffer.getvalue()
