from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, List, Optional, Union

from .errors import ResourceExhaustion, SinkUnavailable, SourceUnavailable

PathLike = Union[str, Path]


def read_source(path: PathLike) -> bytes:
    p = Path(path)
    try:
        return p.read_bytes()
    except MemoryError as e:
        raise ResourceExhaustion(message="Memory allocation failed") from e
    except OSError as e:
        raise SourceUnavailable(message=f"Could not open file: {p} ({e.strerror or e})", path=str(p)) from e


class BufferSink:
    """Collects emitted lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def write_lines(self, lines: Iterable[str]) -> None:
        self.lines.extend(lines)

    def getvalue(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)


class StreamSink:
    def __init__(self, stream: IO[str]):
        self.stream = stream

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.stream.write(f"{line}\n")
        self.stream.flush()


class FileSink:
    """
    Writes emitted lines to ``path``. Use as a context manager; the file is
    closed on every exit path.
    """

    def __init__(self, path: PathLike, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding
        self._fh: Optional[IO[str]] = None

    def __enter__(self) -> "FileSink":
        try:
            self._fh = open(self.path, "w", encoding=self.encoding)
        except OSError as e:
            raise SinkUnavailable(message=f"Could not open output file: {self.path}", path=str(self.path)) from e
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def write_lines(self, lines: Iterable[str]) -> None:
        if self._fh is None:
            raise SinkUnavailable(message=f"Output file is not open: {self.path}", path=str(self.path))
        try:
            for line in lines:
                self._fh.write(f"{line}\n")
        except OSError as e:
            raise SinkUnavailable(message=f"Could not write output file: {self.path}", path=str(self.path)) from e
