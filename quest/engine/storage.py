"""Line storage: save files as sequences of text lines under one directory.

OSError from the filesystem is never caught here; callers see it unchanged.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Protocol

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    r"""Split on "\n" only, dropping one trailing "\r" per line.

    Other characters str.splitlines() breaks on (\x0b, \x85, \u2028, ...) are
    ordinary text inside a record. A final empty piece is ignored.
    """
    pieces = text.split("\n")
    if pieces and pieces[-1] == "":
        pieces.pop()
    return [p[:-1] if p.endswith("\r") else p for p in pieces]


class LineSource(Protocol):
    def read_all_lines(self, name: str) -> list[str]: ...


class LineSink(Protocol):
    def write_all_lines(self, name: str, lines: Iterable[str]) -> None: ...


class LineFileStore:
    """Reads and writes named UTF-8 text files relative to `base_dir`."""

    def __init__(self, base_dir: str | os.PathLike[str]):
        self.base_dir = Path(base_dir)

    def path_for(self, name: str) -> Path:
        return self.base_dir / name

    def read_all_lines(self, name: str) -> list[str]:
        """Return the file's lines without line terminators."""
        path = self.path_for(name)
        with path.open(encoding="utf-8", newline="") as fh:
            text = fh.read()
        logger.debug("Read %d bytes from %s", len(text), path)
        return split_lines(text)

    def write_all_lines(self, name: str, lines: Iterable[str]) -> None:
        """Write `lines` newline-terminated, replacing the file atomically.

        Content goes to a temporary file in the same directory first and is
        renamed over the target, so readers never observe a partial file.
        """
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
                for line in lines:
                    fh.write(line)
                    fh.write("\n")
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %s", path)
