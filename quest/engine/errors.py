"""Engine error taxonomy.

Every failure the engine reports is a QuestError subclass. I/O failures from
the line storage are plain OSError and are never wrapped.
"""

from __future__ import annotations


class QuestError(Exception):
    """Base class for recoverable engine errors."""


class IndexOutOfRange(QuestError, IndexError):
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Goal index {index} out of range (0..{size - 1})" if size else "No goals to record against")


class MalformedHeader(QuestError, ValueError):
    def __init__(self, header: str | None):
        self.header = header
        if header is None:
            super().__init__("Missing score header")
        else:
            super().__init__(f"Score header is not an integer: {header!r}")


class MalformedRecord(QuestError, ValueError):
    def __init__(self, record: str, reason: str, line_no: int | None = None):
        self.record = record
        self.reason = reason
        self.line_no = line_no
        where = f"line {line_no}: " if line_no is not None else ""
        super().__init__(f"{where}{reason}: {record!r}")


class InvalidGoal(QuestError, ValueError):
    """Rejected add_goal arguments (unknown kind, missing checklist fields, bad text)."""
