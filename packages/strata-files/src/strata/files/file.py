from enum import Enum

from strata.spec import IllegalArgumentError, MethodFailedError
from .directory import Directory
from .node import Node


class FileState(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    DELETED = "DELETED"


class File(Node):
    def __init__(self, bn: str, pn: Directory):
        self._state = FileState.CLOSED
        super().__init__(bn, pn)

    def open(self) -> None:
        IllegalArgumentError.check(
            self._state is FileState.CLOSED, "file must be closed to open"
        )
        self._state = FileState.OPEN
        MethodFailedError.check(self._state is FileState.OPEN, "file failed to open")

    def read(self, no_bytes: int) -> bytes:
        IllegalArgumentError.check(
            isinstance(no_bytes, int) and not isinstance(no_bytes, bool),
            "number of bytes must be an integer",
        )
        IllegalArgumentError.check(no_bytes >= 0, "number of bytes must be non-negative")
        IllegalArgumentError.check(
            self._state is FileState.OPEN, "file must be open to read"
        )
        buffer = bytes(no_bytes)
        MethodFailedError.check(
            len(buffer) == no_bytes, "read failed to deliver requested bytes"
        )
        return buffer

    def close(self) -> None:
        IllegalArgumentError.check(
            self._state is FileState.OPEN, "file must be open to close"
        )
        self._state = FileState.CLOSED
        MethodFailedError.check(self._state is FileState.CLOSED, "file failed to close")

    def get_file_state(self) -> FileState:
        return self._state
