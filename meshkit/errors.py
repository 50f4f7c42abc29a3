from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    NONE = "None"
    FILE_NOT_FOUND = "The file or directory does not exist"
    FILE_ALREADY_EXISTS = "The specified file already exists"
    UNKNOWN_IO_ERROR = "An unknown I/O error occurred"
    UNSUPPORTED_FORMAT = "The file format is not supported"
    INVALID_DATA = "Read data is invalid, the file might be corrupted"
    INVALID_FILEPATH = "The provided filepath is not valid"


def format_error(code: ErrorCode) -> str:
    return code.value


class _Outcome:
    """
    Result of a read or write. Truthy when something went wrong, so callers
    can write ``if mesh.read(path): ...`` to handle the failure branch.
    """

    __slots__ = ("code",)

    def __init__(self, code: ErrorCode = ErrorCode.NONE) -> None:
        self.code = code

    @property
    def ok(self) -> bool:
        return self.code is ErrorCode.NONE

    @property
    def message(self) -> str:
        return format_error(self.code)

    def __bool__(self) -> bool:
        return not self.ok

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorCode):
            return self.code is other
        if type(other) is type(self):
            return self.code is other.code  # type: ignore[attr-defined]
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.code))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.name})"


class ParseOutcome(_Outcome):
    __slots__ = ()


class WriteOutcome(_Outcome):
    __slots__ = ()


# ----------
# Exceptions
# ----------

class MeshError(Exception):
    pass


class InvalidMeshData(MeshError):
    """Raised by a codec when the bytes it was handed do not parse."""


class MeshLoadError(MeshError):
    def __init__(self, code: ErrorCode) -> None:
        super().__init__(f"Failed to load mesh: {format_error(code)}")
        self.code = code
