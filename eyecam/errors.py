"""Error types raised by the capture layer and by the frame codecs."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Broad category of a capture-layer error."""

    NOT_SUPPORTED = "not supported"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class EyeError(Exception):
    """Error raised by every fallible capture operation.

    ``error`` carries the detail: a message or another exception. Without it
    the error is described by its kind alone.
    """

    def __init__(
        self,
        kind: ErrorKind = ErrorKind.OTHER,
        error: str | BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.error = error
        super().__init__(str(kind) if error is None else str(error))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.name}, error={self.error!r})"


class CodecErrorKind(Enum):
    """Broad category of a codec error."""

    INVALID_BUFFER = "invalid buffer"
    INVALID_PARAM = "invalid parameter"
    UNSUPPORTED_FORMAT = "unsupported format"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class CodecError(Exception):
    """Error raised when a codec cannot be built or fails to convert a frame."""

    def __init__(
        self,
        kind: CodecErrorKind = CodecErrorKind.OTHER,
        error: str | BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.error = error
        super().__init__(str(kind) if error is None else str(error))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.name}, error={self.error!r})"