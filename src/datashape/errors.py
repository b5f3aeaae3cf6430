from __future__ import annotations

ERROR_CODE_UNSUPPORTED_INPUT = "UNSUPPORTED_INPUT"


class UnsupportedInputError(ValueError):
    """Raised when a transform is handed a top-level value it cannot walk."""

    code = ERROR_CODE_UNSUPPORTED_INPUT

    def __init__(self, message: str, *, kind: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind


__all__ = [
    "ERROR_CODE_UNSUPPORTED_INPUT",
    "UnsupportedInputError",
]
