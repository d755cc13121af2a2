from __future__ import annotations


class BlossomError(Exception):
    """Base class for domain exceptions."""


class HashValidationError(BlossomError, ValueError):
    pass


class NonSeekableSourceError(BlossomError, TypeError):
    pass


class TransferIntegrityError(BlossomError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"copied size mismatch: expected {expected}, wrote {actual}")


class TransferError(BlossomError):
    def __init__(self, code: int, reason: str | None = None) -> None:
        self.code = code
        self.reason = reason or ""
        super().__init__(code, self.reason)

    def __str__(self) -> str:
        return f"code: {self.code}, reason: {self.reason}"


def transfer_errors_equal(a: TransferError | None, b: TransferError | None) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return a.code == b.code and a.reason == b.reason
