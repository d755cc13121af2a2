from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass

from blossom_core.errors import HashValidationError

HASH_SIZE = 32
HEX_SIZE = HASH_SIZE * 2

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


@dataclass(frozen=True, slots=True)
class Hash:
    """SHA-256 content address of a blob."""

    digest: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.digest, bytes) or len(self.digest) != HASH_SIZE:
            raise HashValidationError(f"hash digest must be exactly {HASH_SIZE} bytes")

    @classmethod
    def from_digest(cls, raw: bytes | bytearray | memoryview) -> Hash:
        return cls(bytes(raw))

    def hex(self) -> str:
        return self.digest.hex()

    def __str__(self) -> str:
        return self.hex()

    def to_storage_form(self) -> str:
        return self.hex()

    @classmethod
    def from_storage_form(cls, value: object) -> Hash:
        """Decode a hash read back from storage.

        Accepts the 64-character hex string or the raw 32 bytes; anything else,
        including ``None``, raises ``HashValidationError``.
        """
        if value is None:
            raise HashValidationError("NULL cannot be decoded into Hash")
        if isinstance(value, str):
            if len(value) != HEX_SIZE:
                raise HashValidationError(
                    f"invalid hash length: {len(value)}, expected {HEX_SIZE} hex characters"
                )
            return parse_hash(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            raw = bytes(value)
            if len(raw) != HASH_SIZE:
                raise HashValidationError(f"invalid hash length: {len(raw)}, expected {HASH_SIZE} bytes")
            return cls(raw)
        raise HashValidationError(f"cannot decode {type(value).__name__} into Hash")


def compute_hash(data: bytes) -> Hash:
    return Hash(hashlib.sha256(data).digest())


def parse_hash(text: str) -> Hash:
    if len(text) != HEX_SIZE:
        raise HashValidationError(f"input length must be exactly {HEX_SIZE} characters, got {len(text)}")
    if not _HEX_RE.fullmatch(text):
        raise HashValidationError(f"failed to parse hash: {text!r} is not hexadecimal")
    return Hash(bytes.fromhex(text))
