from __future__ import annotations

import pytest


class RecordingSink:
    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.body = bytearray()
        self.status_code: int | None = None

    def write(self, data: bytes) -> int:
        self.body.extend(data)
        return len(data)

    def write_status(self, status_code: int) -> None:
        self.status_code = status_code


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
