from __future__ import annotations

from collections.abc import MutableMapping
from typing import Protocol


class ResponseSink(Protocol):
    @property
    def headers(self) -> MutableMapping[str, str]: ...

    def write(self, data: bytes) -> int:
        """Write ``data`` and return how many bytes were accepted.

        A count below ``len(data)`` means the sink dropped the rest; the
        transfer writer treats that as an integrity failure.
        """
        ...

    def write_status(self, status_code: int) -> None: ...
