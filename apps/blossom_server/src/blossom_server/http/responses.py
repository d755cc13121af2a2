from __future__ import annotations

from collections.abc import Iterator

from fastapi import Response
from fastapi.responses import StreamingResponse


class BufferedResponseSink:
    """Collects headers, status and a small body for one FastAPI response.

    Blob payloads are not written here; GET streams them through
    ``to_streaming_response`` once the framing headers are set.
    """

    def __init__(self) -> None:
        self._headers: dict[str, str] = {}
        self._body = bytearray()
        self.status_code = 200

    @property
    def headers(self) -> dict[str, str]:
        return self._headers

    def write(self, data: bytes) -> int:
        self._body.extend(data)
        return len(data)

    def write_status(self, status_code: int) -> None:
        self.status_code = status_code

    def to_response(self) -> Response:
        return Response(content=bytes(self._body), status_code=self.status_code, headers=self._headers)

    def to_streaming_response(self, chunks: Iterator[bytes]) -> StreamingResponse:
        return StreamingResponse(chunks, status_code=self.status_code, headers=self._headers)
