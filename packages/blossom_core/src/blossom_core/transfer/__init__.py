from blossom_core.transfer.writer import (
    DEFAULT_CHUNK_SIZE,
    REASON_HEADER,
    stream_blob,
    write_blob,
    write_error,
    write_headers,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "REASON_HEADER",
    "stream_blob",
    "write_blob",
    "write_error",
    "write_headers",
]
