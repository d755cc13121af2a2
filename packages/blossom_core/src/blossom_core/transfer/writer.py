from __future__ import annotations

from collections.abc import Iterator

import structlog

from blossom_core.errors import TransferError, TransferIntegrityError
from blossom_core.models import Blob
from blossom_core.ports import ResponseSink

logger = structlog.get_logger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024
REASON_HEADER = "X-Reason"


def write_headers(sink: ResponseSink, blob: Blob) -> int:
    """Set Content-Type and Content-Length for ``blob`` and return the declared size."""
    content_type = blob.content_type()
    size = blob.size()
    sink.headers["Content-Type"] = content_type
    sink.headers["Content-Length"] = str(size)
    return size


def stream_blob(blob: Blob, size: int, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the blob content, failing at the end if it does not add up to ``size``."""
    written = 0
    source = blob.source
    if source is not None:
        while True:
            chunk = source.read(chunk_size)
            if not chunk:
                break
            written += len(chunk)
            yield chunk
    if written != size:
        logger.warning("blob_size_mismatch", expected=size, actual=written)
        raise TransferIntegrityError(size, written)


def write_blob(sink: ResponseSink, blob: Blob, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Write ``blob`` to ``sink`` with framing headers (BUD-01).

    Content is copied from the blob's current position, which every metadata
    lookup leaves at the start.
    """
    size = write_headers(sink, blob)
    written = 0
    for chunk in stream_blob(blob, size, chunk_size=chunk_size):
        written += sink.write(chunk)
    if written != size:
        # ResponseSink.write may accept fewer bytes than it was given
        logger.warning("blob_size_mismatch", expected=size, actual=written)
        raise TransferIntegrityError(size, written)
    logger.debug("blob_written", size=size)
    return written


def write_error(sink: ResponseSink, error: TransferError) -> None:
    """Finish the response with the error's status and an empty body.

    A non-empty reason is sent in the ``X-Reason`` header.
    """
    if error.reason:
        sink.headers[REASON_HEADER] = error.reason
    sink.write_status(error.code)
