from __future__ import annotations

from collections.abc import Iterator
from contextlib import closing
from typing import BinaryIO

import structlog
from blossom_core.errors import HashValidationError, TransferError, TransferIntegrityError
from blossom_core.models import Blob, Hash, parse_hash
from blossom_core.ports import BlobSource
from blossom_core.transfer import stream_blob, write_error, write_headers
from fastapi import FastAPI, Request, Response

from blossom_server.adapters import LocalBlobStore
from blossom_server.config import Settings
from blossom_server.http.responses import BufferedResponseSink

logger = structlog.get_logger(__name__)


def _hash_from_path(name: str) -> Hash:
    # BUD-01 allows an optional file extension after the hash
    hex_part = name.split(".", 1)[0]
    try:
        return parse_hash(hex_part)
    except HashValidationError as exc:
        raise TransferError(400, "invalid sha256 hash") from exc


def _stream_and_close(handle: BinaryIO, blob: Blob, blob_hash: Hash, size: int, chunk_size: int) -> Iterator[bytes]:
    """Stream the payload, closing the handle however the stream ends.

    Headers are already sent by then, so a size mismatch aborts the
    connection instead of producing an error response.
    """
    with closing(handle):
        try:
            yield from stream_blob(blob, size, chunk_size=chunk_size)
        except TransferIntegrityError as exc:
            logger.error("blob_transfer_corrupt", sha256=blob_hash.hex(), expected=exc.expected, actual=exc.actual)
            raise
    logger.info("blob_served", sha256=blob_hash.hex(), method="GET", size=size)


def create_app(settings: Settings | None = None) -> FastAPI:
    cfg = settings or Settings()
    cfg.ensure_dirs()

    app = FastAPI(title="Blossom Blob Server", version="0.1.0")
    app.state.settings = cfg
    app.state.blob_store = LocalBlobStore(str(cfg.blob_path))

    @app.exception_handler(TransferError)
    def transfer_error_handler(request: Request, exc: TransferError) -> Response:
        logger.info("request_failed", path=request.url.path, code=exc.code, reason=exc.reason)
        sink = BufferedResponseSink()
        write_error(sink, exc)
        return sink.to_response()

    @app.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.api_route("/{name}", methods=["GET", "HEAD"], response_model=None)
    def get_blob(name: str, request: Request) -> Response:
        blob_hash = _hash_from_path(name)
        store: BlobSource = request.app.state.blob_store
        handle = store.open(blob_hash)
        if handle is None:
            raise TransferError(404, "blob not found")

        sink = BufferedResponseSink()
        try:
            blob = Blob(handle)
            size = write_headers(sink, blob)
        except OSError as exc:
            handle.close()
            logger.error("blob_read_failed", sha256=blob_hash.hex(), error=str(exc))
            raise TransferError(500, "failed to read blob") from exc
        except BaseException:
            handle.close()
            raise

        if request.method == "HEAD":
            handle.close()
            logger.info("blob_served", sha256=blob_hash.hex(), method="HEAD", size=size)
            return sink.to_response()
        return sink.to_streaming_response(_stream_and_close(handle, blob, blob_hash, size, cfg.chunk_size))

    return app
