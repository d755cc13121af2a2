from __future__ import annotations

import io
from datetime import datetime
from typing import TYPE_CHECKING

from blossom_core.errors import NonSeekableSourceError
from blossom_core.models.entities import BlobMeta, utcnow
from blossom_core.services.sniffer import (
    DEFAULT_EXTENSION,
    DEFAULT_MEDIA_TYPE,
    SNIFF_LEN,
    detect_media_type,
    extension_for_media_type,
    strip_parameters,
)

if TYPE_CHECKING:
    from blossom_core.models.hash import Hash
    from blossom_core.ports.source import ByteSource


class Blob:
    """Live handle over a seekable byte source.

    Every metadata lookup reads from the start of the stream and seeks back to
    offset 0 before returning, so lookups can be repeated in any order and a
    following full read still sees the whole content. The handle never closes
    its source; the caller owns it.

    Calls on one handle share a single read cursor and must not run
    concurrently.
    """

    def __init__(self, source: ByteSource | None = None) -> None:
        if source is not None and not source.seekable():
            raise NonSeekableSourceError("blob source must support seeking")
        self._source = source

    @property
    def source(self) -> ByteSource | None:
        return self._source

    def size(self) -> int:
        if self._source is None:
            return 0
        end = self._source.seek(0, io.SEEK_END)
        self._source.seek(0, io.SEEK_SET)
        return end

    def content_type(self) -> str:
        if self._source is None:
            return DEFAULT_MEDIA_TYPE
        prefix = self._read_prefix()
        self._source.seek(0, io.SEEK_SET)
        return detect_media_type(prefix)

    def media_type(self) -> str:
        return strip_parameters(self.content_type())

    def extension(self) -> str:
        try:
            media_type = self.media_type()
        except (OSError, ValueError):
            return DEFAULT_EXTENSION
        return extension_for_media_type(media_type)

    def meta(self, blob_hash: Hash, *, created_at: datetime | None = None) -> BlobMeta:
        return BlobMeta(
            hash=blob_hash,
            media_type=self.media_type(),
            size=self.size(),
            created_at=created_at or utcnow(),
        )

    def _read_prefix(self) -> bytes:
        # raw streams may return short reads before EOF
        chunks: list[bytes] = []
        remaining = SNIFF_LEN
        while remaining > 0:
            chunk = self._source.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)
