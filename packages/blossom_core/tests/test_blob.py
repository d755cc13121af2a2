from __future__ import annotations

import io
from datetime import UTC, datetime

import pytest
from blossom_core import Blob, NonSeekableSourceError, compute_hash

PNG = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR" + b"\x00" * 600
HTML = b"<!DOCTYPE html>\n<html><head><title>t</title></head><body></body></html>\n"


class NonSeekable(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False


class FailingSeek(io.BytesIO):
    def seek(self, offset: int, whence: int = 0) -> int:
        raise OSError("seek failed")


class TrickleReader(io.RawIOBase):
    """Returns at most 7 bytes per read, like a slow raw stream."""

    def __init__(self, data: bytes) -> None:
        self._buf = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def seek(self, offset: int, whence: int = 0) -> int:
        return self._buf.seek(offset, whence)

    def readinto(self, b) -> int:
        chunk = self._buf.read(min(len(b), 7))
        b[: len(chunk)] = chunk
        return len(chunk)


def test_size_and_media_type_rewind() -> None:
    source = io.BytesIO(PNG)
    blob = Blob(source)

    assert blob.size() == len(PNG)
    assert source.tell() == 0
    assert blob.media_type() == "image/png"
    assert source.tell() == 0
    assert source.read() == PNG


def test_repeated_lookups_in_any_order_are_idempotent() -> None:
    blob = Blob(io.BytesIO(b"plain text content"))
    results = [
        (blob.media_type(), blob.size()),
        (blob.size(), blob.media_type()),
        (blob.extension(), blob.size()),
    ]
    assert results[0] == ("text/plain", 18)
    assert results[1] == (18, "text/plain")
    assert results[2] == (".txt", 18)
    assert blob.source.read() == b"plain text content"


def test_media_type_strips_parameters() -> None:
    blob = Blob(io.BytesIO(HTML))
    assert blob.content_type().startswith("text/html; charset=")
    assert blob.media_type() == "text/html"
    assert blob.extension() == ".html"


def test_short_content_is_sniffed_as_is() -> None:
    blob = Blob(io.BytesIO(b"%PDF-1.4\n"))
    assert blob.media_type() == "application/pdf"
    assert blob.size() == 9


def test_prefix_read_handles_short_reads() -> None:
    blob = Blob(TrickleReader(b"%PDF-1.4\n" + b"x" * 1000))
    assert blob.media_type() == "application/pdf"
    assert blob.source.read(5) == b"%PDF-"


def test_blob_without_source() -> None:
    blob = Blob()
    assert blob.size() == 0
    assert blob.media_type() == "application/octet-stream"
    assert blob.extension() == ".bin"


def test_empty_source_is_octet_stream() -> None:
    blob = Blob(io.BytesIO(b""))
    assert blob.size() == 0
    assert blob.media_type() == "application/octet-stream"


def test_non_seekable_source_is_rejected() -> None:
    with pytest.raises(NonSeekableSourceError):
        Blob(NonSeekable())


def test_seek_failure_surfaces_as_os_error() -> None:
    blob = Blob(FailingSeek(b"data"))
    with pytest.raises(OSError):
        blob.size()
    with pytest.raises(OSError):
        blob.media_type()


def test_extension_never_fails() -> None:
    assert Blob(FailingSeek(b"data")).extension() == ".bin"


def test_source_is_not_closed() -> None:
    source = io.BytesIO(PNG)
    blob = Blob(source)
    blob.size()
    blob.media_type()
    blob.extension()
    assert not source.closed


def test_meta_from_blob() -> None:
    created = datetime(2024, 1, 1, tzinfo=UTC)
    blob_hash = compute_hash(PNG)
    meta = Blob(io.BytesIO(PNG)).meta(blob_hash, created_at=created)

    assert meta.hash == blob_hash
    assert meta.media_type == "image/png"
    assert meta.size == len(PNG)
    assert meta.created_at == created


def test_file_backed_blob(tmp_path) -> None:
    path = tmp_path / "image.png"
    path.write_bytes(PNG)
    with path.open("rb") as handle:
        blob = Blob(handle)
        assert blob.size() == len(PNG)
        assert blob.extension() == ".png"
        assert handle.read() == PNG


def test_extension_of_closed_source_is_fallback() -> None:
    source = io.BytesIO(PNG)
    blob = Blob(source)
    source.close()

    assert blob.extension() == ".bin"
    with pytest.raises(ValueError):
        blob.media_type()


def test_extension_when_read_raises_value_error() -> None:
    class BadRead(io.BytesIO):
        def read(self, size: int | None = -1) -> bytes:
            raise ValueError("decoder state lost")

    blob = Blob(BadRead(PNG))
    assert blob.extension() == ".bin"
    with pytest.raises(ValueError, match="decoder state lost"):
        blob.media_type()


def test_read_failure_surfaces_as_os_error() -> None:
    class BrokenRead(io.BytesIO):
        def read(self, size: int | None = -1) -> bytes:
            raise OSError("device gone")

    blob = Blob(BrokenRead(PNG))
    assert blob.size() == len(PNG)
    with pytest.raises(OSError, match="device gone"):
        blob.media_type()
    assert blob.extension() == ".bin"
