from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import BinaryIO

import structlog
from blossom_core.models import Blob, BlobMeta, Hash, compute_hash
from pydantic import ValidationError

logger = structlog.get_logger(__name__)

_META_SUFFIX = ".json"


class LocalBlobStore:
    """Blobs stored as ``<sha256>`` files with a ``<sha256>.json`` metadata sidecar."""

    def __init__(self, base_dir: str) -> None:
        self._base_dir = Path(base_dir)
        self._base_dir.mkdir(parents=True, exist_ok=True)

    def _payload_path(self, blob_hash: Hash) -> Path:
        return self._base_dir / blob_hash.hex()

    def _meta_path(self, blob_hash: Hash) -> Path:
        return self._base_dir / f"{blob_hash.hex()}{_META_SUFFIX}"

    def put(self, data: bytes) -> BlobMeta:
        blob_hash = compute_hash(data)
        path = self._payload_path(blob_hash)
        path.write_bytes(data)
        with path.open("rb") as handle:
            meta = Blob(handle).meta(blob_hash)
        self._meta_path(blob_hash).write_text(meta.model_dump_json(), encoding="utf-8")
        return meta

    def open(self, blob_hash: Hash) -> BinaryIO | None:
        path = self._payload_path(blob_hash)
        if not path.is_file():
            return None
        return path.open("rb")

    def meta(self, blob_hash: Hash) -> BlobMeta | None:
        path = self._payload_path(blob_hash)
        if not path.is_file():
            return None

        meta_path = self._meta_path(blob_hash)
        if meta_path.is_file():
            try:
                return BlobMeta.model_validate_json(meta_path.read_text(encoding="utf-8"))
            except ValidationError:
                logger.warning("blob_meta_invalid", sha256=blob_hash.hex())

        created_at = datetime.fromtimestamp(path.stat().st_mtime, UTC)
        with path.open("rb") as handle:
            return Blob(handle).meta(blob_hash, created_at=created_at)
