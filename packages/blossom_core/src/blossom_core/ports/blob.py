from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable

from blossom_core.models import BlobMeta, Hash


@runtime_checkable
class BlobSource(Protocol):
    """Storage collaborator: hands out seekable payload streams keyed by hash.

    The caller closes every stream returned by ``open``.
    """

    def open(self, blob_hash: Hash) -> BinaryIO | None: ...

    def meta(self, blob_hash: Hash) -> BlobMeta | None: ...
