from blossom_core.models.blob import Blob
from blossom_core.models.entities import BlobMeta, HashField, utcnow
from blossom_core.models.hash import HASH_SIZE, HEX_SIZE, Hash, compute_hash, parse_hash

__all__ = [
    "HASH_SIZE",
    "HEX_SIZE",
    "Blob",
    "BlobMeta",
    "Hash",
    "HashField",
    "compute_hash",
    "parse_hash",
    "utcnow",
]
