from blossom_core.errors import (
    BlossomError,
    HashValidationError,
    NonSeekableSourceError,
    TransferError,
    TransferIntegrityError,
    transfer_errors_equal,
)
from blossom_core.models import Blob, BlobMeta, Hash, compute_hash, parse_hash
from blossom_core.services import detect_media_type, extension_for_media_type
from blossom_core.transfer import write_blob, write_error

__all__ = [
    "Blob",
    "BlobMeta",
    "BlossomError",
    "Hash",
    "HashValidationError",
    "NonSeekableSourceError",
    "TransferError",
    "TransferIntegrityError",
    "compute_hash",
    "detect_media_type",
    "extension_for_media_type",
    "parse_hash",
    "transfer_errors_equal",
    "write_blob",
    "write_error",
]
