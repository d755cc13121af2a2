from __future__ import annotations

import mimetypes

import magic

SNIFF_LEN = 512
DEFAULT_MEDIA_TYPE = "application/octet-stream"
DEFAULT_EXTENSION = ".bin"

# libmagic labels for zero-length input
_EMPTY_TYPES = {"application/x-empty", "inode/x-empty"}

# Extensions preferred over the longest registered one.
_CANONICAL_EXTENSIONS = {
    "application/octet-stream": ".bin",
    "application/gzip": ".gz",
    "application/x-gzip": ".gz",
    "application/x-rar": ".rar",
    "application/x-rar-compressed": ".rar",
    "audio/x-wav": ".wav",
    "font/otf": ".otf",
    "font/ttf": ".ttf",
    "font/woff": ".woff",
    "font/woff2": ".woff2",
    "image/jpeg": ".jpg",
    "image/webp": ".webp",
    "text/plain": ".txt",
    "video/webm": ".webm",
}

_MAGIC = magic.Magic(mime=True, mime_encoding=True)
_MIME_DB = mimetypes.MimeTypes()


def detect_media_type(prefix: bytes | None) -> str:
    """Infer a content type from the first bytes of a blob with libmagic.

    Only the first ``SNIFF_LEN`` bytes are considered. Textual types keep their
    ``charset`` parameter; empty or unrecognised input yields
    ``application/octet-stream``.
    """
    if not prefix:
        return DEFAULT_MEDIA_TYPE
    detected = _MAGIC.from_buffer(bytes(prefix[:SNIFF_LEN]))
    essence, _, params = detected.partition(";")
    essence = essence.strip().lower()
    if not essence or essence in _EMPTY_TYPES:
        return DEFAULT_MEDIA_TYPE

    charset = params.strip().removeprefix("charset=").strip()
    if essence.startswith("text/") and charset and charset != "binary":
        return f"{essence}; charset={charset}"
    return essence


def strip_parameters(content_type: str) -> str:
    return content_type.split(";", 1)[0].strip().lower()


def extension_for_media_type(media_type: str) -> str:
    essence = strip_parameters(media_type)
    if not essence:
        return DEFAULT_EXTENSION
    canonical = _CANONICAL_EXTENSIONS.get(essence)
    if canonical is not None:
        return canonical

    extensions = _MIME_DB.guess_all_extensions(essence, strict=False)
    if not extensions:
        return DEFAULT_EXTENSION
    # max() keeps the first of equally long candidates
    return max(extensions, key=len)
