from blossom_core.services.sniffer import (
    DEFAULT_EXTENSION,
    DEFAULT_MEDIA_TYPE,
    SNIFF_LEN,
    detect_media_type,
    extension_for_media_type,
    strip_parameters,
)

__all__ = [
    "DEFAULT_EXTENSION",
    "DEFAULT_MEDIA_TYPE",
    "SNIFF_LEN",
    "detect_media_type",
    "extension_for_media_type",
    "strip_parameters",
]
