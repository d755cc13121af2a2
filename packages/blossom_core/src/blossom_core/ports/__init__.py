from blossom_core.ports.blob import BlobSource
from blossom_core.ports.sink import ResponseSink
from blossom_core.ports.source import ByteSource

__all__ = [
    "BlobSource",
    "ByteSource",
    "ResponseSink",
]
