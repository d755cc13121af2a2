from blossom_server.adapters.blob_store import LocalBlobStore

__all__ = ["LocalBlobStore"]
